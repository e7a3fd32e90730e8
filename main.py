#!/usr/bin/env python3
"""
DeTA landing -- print the cards the landing page would show.

Reads the same configuration as the web server, so it is a quick way to check
a Notion database before deploying.

Usage:
  python main.py
  python main.py --json
  python main.py --no-sort
  python main.py --no-color

Environment variables:
  NOTION_TOKEN        Notion integration secret (required).
  NOTION_DATABASE_ID  Database holding the cards (required).
"""

import argparse
import dataclasses
import sys

from pydantic import ValidationError

from core.cards import load_cards
from core.config import get_settings
from core.formatter import disable_color, print_cards, to_json


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="deta-cards",
        description="Fetch and print the landing page cards from Notion.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the cards as a JSON array",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Return rows in database order instead of ascending by title",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI color codes in terminal output",
    )
    args = parser.parse_args()

    if args.no_color:
        disable_color()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"  [!] Configuration error: {e.errors()[0]['msg']}", file=sys.stderr)
        return 2

    config = settings.content_store()
    if args.no_sort:
        config = dataclasses.replace(config, sort_by_title=False)

    batch = load_cards(config)
    if not batch.ok:
        print(f"  [!] Could not read database {config.database_id}: {batch.error}", file=sys.stderr)
        return 1

    if args.json:
        print(to_json(batch.cards))
    else:
        print_cards(batch.cards)

    if batch.skipped:
        print(f"  [!] {batch.skipped} row(s) skipped: no properties.", file=sys.stderr)
    if batch.failed_records:
        print(f"  [!] {batch.failed_records} row(s) could not be mapped.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
