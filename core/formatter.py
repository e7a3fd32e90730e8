"""
formatter.py -- Renders Card lists to terminal output or JSON.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Optional

from .models import SENTINEL_TITLE, Card

W = 68  # output width

# ---------------------------------------------------------------------------
# ANSI color control
# ---------------------------------------------------------------------------


def _use_color() -> bool:
    """Return True if stdout is a TTY and color has not been disabled.

    Respects NO_COLOR env var (https://no-color.org) and checks sys.stdout.isatty().
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


_color_enabled: Optional[bool] = None  # None = auto-detect


def disable_color() -> None:
    """Force-disable color output (called when --no-color flag is set)."""
    global _color_enabled
    _color_enabled = False


def _color_active() -> bool:
    if _color_enabled is not None:
        return _color_enabled
    return _use_color()


def _c(code: str, text: str) -> str:
    return f"\033[{code}m{text}\033[0m" if _color_active() else text


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def to_json(cards: list[Card]) -> str:
    return json.dumps([asdict(c) for c in cards], indent=2)


def format_card(card: Card) -> str:
    title = _c("91", card.title) if card.title == SENTINEL_TITLE else _c("1", card.title)
    lines = [
        f"  {title}",
        f"  {card.description[: W - 2]}",
        f"  {_c('2', 'by')} {card.author}",
    ]
    if card.link:
        lines.append(f"  {_c('2', 'link ')} {card.link}")
    if card.image_url:
        lines.append(f"  {_c('2', 'image')} {card.image_url}")
    lines.append(f"  {_c('2', 'id   ')} {card.id}")
    return "\n".join(lines)


def print_cards(cards: list[Card]) -> None:
    print("─" * W)
    for card in cards:
        print(format_card(card))
        print("─" * W)
    print(f"  {len(cards)} card(s)\n")
