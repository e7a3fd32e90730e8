"""
core/cards.py -- Notion database rows -> Card list for the landing page.

fetch_cards() never raises. Failures are absorbed at the narrowest level that
can still produce something useful:

  field   -- absent or mistyped property      -> field default   (FieldResult)
  record  -- unexpected fault mapping one row  -> sentinel card   (RecordResult)
  batch   -- query failed / anything escaped   -> empty list      (CardBatch)

Rows that have no properties bag at all are skipped with a warning; they are
not rows the landing page can show, and not mapping failures either.

No module-level client and no global state -- the caller passes the config
and, optionally, a client. Safe to call concurrently.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Protocol

from core.config import ContentStoreConfig
from core.fetcher import TITLE_ASCENDING, NotionClient
from core.models import (
    DEFAULT_AUTHOR,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    Card,
    CardBatch,
    FieldResult,
    RecordResult,
    sentinel_card,
)
from core.properties import FilesProperty, TextProperty, UrlProperty, parse_property

logger = logging.getLogger("deta.cards")

# card field -> (property name, expected text kind, default)
TEXT_FIELDS: dict[str, tuple[str, str, str]] = {
    "title": ("title", "title", DEFAULT_TITLE),
    "description": ("description", "rich_text", DEFAULT_DESCRIPTION),
    "author": ("author", "rich_text", DEFAULT_AUTHOR),
}
LINK_PROPERTY = "link"
IMAGE_PROPERTY = "image"


class DatabaseClient(Protocol):
    def query_database(self, database_id: str, sorts: Optional[list[dict[str, str]]] = None) -> list[dict]: ...


class MalformedRecordError(ValueError):
    """A row whose overall shape is unusable (as opposed to one bad property)."""


# ---------------------------------------------------------------------------
# Field level
# ---------------------------------------------------------------------------


def extract_text(properties: Mapping[str, Any], name: str, kind: str, default: str) -> FieldResult:
    prop = parse_property(properties.get(name))
    if isinstance(prop, TextProperty) and prop.kind == kind:
        text = prop.first_text()
        if text:
            return FieldResult(text)
    return FieldResult(default, defaulted=True)


def extract_url(properties: Mapping[str, Any], name: str = LINK_PROPERTY) -> FieldResult:
    prop = parse_property(properties.get(name))
    if isinstance(prop, UrlProperty) and prop.url:
        return FieldResult(prop.url)
    return FieldResult("", defaulted=True)


def extract_image_url(properties: Mapping[str, Any], name: str = IMAGE_PROPERTY) -> FieldResult:
    """URL of the first attachment in a files property.

    Only the first file is looked at. A hosted file ("file") and an external
    link ("external") keep their URL under different keys; parse_property
    already read the one that matches the file's own type.
    """
    prop = parse_property(properties.get(name))
    if isinstance(prop, FilesProperty) and prop.files:
        first = prop.files[0]
        if first.kind in ("file", "external") and first.url:
            return FieldResult(first.url)
    return FieldResult("", defaulted=True)


# ---------------------------------------------------------------------------
# Record level
# ---------------------------------------------------------------------------


def map_record(raw: Mapping[str, Any]) -> RecordResult:
    """Map one raw row to a Card. Raises MalformedRecordError on unusable rows."""
    card_id = raw.get("id")
    if not isinstance(card_id, str) or not card_id:
        raise MalformedRecordError(f"record id is {card_id!r}")
    properties = raw.get("properties")
    if not isinstance(properties, Mapping):
        raise MalformedRecordError(f"properties is {type(properties).__name__}, not an object")

    text: dict[str, str] = {}
    missing: list[str] = []
    for field_name, (prop_name, kind, default) in TEXT_FIELDS.items():
        result = extract_text(properties, prop_name, kind, default)
        text[field_name] = result.value
        if result.defaulted:
            missing.append(field_name)

    card = Card(
        id=card_id,
        title=text["title"],
        description=text["description"],
        author=text["author"],
        link=extract_url(properties).value,
        image_url=extract_image_url(properties).value,
    )
    return RecordResult(card=card, missing_fields=missing)


def map_record_safe(raw: Any, index: int) -> RecordResult:
    """map_record() that substitutes the sentinel card instead of raising."""
    try:
        if not isinstance(raw, Mapping):
            raise MalformedRecordError(f"record is {type(raw).__name__}, not an object")
        return map_record(raw)
    except Exception as e:
        raw_id = raw.get("id") if isinstance(raw, Mapping) else None
        card_id = raw_id if isinstance(raw_id, str) and raw_id else f"error-{index}"
        logger.exception("Failed to map record %s", card_id)
        return RecordResult(card=sentinel_card(card_id), failed=True, error=str(e))


def _has_properties(raw: Any) -> bool:
    # Non-object rows are left for map_record_safe() to turn into sentinels.
    return not isinstance(raw, Mapping) or raw.get("properties") is not None


# ---------------------------------------------------------------------------
# Batch level
# ---------------------------------------------------------------------------


def load_cards(config: ContentStoreConfig, client: Optional[DatabaseClient] = None) -> CardBatch:
    """Fetch the database and map every row. Never raises; see CardBatch.error."""
    own_client: Optional[NotionClient] = None
    try:
        if client is None:
            client = own_client = NotionClient(config)
        logger.info("Fetching cards from database %s", config.database_id)
        sorts = TITLE_ASCENDING if config.sort_by_title else None
        rows = client.query_database(config.database_id, sorts=sorts)
        logger.info("Fetched %d records from database %s", len(rows), config.database_id)

        batch = CardBatch()
        for index, raw in enumerate(rows):
            if not _has_properties(raw):
                logger.warning("Skipping record %s: no properties", raw.get("id", f"#{index}"))
                batch.skipped += 1
                continue
            result = map_record_safe(raw, index)
            if result.missing_fields and not result.failed:
                logger.warning(
                    "Record %s missing text fields: %s",
                    result.card.id,
                    ", ".join(result.missing_fields),
                )
            batch.records.append(result)
            batch.cards.append(result.card)
        return batch
    except Exception as e:
        logger.error("Error fetching cards from database %s: %s", config.database_id, e)
        return CardBatch(error=str(e) or type(e).__name__)
    finally:
        if own_client is not None:
            own_client.close()


def fetch_cards(config: ContentStoreConfig, client: Optional[DatabaseClient] = None) -> list[Card]:
    """Return the landing-page cards, or [] if the database could not be read."""
    return load_cards(config, client).cards
