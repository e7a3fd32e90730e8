from dataclasses import dataclass, field
from typing import Optional

# ---------------------------------------------------------------------------
# Card defaults -- the literals the landing page shows for absent fields
# ---------------------------------------------------------------------------

DEFAULT_TITLE = "Untitled"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_AUTHOR = "Anonymous"

SENTINEL_TITLE = "Error: Failed to load content"
SENTINEL_DESCRIPTION = "This item could not be loaded."
SENTINEL_AUTHOR = "System"


@dataclass(frozen=True)
class Card:
    id: str
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    author: str = DEFAULT_AUTHOR
    link: str = ""  # "" = no link
    image_url: str = ""  # "" = show placeholder


def sentinel_card(card_id: str) -> Card:
    """Placeholder card for a record that could not be mapped."""
    return Card(
        id=card_id,
        title=SENTINEL_TITLE,
        description=SENTINEL_DESCRIPTION,
        author=SENTINEL_AUTHOR,
    )


# ---------------------------------------------------------------------------
# Per-tier results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldResult:
    value: str
    defaulted: bool = False


@dataclass
class RecordResult:
    card: Card
    failed: bool = False
    error: Optional[str] = None
    missing_fields: list[str] = field(default_factory=list)


@dataclass
class CardBatch:
    cards: list[Card] = field(default_factory=list)
    records: list[RecordResult] = field(default_factory=list)
    skipped: int = 0  # raw results with no properties bag
    error: Optional[str] = None  # set when the whole fetch failed

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed_records(self) -> int:
        return sum(1 for r in self.records if r.failed)
