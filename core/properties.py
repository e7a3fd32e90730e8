"""
properties.py -- Typed view of a Notion page's property bag.

Every Notion property is a JSON object tagged by "type", with the payload
stored under a key of the same name:

    {"type": "rich_text", "rich_text": [{"plain_text": "Ann", ...}]}
    {"type": "url", "url": "https://example.com"}
    {"type": "files", "files": [{"type": "external", "external": {"url": ...}}]}

parse_property() turns one of those into exactly one of the dataclasses below.
Shapes it does not recognise, or recognised tags with a malformed payload,
become UnsupportedProperty / empty values instead of raising -- a bad property
must never take down the record it belongs to.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

TEXT_KINDS = ("title", "rich_text")


@dataclass(frozen=True)
class TextProperty:
    kind: str  # "title" | "rich_text"
    texts: tuple[Optional[str], ...]  # plain_text of each entry, in order

    def first_text(self) -> Optional[str]:
        return self.texts[0] if self.texts else None


@dataclass(frozen=True)
class UrlProperty:
    url: Optional[str]


@dataclass(frozen=True)
class FileRef:
    kind: str  # "file" (hosted by Notion) | "external"
    url: Optional[str]


@dataclass(frozen=True)
class FilesProperty:
    files: tuple[FileRef, ...]


@dataclass(frozen=True)
class UnsupportedProperty:
    kind: str


Property = Union[TextProperty, UrlProperty, FilesProperty, UnsupportedProperty]

MISSING = UnsupportedProperty("missing")


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _parse_file(raw: Any) -> FileRef:
    if not isinstance(raw, dict):
        return FileRef(kind="unknown", url=None)
    kind = raw.get("type")
    if kind is None:
        present = [k for k in ("file", "external") if k in raw]
        kind = present[0] if len(present) == 1 else None
    if kind in ("file", "external"):
        holder = raw.get(kind)
        url = _str_or_none(holder.get("url")) if isinstance(holder, dict) else None
        return FileRef(kind=kind, url=url)
    return FileRef(kind=str(kind), url=None)


def parse_property(raw: Any) -> Property:
    """Classify one raw property value by its "type" discriminator."""
    if not isinstance(raw, dict):
        return MISSING

    kind = raw.get("type")
    if not isinstance(kind, str):
        # Untagged value (hand-written fixtures, older exports): accept it only
        # when exactly one known payload key identifies the kind.
        present = [k for k in (*TEXT_KINDS, "url", "files") if k in raw]
        if len(present) != 1:
            return UnsupportedProperty(kind="untagged")
        kind = present[0]
    payload = raw.get(kind)

    if kind in TEXT_KINDS:
        entries = payload if isinstance(payload, list) else []
        texts = tuple(_str_or_none(e.get("plain_text")) if isinstance(e, dict) else None for e in entries)
        return TextProperty(kind=kind, texts=texts)

    if kind == "url":
        return UrlProperty(url=_str_or_none(payload))

    if kind == "files":
        entries = payload if isinstance(payload, list) else []
        return FilesProperty(files=tuple(_parse_file(f) for f in entries))

    return UnsupportedProperty(kind=kind)
