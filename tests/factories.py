"""
tests/factories.py -- Raw Notion rows and fakes shared by the test modules.

Builders produce rows in the real Notion API shape (every property tagged by
"type"), so tests exercise the same parsing path as production.
"""

from __future__ import annotations

from typing import Any, Optional

from core.config import ContentStoreConfig

TEST_CONFIG = ContentStoreConfig(token="secret_test_token", database_id="db-test")


def title_prop(text: str) -> dict[str, Any]:
    return {"id": "title", "type": "title", "title": [{"type": "text", "plain_text": text}]}


def rich_text_prop(text: str) -> dict[str, Any]:
    return {"id": "rt", "type": "rich_text", "rich_text": [{"type": "text", "plain_text": text}]}


def url_prop(url: Optional[str]) -> dict[str, Any]:
    return {"id": "url", "type": "url", "url": url}


def files_prop(*files: dict[str, Any]) -> dict[str, Any]:
    return {"id": "img", "type": "files", "files": list(files)}


def hosted_file(url: str) -> dict[str, Any]:
    return {"name": "a.png", "type": "file", "file": {"url": url, "expiry_time": "2030-01-01T00:00:00.000Z"}}


def external_file(url: str) -> dict[str, Any]:
    return {"name": "b.png", "type": "external", "external": {"url": url}}


def page(page_id: str, **properties: dict[str, Any]) -> dict[str, Any]:
    return {"object": "page", "id": page_id, "properties": properties}


def full_page(page_id: str, title: str = "Hello") -> dict[str, Any]:
    return page(
        page_id,
        title=title_prop(title),
        description=rich_text_prop("A description"),
        author=rich_text_prop("Ann"),
        link=url_prop("https://example.com/" + page_id),
        image=files_prop(external_file("https://img.example.com/" + page_id + ".png")),
    )


class FakeNotionClient:
    """Records calls and returns canned rows, or raises error if set."""

    def __init__(self, rows: Optional[list[Any]] = None, error: Optional[Exception] = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def query_database(self, database_id: str, sorts=None) -> list[Any]:
        self.calls.append((database_id, sorts))
        if self.error is not None:
            raise self.error
        return list(self.rows)

    def close(self) -> None:
        pass
