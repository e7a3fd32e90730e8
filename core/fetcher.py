"""
fetcher.py -- Notion database client.
The only module that talks to the content store over the network.
"""

import logging
from typing import Any, Optional

import requests

from core.config import ContentStoreConfig

logger = logging.getLogger("deta.fetcher")

TITLE_ASCENDING = [{"property": "title", "direction": "ascending"}]


class ContentStoreError(Exception):
    """Raised when a database query cannot be completed."""


class NotionClient:
    """Minimal client for the Notion database query endpoint.

    One requests.Session per client for connection pooling. max_redirects=3
    replaces the requests default of 30 -- the API does not redirect, so a
    long chain means something is wrong.
    """

    def __init__(self, config: ContentStoreConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self._session = session or requests.Session()
        self._session.max_redirects = 3
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "Notion-Version": config.notion_version,
                "Content-Type": "application/json",
            }
        )

    def query_database(self, database_id: str, sorts: Optional[list[dict[str, str]]] = None) -> list[dict[str, Any]]:
        """Return every record in the database, following pagination cursors.

        Stops after config.max_pages pages even if the store reports more.
        Raises ContentStoreError on any transport, HTTP, or decoding failure.
        """
        url = f"{self.config.api_url}/databases/{database_id}/query"
        body: dict[str, Any] = {"page_size": self.config.page_size}
        if sorts:
            body["sorts"] = sorts

        results: list[dict[str, Any]] = []
        for page in range(1, self.config.max_pages + 1):
            data = self._post(url, body)
            batch = data.get("results")
            if not isinstance(batch, list):
                raise ContentStoreError("Query response has no results list")
            results.extend(batch)

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                return results
            body["start_cursor"] = cursor
            logger.debug("Fetching page %d of %s", page + 1, database_id)

        logger.warning(
            "Database %s has more than %d pages; returning the first %d records",
            database_id,
            self.config.max_pages,
            len(results),
        )
        return results

    def _post(self, url: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self._session.post(url, json=body, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise ContentStoreError(f"Request to content store failed: {e}") from e

        if not resp.ok:
            raise ContentStoreError(f"Content store returned {resp.status_code}: {_error_message(resp)}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ContentStoreError("Content store returned invalid JSON") from e
        if not isinstance(data, dict):
            raise ContentStoreError("Content store returned an unexpected payload")
        return data

    def close(self) -> None:
        self._session.close()


def _error_message(resp: requests.Response) -> str:
    """Pull Notion's human-readable error out of a failed response."""
    try:
        data = resp.json()
    except ValueError:
        return resp.reason or "unknown error"
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.reason or "unknown error"
