"""
cache/store.py -- In-process cache for the landing page card list.

The landing page re-reads the Notion database at most once per revalidation
window (REVALIDATE_SECONDS, default 60). Within the window every render gets
the same list. The cache holds one entry -- there is one database.

Usage:
    cache = CardCache(ttl=60)
    cards = cache.get()        # list[Card] or None when empty/stale
    cache.set(cards)
    cache.clear()
"""

import threading
import time
from typing import Optional

from core.cards import DatabaseClient, load_cards
from core.config import ContentStoreConfig
from core.models import Card

_DEFAULT_TTL = 60  # seconds


class CardCache:
    def __init__(self, ttl: int = _DEFAULT_TTL) -> None:
        self.ttl = ttl
        # Sync route handlers run in a thread pool; guard the entry.
        self._lock = threading.Lock()
        self._cards: Optional[list[Card]] = None
        self._cached_at = 0.0

    def get(self) -> Optional[list[Card]]:
        """Return the cached cards if present and younger than the TTL."""
        if self.ttl <= 0:
            return None
        with self._lock:
            if self._cards is None:
                return None
            if time.monotonic() - self._cached_at > self.ttl:
                self._cards = None
                return None
            return list(self._cards)

    def set(self, cards: list[Card]) -> None:
        """Store cards, replacing any existing entry."""
        if self.ttl <= 0:
            return
        with self._lock:
            self._cards = list(cards)
            self._cached_at = time.monotonic()

    def clear(self) -> None:
        with self._lock:
            self._cards = None


def cached_cards(cache: CardCache, config: ContentStoreConfig, client: Optional[DatabaseClient] = None) -> list[Card]:
    """Return cards from the cache, fetching on a miss.

    Only successful fetches are stored, so a Notion outage is retried on the
    next render instead of pinning an empty carousel for a whole window.
    """
    cards = cache.get()
    if cards is not None:
        return cards
    batch = load_cards(config, client)
    if batch.ok:
        cache.set(batch.cards)
    return batch.cards
