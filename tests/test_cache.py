"""Unit tests for cache/store.py -- CardCache and cached_cards."""

from unittest.mock import patch

from cache.store import CardCache, cached_cards
from core.fetcher import ContentStoreError
from core.models import Card
from tests.factories import TEST_CONFIG, FakeNotionClient, full_page

_CARDS = [Card(id="a"), Card(id="b")]


class TestCardCache:
    def test_empty_cache_misses(self):
        assert CardCache(ttl=60).get() is None

    def test_hit_within_ttl(self):
        cache = CardCache(ttl=60)
        cache.set(_CARDS)
        assert cache.get() == _CARDS

    def test_returns_copy(self):
        cache = CardCache(ttl=60)
        cache.set(_CARDS)
        cache.get().clear()
        assert cache.get() == _CARDS

    def test_expires_after_ttl(self):
        cache = CardCache(ttl=60)
        with patch("cache.store.time.monotonic", return_value=1000.0):
            cache.set(_CARDS)
        with patch("cache.store.time.monotonic", return_value=1061.0):
            assert cache.get() is None

    def test_zero_ttl_disables(self):
        cache = CardCache(ttl=0)
        cache.set(_CARDS)
        assert cache.get() is None

    def test_clear(self):
        cache = CardCache(ttl=60)
        cache.set(_CARDS)
        cache.clear()
        assert cache.get() is None


class TestCachedCards:
    def test_second_call_served_from_cache(self):
        cache = CardCache(ttl=60)
        client = FakeNotionClient([full_page("p1")])
        first = cached_cards(cache, TEST_CONFIG, client)
        second = cached_cards(cache, TEST_CONFIG, client)
        assert first == second
        assert len(client.calls) == 1

    def test_failed_fetch_not_cached(self):
        cache = CardCache(ttl=60)
        client = FakeNotionClient(error=ContentStoreError("down"))
        assert cached_cards(cache, TEST_CONFIG, client) == []
        client.error = None
        client.rows = [full_page("p1")]
        assert [c.id for c in cached_cards(cache, TEST_CONFIG, client)] == ["p1"]
        assert len(client.calls) == 2

    def test_empty_database_is_cached(self):
        cache = CardCache(ttl=60)
        client = FakeNotionClient([])
        cached_cards(cache, TEST_CONFIG, client)
        cached_cards(cache, TEST_CONFIG, client)
        assert len(client.calls) == 1
