"""
tests/conftest.py -- Shared test fixtures for the landing site.

This module provides:
  - _patch_lifespan(): wires fakes into app.state, bypassing real startup
  - client: TestClient over the assembled app (API + web routes)
  - config: the frozen ContentStoreConfig used by adapter unit tests

Row builders and FakeNotionClient live in tests/factories.py.

The Notion env vars must be set before any core/api import so get_settings()
passes validation instead of raising at import time.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import asynccontextmanager
from unittest.mock import MagicMock

# CRITICAL: Set required config before any core/api import.
os.environ.setdefault("NOTION_TOKEN", "secret_test_token")
os.environ.setdefault("NOTION_DATABASE_ID", "db-test")
os.environ.setdefault("AUTH_PROVIDER_URL", "https://auth.example.test")
os.environ.setdefault("AUTH_RATE_LIMIT", "1000/minute")

import pytest
from fastapi.testclient import TestClient

from asgi import app
from auth.provider import AuthProviderClient
from cache.store import CardCache
from core.config import ContentStoreConfig
from tests.factories import TEST_CONFIG, FakeNotionClient


@pytest.fixture
def config() -> ContentStoreConfig:
    return TEST_CONFIG


def _patch_lifespan(notion: FakeNotionClient, provider: MagicMock, cache: CardCache):
    """Return an async context manager that replaces the real lifespan."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.content_store = TEST_CONFIG
        app.state.notion_client = notion
        app.state.card_cache = cache
        app.state.auth_provider = provider
        yield

    return test_lifespan


@pytest.fixture
def client() -> Generator[tuple[TestClient, FakeNotionClient, MagicMock], None, None]:
    """Yield (client, fake_notion, provider_mock) over the assembled app.

    The card cache TTL is 0 so every request re-reads the fake; tests that
    exercise caching build their own CardCache.
    """
    notion = FakeNotionClient()
    provider = MagicMock(spec=AuthProviderClient)
    provider.get_user.return_value = None
    app.router.lifespan_context = _patch_lifespan(notion, provider, CardCache(ttl=0))

    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client, notion, provider
