"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the site happen here. No module should
call os.getenv() or os.environ.get() directly -- import get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. notion_token -> NOTION_TOKEN).

  @model_validator(mode="after"): The Notion credential and database id are
      required. A missing value is a hard startup failure -- api/main.py calls
      get_settings() at import, so the server refuses to start without them.

The adapter never sees Settings. It receives a frozen ContentStoreConfig built
by Settings.content_store(), so it can be tested without touching the
process environment.

Layer rule: core/ is the kernel. This module may not import from api/, web/,
auth/, or cache/.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("deta.config")

DEFAULT_NOTION_API_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"


@dataclass(frozen=True)
class ContentStoreConfig:
    """Immutable connection details for the content store.

    Built once at startup and handed to core.cards.fetch_cards().
    """

    token: str
    database_id: str
    api_url: str = DEFAULT_NOTION_API_URL
    notion_version: str = DEFAULT_NOTION_VERSION
    sort_by_title: bool = True
    page_size: int = 100
    max_pages: int = 10
    timeout: float = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    NOTION_TOKEN and NOTION_DATABASE_ID have empty-string defaults so the
    validator can produce one readable error naming every missing variable,
    rather than pydantic's generic "field required" message.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "INFO"
    site_title: str = "Powered by DeTA"
    allowed_hosts: list[str] = ["localhost", "127.0.0.1", "*.localhost", "testserver"]

    # ------------------------------------------------------------------
    # Content store (Notion)
    # ------------------------------------------------------------------

    # Empty string is the sentinel for "not configured". The validator
    # below raises, so callers never see "".
    notion_token: str = ""
    notion_database_id: str = ""
    notion_api_url: str = DEFAULT_NOTION_API_URL
    notion_version: str = DEFAULT_NOTION_VERSION
    notion_sort_by_title: bool = True
    # Notion caps page_size at 100.
    notion_page_size: int = Field(default=100, ge=1, le=100)
    notion_max_pages: int = Field(default=10, ge=1)
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    # ------------------------------------------------------------------
    # Auth provider (optional -- empty string means sign-in is disabled)
    # ------------------------------------------------------------------

    auth_provider_url: str = ""
    auth_provider_key: str = ""
    session_cookie_name: str = "sb-access-token"
    auth_rate_limit: str = "30/minute"

    # ------------------------------------------------------------------
    # Page rendering
    # ------------------------------------------------------------------

    # Cards are re-fetched at most once per window. 0 disables the cache.
    revalidate_seconds: int = Field(default=60, ge=0)

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_content_store(self) -> "Settings":
        """Refuse to start without the Notion credential and database id."""
        self.notion_token = self.notion_token.strip()
        self.notion_database_id = self.notion_database_id.strip()
        missing = []
        if not self.notion_token:
            missing.append("NOTION_TOKEN")
        if not self.notion_database_id:
            missing.append("NOTION_DATABASE_ID")
        if missing:
            raise ValueError(
                f"Missing {', '.join(missing)} environment variable(s). "
                "Set them in your environment or .env file."
            )
        if not self.auth_provider_url:
            logger.warning("AUTH_PROVIDER_URL not set -- sign-in endpoints will report no session")
        return self

    def content_store(self) -> ContentStoreConfig:
        """Return the frozen content-store config derived from these settings."""
        return ContentStoreConfig(
            token=self.notion_token,
            database_id=self.notion_database_id,
            api_url=self.notion_api_url.rstrip("/"),
            notion_version=self.notion_version,
            sort_by_title=self.notion_sort_by_title,
            page_size=self.notion_page_size,
            max_pages=self.notion_max_pages,
            timeout=self.http_timeout_seconds,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
