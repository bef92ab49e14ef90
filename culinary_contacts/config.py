"""
Configuration management for culinary_contacts.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from culinary_contacts.constants import (
    API_TIMEOUT_SECONDS,
    CACHE_TTL_DAYS,
    DEFAULT_CACHE_DIR,
    EXPORT_BATCH_SIZE,
    HUNTER_DOMAIN_SEARCH_URL,
    MAX_CONTACTS_PER_JOB,
    RATE_LIMIT_COOLDOWN_SECONDS,
    REQUEST_DELAY_SECONDS,
    SEARCH_API_URL,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a working default except the API keys; clients
    degrade to empty results when a key is missing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Enrichment / search providers
    hunter_api_key: str | None = Field(
        default=None,
        description="Hunter.io API key for domain-search lookups",
    )
    search_api_key: str | None = Field(
        default=None,
        description="SearchAPI.io key used for company domain discovery",
    )
    hunter_api_url: str = Field(default=HUNTER_DOMAIN_SEARCH_URL)
    search_api_url: str = Field(default=SEARCH_API_URL)

    # Pacing
    api_timeout_seconds: float = Field(default=API_TIMEOUT_SECONDS, gt=0)
    request_delay_seconds: float = Field(default=REQUEST_DELAY_SECONDS, ge=0)
    rate_limit_cooldown_seconds: float = Field(default=RATE_LIMIT_COOLDOWN_SECONDS, ge=0)

    # Cache
    cache_enabled: bool = Field(default=True)
    cache_dir: Path = Field(default=Path(DEFAULT_CACHE_DIR))
    cache_ttl_days: int = Field(default=CACHE_TTL_DAYS, gt=0)

    # Exclusions
    extra_excluded_companies: list[str] = Field(
        default_factory=list,
        description="Additional exact-exclusion names (JSON list in env)",
    )
    always_refresh_companies: list[str] = Field(
        default_factory=lambda: ["fish cheeks", "fish cheeks noho", "fish cheeks - noho"],
        description="Company names whose cache entries are always evicted",
    )

    # Run
    run_time_budget_minutes: float | None = Field(
        default=None,
        description="Stop starting new listings after this many minutes",
    )
    export_batch_size: int = Field(default=EXPORT_BATCH_SIZE, gt=0)
    max_contacts_per_job: int = Field(default=MAX_CONTACTS_PER_JOB, gt=0)

    @field_validator("hunter_api_key", "search_api_key", mode="before")
    @classmethod
    def empty_string_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional fields."""
        if isinstance(v, str):
            v = v.strip()
            return v if v else None
        return v

    @field_validator("extra_excluded_companies", "always_refresh_companies")
    @classmethod
    def lowercase_names(cls, v: list[str]) -> list[str]:
        """Company name lists are matched case-insensitively."""
        return [name.strip().lower() for name in v if name and name.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_hunter_api_key() -> str | None:
    """Get Hunter API key from settings (optional)."""
    return get_settings().hunter_api_key


def get_search_api_key() -> str | None:
    """Get SearchAPI key from settings (optional)."""
    return get_settings().search_api_key


def get_cache_dir() -> Path:
    """Get the cache snapshot directory."""
    return get_settings().cache_dir
