"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Static reference tables (catalog, overlays, zodiac profiles)
    data_dir: str = Field(default="", alias="DATA_DIR")
    default_year: str = Field(default="2026", alias="DEFAULT_YEAR")

    # Scoring constants override file (JSON of dotted keys)
    scoring_overrides_path: str = Field(default="", alias="SCORING_OVERRIDES_PATH")

    # Site
    site_url: str = Field(default="http://localhost:5173", alias="SITE_URL")
    timezone: str = Field(default="UTC", alias="TIMEZONE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
