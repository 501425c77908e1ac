"""
parcel_tracker.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the persistence layer and logging.
- Offer a cached settings instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Every field can be overridden with a `PARCEL_`-prefixed environment variable,
    e.g. `PARCEL_DATABASE_URL=sqlite+aiosqlite:///./other.db`.
    """

    model_config = SettingsConfigDict(env_prefix="PARCEL_", case_sensitive=False)

    # dev/test create tables on startup; dev also logs in console format instead of JSON.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "parcel-tracker"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./tracker.db"
    db_echo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
