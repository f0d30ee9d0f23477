"""Library Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a MODEL_COLLECTION_* environment variable
    - get_settings() is cached (lru_cache): single instance per process
    - log_level is always an upper-case stdlib level name

Design Decisions:
    - pydantic-settings BaseSettings with a .env file and MODEL_COLLECTION_ prefix
    - Core modules never read settings; only the logging setup does
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODEL_COLLECTION_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
