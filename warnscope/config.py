"""Environment-driven settings.

Read from WARNSCOPE_* environment variables or a .env file::

    export WARNSCOPE_LOG_LEVEL=INFO
    export WARNSCOPE_LOGGER_NAME=myapp.warnings
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the logging sink and warning serialization."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WARNSCOPE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LogWriter defaults
    log_level: str = "WARNING"
    logger_name: str = "warnscope"

    # Message.to_json
    json_ensure_ascii: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once. Call get_settings.cache_clear() to reload."""
    return Settings()


__all__ = ("Settings", "get_settings")
