"""Configuration helpers for the command-line tool."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    data_file: Optional[Path] = Field(default=None)
    log_level: str = Field(default="WARNING")
    prompt: str = Field(default="> ")

    model_config = SettingsConfigDict(
        env_prefix="GOLFSTATS_", env_file=".env", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["get_settings", "reset_settings_cache"]
