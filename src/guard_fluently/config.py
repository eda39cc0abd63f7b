"""
Configuration — typed, validated settings loaded from the environment.

Uses pydantic-settings so the library can be tuned without code changes:

    GUARD_FLUENTLY_DEFAULT_NAME=argument
    GUARD_FLUENTLY_LOG_FAILURES=true
    GUARD_FLUENTLY_MAX_VALUE_LENGTH=120

Settings are read once and cached; tests call reset_settings() after
patching the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables prefixed with GUARD_FLUENTLY_
      2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="GUARD_FLUENTLY_",
        extra="ignore",
    )

    default_name: str = Field(
        default="value",
        min_length=1,
        description="Diagnostic name used when should() is called without one",
    )
    log_failures: bool = Field(
        default=False,
        description="Emit a debug log event for every raised guard error; off unless the host opts in",
    )
    log_level: str = Field(default="WARNING")
    max_value_length: int = Field(
        default=80,
        ge=8,
        description="Maximum length of a value repr embedded in a failure message",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Store level names upper-cased so they match the logging module."""
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> GuardSettings:
    """Return the process-wide settings, loading them on first use."""
    return GuardSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
