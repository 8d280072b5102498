"""Configuration management for port_selector package.

Environment variables override defaults using the PORT_SELECTOR_ prefix.

Example environment variables:
    PORT_SELECTOR_RANGE_LOW=50000
    PORT_SELECTOR_MAX_ATTEMPTS=500
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from port_selector.types.port import MAX_PORT, MIN_PORT, Port


class PortSelectorSettings(BaseSettings):
    """Defaults for randomized port searches and logging."""

    model_config = SettingsConfigDict(env_prefix="PORT_SELECTOR_", extra="ignore")

    range_low: Port = MIN_PORT
    """Lowest port drawn by a randomized search (inclusive)."""

    range_high: Port = MAX_PORT
    """Upper bound of a randomized search (exclusive)."""

    max_attempts: int = Field(default=100, ge=0)
    """Random draws before a search gives up."""

    log_level: str = "INFO"
    """Log level name used by the command-line interface."""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache
def get_settings() -> PortSelectorSettings:
    """Get port selector settings (cached)."""
    return PortSelectorSettings()
