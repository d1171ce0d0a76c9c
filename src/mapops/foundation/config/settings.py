"""Environment-based configuration using pydantic-settings.

Example:
    >>> from mapops.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # MAPOPS_DEBUG=true
    # MAPOPS_LOG_LEVEL=DEBUG
    # MAPOPS_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MAPOPS_LOG_",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class MapOpsSettings(BaseSettings):
    """Root settings for mapops.

    Loads configuration from environment variables with MAPOPS_ prefix.

    Example environment variables:
        MAPOPS_DEBUG=true
        MAPOPS_LOG_LEVEL=WARNING
        MAPOPS_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="MAPOPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug logging of map operations")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def log_level(self) -> LogLevel:
        """Effective log level: DEBUG in debug mode, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MapOpsSettings:
    """Get the global settings instance (cached)."""
    return MapOpsSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
