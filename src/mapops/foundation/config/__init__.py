"""Configuration management using pydantic-settings."""

from .settings import (
    LoggingSettings,
    MapOpsSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "MapOpsSettings",
    "clear_settings_cache",
    "get_settings",
]
