"""Foundation layer: configuration and error types."""

from .config import LoggingSettings, MapOpsSettings, clear_settings_cache, get_settings
from .errors import (
    ErrorCode,
    InvalidTransformError,
    MapError,
    MapOpsException,
    OutcomeAlignmentError,
)

__all__ = [
    "LoggingSettings", "MapOpsSettings", "clear_settings_cache", "get_settings",
    "ErrorCode", "MapError", "MapOpsException", "InvalidTransformError", "OutcomeAlignmentError",
]
