"""Error handling for mapops.

- ErrorCode: Machine-readable codes for contract violations
- MapError/MapOpsException: Structured errors and their raisable wrapper
- InvalidTransformError, OutcomeAlignmentError: Concrete contract violations
- JsonValue/JsonDict: Payload aliases shared with structured logging
"""

from .errors import (
    ErrorCode,
    InvalidTransformError,
    MapError,
    MapOpsException,
    OutcomeAlignmentError,
    require_callable,
)
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    "ErrorCode", "MapError", "MapOpsException",
    "InvalidTransformError", "OutcomeAlignmentError", "require_callable",
    "JsonDict", "JsonPrimitive", "JsonValue",
]
