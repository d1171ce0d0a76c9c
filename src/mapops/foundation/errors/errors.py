"""Standardized errors for map operations.

Transform failures are never wrapped: they propagate unchanged (or are recorded
as rejected outcomes by the fail-tolerant path). The types here cover caller
contract violations and internal defects only.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorCode(StrEnum):
    """Machine-readable codes for contract violations."""
    INVALID_TRANSFORM = "INVALID_TRANSFORM"
    MISALIGNED_OUTCOMES = "MISALIGNED_OUTCOMES"
    UNKNOWN = "UNKNOWN"


class MapError(BaseModel):
    """Structured description of a failed map operation.

    Attributes:
        operation: Name of the operation that failed (e.g. ``all_settled_map``)
        message: Human-readable error message
        code: Machine-readable error code
        details: Optional extra information for debugging
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Map Error",
            "description": "Contract violation raised by a map operation",
            "examples": [{
                "operation": "transform_map",
                "message": "transform must be callable, got int",
                "code": "INVALID_TRANSFORM",
            }],
        },
    )

    operation: Annotated[str, Field(min_length=1, description="Operation that produced the error")]
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error classification")
    details: str | None = Field(default=None, description="Optional detailed error info")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    def render(self) -> str:
        parts = [f"{self.operation}: {self.message} [{self.code}]"]
        if self.details:
            parts.append(f"\n{self.details}")
        return "".join(parts)

    __str__ = render


class MapOpsException(Exception):
    """Exception wrapping a MapError for raising."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, error: MapError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def create(cls, operation: str, message: str, *, details: str | None = None) -> Self:
        """Create exception with the class's default error code."""
        return cls(MapError(operation=operation, message=message, code=cls.code, details=details))


class InvalidTransformError(MapOpsException, TypeError):
    """A transform, predicate or factory argument is not callable."""

    code = ErrorCode.INVALID_TRANSFORM


class OutcomeAlignmentError(MapOpsException):
    """The join produced a different number of outcomes than entries scheduled.

    Indicates a defect, never a transform failure.
    """

    code = ErrorCode.MISALIGNED_OUTCOMES


def require_callable(operation: str, name: str, fn: object) -> None:
    """Raise InvalidTransformError unless ``fn`` is callable."""
    if not callable(fn):
        raise InvalidTransformError.create(operation, f"{name} must be callable, got {type(fn).__name__}")
