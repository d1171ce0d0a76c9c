"""Shared type aliases for structured error and log payloads."""

from __future__ import annotations

from typing import Any, Union

# Any for recursive slots to keep Pydantic schema resolution simple
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
