"""Structured logging for map operations.

Events are a name plus keyword fields. Fields come from three places, merged
in order: the ambient ``log_context`` scope, the logger's bound context, and
the call site. Output goes to one global renderer (plain text on stderr by
default, JSON Lines for aggregation).

Quick Start:
    >>> from mapops.runtime.observability.logging import configure_logging, get_logger
    >>> configure_logging(format="json", level="DEBUG")
    >>> log = get_logger("jobs")
    >>> log.debug("map.scheduled", operation="transform_map_async", entries=3)
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO

import orjson

from mapops.foundation.errors import JsonDict, JsonValue

if TYPE_CHECKING:
    from mapops.foundation.config import MapOpsSettings

_scope: ContextVar[JsonDict] = ContextVar("mapops_log_scope", default={})
_renderer: ContextVar[LogRenderer | None] = ContextVar("mapops_log_renderer", default=None)
_min_level: ContextVar[int] = ContextVar("mapops_log_level", default=logging.INFO)


@dataclass(slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def iso_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()


@dataclass(slots=True)
class BoundLogger:
    """Logger carrying a fixed set of fields; bind() returns an extended copy.

    Without an explicit renderer or level it follows the global configuration
    at emit time, so module-level loggers see later configure_logging() calls.
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger({**self.context, **kw}, self._renderer, self._level)

    @property
    def level(self) -> int:
        return _min_level.get() if self._level is None else self._level

    def _emit(self, level: int, event: str, fields: JsonDict) -> None:
        if level < self.level:
            return
        entry = LogEntry(time.time(), logging.getLevelName(level).lower(), event,
                         {**_scope.get(), **self.context, **fields})
        (self._renderer or _active_renderer()).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None: self._emit(logging.DEBUG, event, kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._emit(logging.INFO, event, kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._emit(logging.WARNING, event, kw)
    def error(self, event: str, **kw: JsonValue) -> None: self._emit(logging.ERROR, event, kw)


@contextmanager
def log_context(**kw: JsonValue) -> Iterator[None]:
    """Attach fields to every entry logged inside the block (async-safe)."""
    token = _scope.set({**_scope.get(), **kw})
    try:
        yield
    finally:
        _scope.reset(token)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """One line per entry: ``[level] event key=value ...`` with keys sorted."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        head = [entry.iso_time] if self.show_timestamp else []
        fields = [f"{k}={orjson.dumps(v, default=repr).decode()}" for k, v in sorted(entry.context.items())]
        print(" ".join([*head, f"[{entry.level}]", entry.event, *fields]), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines, one object per entry."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = {"timestamp": entry.iso_time, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(record, option=orjson.OPT_NON_STR_KEYS, default=repr).decode(), file=self.output)


class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global configuration
# ─────────────────────────────────────────────────────────────────────────────


def configure_logging(format: str = "console", level: str = "INFO", *,  # noqa: A002
                      output: TextIO | None = None) -> LogRenderer:
    """Set the global renderer ("console", "json" or "none") and minimum level."""
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _min_level.set(getattr(logging, level.upper(), logging.INFO))
    _renderer.set(renderer)
    return renderer


def configure_from_settings(settings: MapOpsSettings | None = None, *, output: TextIO | None = None) -> LogRenderer:
    """Apply MapOpsSettings (the cached global settings by default)."""
    if settings is None:
        from mapops.foundation.config import get_settings
        settings = get_settings()
    return configure_logging(settings.logging.format, settings.log_level, output=output)


def reset_logging() -> None:
    _renderer.set(None)
    _min_level.set(logging.INFO)


def get_logger(name: str | None = None, **fields: JsonValue) -> BoundLogger:
    """Logger with ``name`` bound as the ``logger`` field."""
    return BoundLogger({**fields, **({"logger": name} if name else {})})


def _active_renderer() -> LogRenderer:
    if (renderer := _renderer.get()) is None:
        _renderer.set(renderer := ConsoleRenderer())
    return renderer
