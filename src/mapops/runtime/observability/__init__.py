"""Observability for mapops: structured logging."""

from .logging import configure_from_settings, configure_logging, get_logger, log_context, reset_logging

__all__ = ["configure_from_settings", "configure_logging", "get_logger", "log_context", "reset_logging"]
