"""Shared fixtures: isolate global settings and logging configuration per test."""

from collections.abc import Iterator

import pytest

from mapops.foundation.config import clear_settings_cache
from mapops.runtime.observability.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_globals() -> Iterator[None]:
    """Reset cached settings and logging configuration around each test."""
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
