"""mapops - Generic operations over key-value mappings.

Element-wise transformation, filtering, concurrent transformation (fail-fast
and fail-tolerant) and get-or-initialize, all keyed and ordered like the input.

Quick Start:
    >>> from mapops import transform_map, filter_map, get_or_default
    >>> prices = {"apple": 1, "pear": 2, "plum": 3}
    >>> transform_map(prices, lambda v, k: v * 10)
    {'apple': 10, 'pear': 20, 'plum': 30}
    >>> filter_map(prices, lambda v, k: v % 2 == 0)
    {'pear': 2}

Concurrent transforms:
    >>> from mapops import transform_map_async, all_settled_map, partition_settled
    >>>
    >>> async def lookup(sku: int, name: str) -> str:
    ...     return await inventory.describe(sku)
    >>>
    >>> # Fail-fast: raises the first failure, no partial map
    >>> described = await transform_map_async(prices, lookup)
    >>>
    >>> # Fail-tolerant: every key maps to a Settled outcome
    >>> outcomes = await all_settled_map(prices, lookup)
    >>> ok, failed = partition_settled(outcomes)

Configuration:
    >>> from mapops import configure_from_settings
    >>> configure_from_settings()  # reads MAPOPS_* environment variables
"""

from .core import (
    all_settled_map,
    filter_map,
    get_or_default,
    get_or_insert_with,
    partition_settled,
    transform_map,
    transform_map_async,
)
from .foundation.config import LoggingSettings, MapOpsSettings, clear_settings_cache, get_settings
from .foundation.errors import (
    ErrorCode,
    InvalidTransformError,
    MapError,
    MapOpsException,
    OutcomeAlignmentError,
)
from .runtime.concurrency import Settled, SettledStatus, gather, gather_settled, resolve
from .runtime.observability.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
    reset_logging,
)

__version__ = "0.1.0"

__all__ = [
    # Map operations
    "transform_map", "filter_map", "get_or_default", "get_or_insert_with",
    "transform_map_async", "all_settled_map", "partition_settled",
    # Outcomes & joins
    "Settled", "SettledStatus", "gather", "gather_settled", "resolve",
    # Errors
    "ErrorCode", "MapError", "MapOpsException", "InvalidTransformError", "OutcomeAlignmentError",
    # Settings
    "LoggingSettings", "MapOpsSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "configure_from_settings", "get_logger", "log_context", "reset_logging",
]
