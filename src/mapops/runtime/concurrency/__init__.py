"""Concurrency primitives for the async map operations.

Key Components:
    - gather: Fail-fast join over concurrently scheduled awaitables
    - gather_settled: Fail-tolerant join producing Settled records
    - resolve: Accept a value or an awaitable of a value

Design:
    - Everything runs as asyncio tasks on the current event loop
    - Results always come back in argument order
    - No cancellation: failed joins leave sibling tasks running
"""

from __future__ import annotations

from .wait import (
    Settled,
    SettledStatus,
    gather,
    gather_settled,
    resolve,
)

__all__ = [
    "Settled",
    "SettledStatus",
    "gather",
    "gather_settled",
    "resolve",
]
