"""Join strategies for concurrent operations.

Provides the two joins the async map operations are built on:
    - gather: Wait for all, fail fast on first error
    - gather_settled: Wait for all regardless of errors
    - resolve: Await a value only if it is awaitable

Neither join cancels anything: a failure in ``gather`` discards the sibling
results, but the sibling tasks keep running to completion.

Example:
    >>> results = await gather(fetch_user(1), fetch_user(2))

    >>> outcomes = await gather_settled(risky_a(), risky_b())
    >>> [o.status for o in outcomes]
    ['fulfilled', 'rejected']
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SettledStatus(StrEnum):
    """Status of a settled operation."""
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class Settled(Generic[T]):
    """Outcome of a settled operation (success or failure).

    Similar to JavaScript's Promise.allSettled() results.

    Attributes:
        status: 'fulfilled' or 'rejected'
        value: Result value if fulfilled
        reason: Exception if rejected
    """

    status: SettledStatus
    value: T | None = None
    reason: BaseException | None = None

    @classmethod
    def fulfilled(cls, value: T) -> Settled[T]:
        return cls(SettledStatus.FULFILLED, value=value)

    @classmethod
    def rejected(cls, reason: BaseException) -> Settled[T]:
        return cls(SettledStatus.REJECTED, reason=reason)

    @property
    def is_fulfilled(self) -> bool:
        return self.status == SettledStatus.FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.status == SettledStatus.REJECTED

    def unwrap(self) -> T:
        """Get value or raise stored reason."""
        if self.is_rejected:
            raise self.reason or RuntimeError("Rejected with no reason")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Get value or return default."""
        return self.value if self.is_fulfilled else default  # type: ignore[return-value]


async def resolve(value: T | Awaitable[T]) -> T:
    """Return ``value``, awaiting it first if it is awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


async def gather(*aws: Awaitable[T]) -> list[T]:
    """Run all awaitables concurrently and return their results in argument order.

    Every awaitable is scheduled as a task before the caller suspends. The
    first failure observed by the join propagates unchanged; the remaining
    tasks are not cancelled.

    Example:
        >>> results = await gather(
        ...     fetch_user(1),
        ...     fetch_user(2),
        ... )
    """
    if not aws:
        return []
    tasks = [asyncio.ensure_future(a) for a in aws]
    return list(await asyncio.gather(*tasks))


async def gather_settled(*aws: Awaitable[T]) -> list[Settled[T]]:
    """Gather all results, never raising for an awaitable's failure.

    Waits for every operation regardless of success or failure and maps each
    completion to a Settled record explicitly.

    Returns:
        List of Settled results in argument order

    Example:
        >>> results = await gather_settled(
        ...     risky_operation_1(),
        ...     risky_operation_2(),
        ... )
        >>> for r in results:
        ...     if r.is_fulfilled:
        ...         print(f"Success: {r.value}")
        ...     else:
        ...         print(f"Failed: {r.reason}")
    """
    if not aws:
        return []
    tasks = [asyncio.ensure_future(_settle(a)) for a in aws]
    return list(await asyncio.gather(*tasks))


async def _settle(aw: Awaitable[T]) -> Settled[T]:
    # A returned exception object is a value, only a raise is a rejection
    try:
        return Settled.fulfilled(await aw)
    except BaseException as e:
        return Settled.rejected(e)
