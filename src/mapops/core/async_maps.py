"""Concurrent operations over key-value mappings.

Both operations schedule one invocation of ``transform(value, key)`` per entry
on the running event loop, all of them before suspending, then join once:

    - transform_map_async: fail-fast. The first failure observed by the join
      propagates and no map is returned. Other invocations are NOT cancelled;
      their side effects still happen, only their results are dropped.
    - all_settled_map: fail-tolerant. Every invocation's outcome is recorded
      as a Settled and the operation itself never fails because of a
      transform.

The transform may return its result directly or an awaitable of it. A
synchronous raise inside the transform counts as a failure of that entry.

Output order always follows the input's iteration order, never completion
order. Keys are captured once before scheduling and the same snapshot is used
to rebuild the result; the input mapping must not be mutated while an
operation over it is in flight.

Logging is opt-in: the only events are ``map.scheduled``, ``map.failed`` and
``map.settled`` at debug level, dropped unless the level is lowered (e.g.
``MAPOPS_DEBUG=true`` with configure_from_settings()). Failures are reported
to the caller through the raised exception or the Settled records, never
through the log.

Example:
    >>> async def fetch(url: str, name: str) -> int:
    ...     return await http_status(url)
    >>> await transform_map_async({"home": "https://a", "docs": "https://b"}, fetch)
    {'home': 200, 'docs': 200}
    >>> outcomes = await all_settled_map(sites, fetch)
    >>> ok, failed = partition_settled(outcomes)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TypeVar

from mapops.foundation.errors import OutcomeAlignmentError, require_callable
from mapops.runtime.concurrency import Settled, gather, gather_settled, resolve
from mapops.runtime.observability.logging import get_logger

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

MaybeAwaitable = R | Awaitable[R]

log = get_logger("mapops.async_maps")


async def _invoke(transform: Callable[[V, K], MaybeAwaitable[R]], value: V, key: K) -> R:
    return await resolve(transform(value, key))


async def transform_map_async(
    mapping: Mapping[K, V],
    transform: Callable[[V, K], MaybeAwaitable[R]],
) -> dict[K, R]:
    """Run ``transform`` over every entry concurrently, failing fast.

    Args:
        mapping: Input mapping, treated as read-only
        transform: ``(value, key) -> result`` or an awaitable of the result

    Returns:
        New dict with the same keys, in input order

    Raises:
        Exception: Whatever a failing invocation raised (which one wins when
            several fail is unspecified)
        InvalidTransformError: If ``transform`` is not callable
    """
    require_callable("transform_map_async", "transform", transform)
    entries = list(mapping.items())
    if not entries:
        return {}

    op_log = log.bind(operation="transform_map_async")
    op_log.debug("map.scheduled", entries=len(entries))
    try:
        results = await gather(*(_invoke(transform, value, key) for key, value in entries))
    except Exception as e:
        op_log.debug("map.failed", error=type(e).__name__)
        raise
    return {key: result for (key, _), result in zip(entries, results)}


async def all_settled_map(
    mapping: Mapping[K, V],
    transform: Callable[[V, K], MaybeAwaitable[R]],
) -> dict[K, Settled[R]]:
    """Run ``transform`` over every entry concurrently, recording each outcome.

    Returns:
        New dict mapping every input key, in input order, to a Settled that
        is either fulfilled with the transform's result or rejected with the
        exception it raised

    Raises:
        InvalidTransformError: If ``transform`` is not callable
        OutcomeAlignmentError: If the join returned a different number of
            outcomes than entries scheduled (a defect, never a transform failure)
    """
    require_callable("all_settled_map", "transform", transform)
    entries = list(mapping.items())
    if not entries:
        return {}

    op_log = log.bind(operation="all_settled_map")
    op_log.debug("map.scheduled", entries=len(entries))
    outcomes = await gather_settled(*(_invoke(transform, value, key) for key, value in entries))
    if len(outcomes) != len(entries):
        raise OutcomeAlignmentError.create(
            "all_settled_map",
            f"join returned {len(outcomes)} outcomes for {len(entries)} entries",
        )

    rejected = sum(1 for o in outcomes if o.is_rejected)
    op_log.debug("map.settled", fulfilled=len(outcomes) - rejected, rejected=rejected)
    return {key: outcome for (key, _), outcome in zip(entries, outcomes)}


def partition_settled(settled: Mapping[K, Settled[R]]) -> tuple[dict[K, R], dict[K, BaseException]]:
    """Split all_settled_map output into fulfilled values and rejection reasons.

    Both dicts preserve the input order.
    """
    fulfilled: dict[K, R] = {}
    rejected: dict[K, BaseException] = {}
    for key, outcome in settled.items():
        if outcome.is_fulfilled:
            fulfilled[key] = outcome.value  # type: ignore[assignment]
        else:
            rejected[key] = outcome.reason  # type: ignore[assignment]
    return fulfilled, rejected
