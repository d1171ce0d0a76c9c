"""Synchronous operations over key-value mappings.

All functions take the transform/predicate as ``fn(value, key)`` and return a
fresh ``dict`` whose iteration order follows the input's. Failures raised by
the caller's function propagate unchanged and no partial result is returned.

Example:
    >>> scores = {"a": 1, "b": 2, "c": 3}
    >>> transform_map(scores, lambda v, k: v * 10)
    {'a': 10, 'b': 20, 'c': 30}
    >>> filter_map(scores, lambda v, k: v % 2 == 0)
    {'b': 2}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import TypeGuard, TypeVar, overload

from mapops.foundation.errors import require_callable

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


def transform_map(mapping: Mapping[K, V], transform: Callable[[V, K], R]) -> dict[K, R]:
    """Run ``transform`` over every entry, keeping the keys."""
    require_callable("transform_map", "transform", transform)
    return {key: transform(value, key) for key, value in mapping.items()}


@overload
def filter_map(mapping: Mapping[K, V], predicate: Callable[[V, K], TypeGuard[R]]) -> dict[K, R]: ...


@overload
def filter_map(mapping: Mapping[K, V], predicate: Callable[[V, K], bool]) -> dict[K, V]: ...


def filter_map(mapping: Mapping[K, V], predicate: Callable[[V, K], bool]) -> dict[K, V]:
    """Keep the entries for which ``predicate(value, key)`` holds.

    A ``TypeGuard`` predicate narrows the value type of the result; at runtime
    both forms behave the same.
    """
    require_callable("filter_map", "predicate", predicate)
    return {key: value for key, value in mapping.items() if predicate(value, key)}


def get_or_default(mapping: MutableMapping[K, V], key: K, default: V) -> V:
    """Get the value for ``key``, inserting ``default`` first if the key is absent.

    Mutates ``mapping`` in place. The return value is whatever is stored under
    ``key`` after the call.

    Example:
        >>> counts: dict[str, int] = {}
        >>> get_or_default(counts, "x", 5)
        5
        >>> get_or_default(counts, "x", 9)
        5
    """
    if key not in mapping:
        mapping[key] = default
    return mapping[key]


def get_or_insert_with(mapping: MutableMapping[K, V], key: K, factory: Callable[[], V]) -> V:
    """Like get_or_default, but only builds the default when the key is absent.

    A failing ``factory`` leaves ``mapping`` untouched.

    Example:
        >>> groups: dict[str, list[int]] = {}
        >>> get_or_insert_with(groups, "even", list).append(2)
        >>> groups
        {'even': [2]}
    """
    require_callable("get_or_insert_with", "factory", factory)
    if key not in mapping:
        mapping[key] = factory()
    return mapping[key]
