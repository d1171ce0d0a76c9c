"""Tests for synchronous map operations.

Validates:
- Key preservation and insertion order
- Identity law for transform_map
- Predicate filtering with order retained
- Failure propagation without partial results
- get_or_default / get_or_insert_with mutation rules
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TypeGuard

import pytest

from mapops import (
    InvalidTransformError,
    filter_map,
    get_or_default,
    get_or_insert_with,
    transform_map,
)


# ═════════════════════════════════════════════════════════════════════════════
# transform_map
# ═════════════════════════════════════════════════════════════════════════════


def test_transform_map_scales_values() -> None:
    assert transform_map({"a": 1, "b": 2, "c": 3}, lambda v, k: v * 10) == {"a": 10, "b": 20, "c": 30}


def test_transform_map_identity() -> None:
    """transform_map(M, identity) == M"""
    m = {"x": [1], "y": None, 3: "three"}
    out = transform_map(m, lambda v, k: v)
    assert out == m
    assert out is not m


def test_transform_map_passes_key() -> None:
    out = transform_map({"a": 1, "b": 2}, lambda v, k: f"{k}={v}")
    assert out == {"a": "a=1", "b": "b=2"}


def test_transform_map_preserves_order() -> None:
    m = {"z": 1, "a": 2, "m": 3}
    assert list(transform_map(m, lambda v, k: -v)) == ["z", "a", "m"]


def test_transform_map_accepts_any_mapping() -> None:
    m = OrderedDict([(2, "b"), (1, "a")])
    out = transform_map(m, lambda v, k: v.upper())
    assert type(out) is dict
    assert list(out.items()) == [(2, "B"), (1, "A")]


def test_transform_map_empty() -> None:
    assert transform_map({}, lambda v, k: v) == {}


def test_transform_map_propagates_failure() -> None:
    calls: list[str] = []

    def explode_on_b(v: int, k: str) -> int:
        calls.append(k)
        if k == "b":
            raise ValueError("bad b")
        return v

    with pytest.raises(ValueError, match="bad b"):
        transform_map({"a": 1, "b": 2, "c": 3}, explode_on_b)
    assert calls == ["a", "b"]


def test_transform_map_rejects_non_callable() -> None:
    with pytest.raises(InvalidTransformError) as exc_info:
        transform_map({}, 42)  # type: ignore[arg-type]
    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.error.operation == "transform_map"


# ═════════════════════════════════════════════════════════════════════════════
# filter_map
# ═════════════════════════════════════════════════════════════════════════════


def test_filter_map_even_values() -> None:
    assert filter_map({"a": 1, "b": 2, "c": 3}, lambda v, k: v % 2 == 0) == {"b": 2}


def test_filter_map_matches_predicate_exactly() -> None:
    m = {k: i for i, k in enumerate("abcdefg")}
    pred = lambda v, k: k in "aceg" or v > 5  # noqa: E731
    out = filter_map(m, pred)
    assert out == {k: v for k, v in m.items() if pred(v, k)}
    assert list(out) == ["a", "c", "e", "g"]


def test_filter_map_uses_key() -> None:
    assert filter_map({"keep": 1, "drop": 2}, lambda v, k: k.startswith("k")) == {"keep": 1}


def test_filter_map_type_guard() -> None:
    def is_str(v: object, k: str) -> TypeGuard[str]:
        return isinstance(v, str)

    out = filter_map({"a": "x", "b": 1, "c": "y"}, is_str)
    assert out == {"a": "x", "c": "y"}


def test_filter_map_does_not_mutate_input() -> None:
    m = {"a": 1, "b": 2}
    filter_map(m, lambda v, k: False)
    assert m == {"a": 1, "b": 2}


def test_filter_map_propagates_failure() -> None:
    def boom(v: int, k: str) -> bool:
        raise KeyError(k)

    with pytest.raises(KeyError):
        filter_map({"a": 1}, boom)


# ═════════════════════════════════════════════════════════════════════════════
# get_or_default / get_or_insert_with
# ═════════════════════════════════════════════════════════════════════════════


def test_get_or_default_inserts_then_keeps() -> None:
    m: dict[str, int] = {}
    assert get_or_default(m, "x", 5) == 5
    assert m == {"x": 5}

    assert get_or_default(m, "x", 9) == 5
    assert m == {"x": 5}


def test_get_or_default_existing_falsy_value() -> None:
    m = {"x": None, "y": 0}
    assert get_or_default(m, "x", 1) is None
    assert get_or_default(m, "y", 1) == 0
    assert m == {"x": None, "y": 0}


def test_get_or_default_returns_resident_object() -> None:
    m: dict[str, list[int]] = {}
    get_or_default(m, "evens", []).append(2)
    get_or_default(m, "evens", []).append(4)
    assert m == {"evens": [2, 4]}


def test_get_or_insert_with_is_lazy() -> None:
    calls = 0

    def factory() -> list[int]:
        nonlocal calls
        calls += 1
        return []

    m: dict[str, list[int]] = {}
    get_or_insert_with(m, "k", factory).append(1)
    get_or_insert_with(m, "k", factory).append(2)
    assert m == {"k": [1, 2]}
    assert calls == 1


def test_get_or_insert_with_failure_leaves_map_unchanged() -> None:
    def factory() -> int:
        raise RuntimeError("no default")

    m = {"a": 1}
    with pytest.raises(RuntimeError, match="no default"):
        get_or_insert_with(m, "b", factory)
    assert m == {"a": 1}


def test_get_or_insert_with_rejects_non_callable() -> None:
    with pytest.raises(InvalidTransformError):
        get_or_insert_with({}, "k", 5)  # type: ignore[arg-type]
