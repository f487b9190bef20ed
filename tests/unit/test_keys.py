"""Tests for key layout and strict comparison helpers."""

from __future__ import annotations

import math

import pytest

from jsarray._internal.keys import (
    is_array_like,
    is_dense,
    next_index,
    strict_equals,
)


class TestIsDense:
    """Tests for is_dense."""

    @pytest.mark.parametrize(
        ("keys", "expected"),
        [
            ([], True),
            ([0, 1, 2], True),
            ([1, 2], False),
            ([1, 0], False),
            ([0, 2], False),
            (["0", "1"], False),
            ([0, "a"], False),
        ],
    )
    def test_layouts(self, keys: list[object], expected: bool) -> None:
        """Only 0..n-1 in order is dense."""
        assert is_dense(keys) is expected

    def test_bool_keys_are_not_positions(self) -> None:
        """False/True are not 0/1 for density."""
        assert not is_dense([False, True])


class TestNextIndex:
    """Tests for next_index."""

    def test_empty(self) -> None:
        """Appending to nothing starts at 0."""
        assert next_index([]) == 0

    def test_past_largest_integer(self) -> None:
        """One past the largest integer key, wherever it sits."""
        assert next_index([3, "a", 10, 2]) == 11

    def test_string_keys_only(self) -> None:
        """String keys do not count."""
        assert next_index(["a", "b"]) == 0

    def test_negative_only_keys(self) -> None:
        """After only negative keys, appending continues from the largest."""
        assert next_index([-5]) == -4
        assert next_index([-5, -9, "a"]) == -4

    def test_ignores_bools(self) -> None:
        """True is not position 1."""
        assert next_index([True]) == 0


class TestIsArrayLike:
    """Tests for is_array_like."""

    def test_containers(self) -> None:
        """Lists, tuples and mappings are spliced."""
        assert is_array_like([1])
        assert is_array_like((1,))
        assert is_array_like({"a": 1})

    def test_scalars_and_text(self) -> None:
        """Text, sets and scalars are not."""
        assert not is_array_like("abc")
        assert not is_array_like(b"abc")
        assert not is_array_like({1, 2})
        assert not is_array_like(1)
        assert not is_array_like(None)


class TestStrictEquals:
    """Tests for strict_equals."""

    def test_same_type_same_value(self) -> None:
        """Equal scalars of one type match."""
        assert strict_equals(1, 1)
        assert strict_equals("a", "a")
        assert strict_equals(None, None)

    def test_type_mismatch(self) -> None:
        """No coercion between types."""
        assert not strict_equals(1, "1")
        assert not strict_equals(1, 1.0)
        assert not strict_equals(1, True)
        assert not strict_equals(0, None)

    def test_nan_never_equal(self) -> None:
        """Distinct NaN objects do not match."""
        assert not strict_equals(float("nan"), math.nan)

    def test_nested_sequences(self) -> None:
        """Element-wise comparison, same rules."""
        assert strict_equals([1, ["a"]], [1, ["a"]])
        assert not strict_equals([1, ["a"]], [1, ["a", "b"]])
        assert not strict_equals([1], (1,))

    def test_dicts_order_matters(self) -> None:
        """Mappings compare pairwise in order."""
        assert strict_equals({"a": 1, "b": 2}, {"a": 1, "b": 2})
        assert not strict_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert not strict_equals({"a": 1}, {"a": 1.0})

    def test_objects_by_identity(self) -> None:
        """Arbitrary objects only match themselves."""
        marker = object()
        assert strict_equals(marker, marker)
        assert not strict_equals(object(), object())
