"""Key layout and value comparison helpers for ordered collections."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

# Values compared by type and equality; everything else is compared by identity.
_SCALAR_TYPES = (str, int, float, complex, bytes, type(None))


def is_position(key: object) -> bool:
    """True for integer keys, excluding bools."""
    return isinstance(key, int) and not isinstance(key, bool)


def is_dense(keys: Iterable[Hashable]) -> bool:
    """Check whether keys are exactly 0..n-1 in order.

    An empty key sequence is dense.
    """
    for expected, key in enumerate(keys):
        if not is_position(key) or key != expected:
            return False
    return True


def next_index(keys: Iterable[Hashable]) -> int:
    """Return the position an appended value lands on.

    One past the largest integer key, or 0 when there is no integer key.
    """
    return max((key for key in keys if is_position(key)), default=-1) + 1


def is_array_like(value: object) -> bool:
    """Values whose elements flat() splices into the result."""
    return isinstance(value, (list, tuple, Mapping))


def iter_elements(value: Any) -> Iterable[Any]:
    if isinstance(value, Mapping):
        return value.values()
    return value


def strict_equals(left: object, right: object) -> bool:
    """Identity comparison in the spirit of JavaScript's ``===``.

    Scalars must share the exact type and compare equal, so ``1``, ``1.0``,
    ``True`` and ``"1"`` are all distinct. Lists, tuples and mappings compare
    element-wise with the same rule (mapping order included). Any other
    object is only identical to itself.
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if isinstance(left, _SCALAR_TYPES):
        return left == right
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping):
        if len(left) != len(right):
            return False
        return all(
            strict_equals(lk, rk) and strict_equals(lv, rv)
            for (lk, lv), (rk, rv) in zip(left.items(), right.items())
        )
    return False
