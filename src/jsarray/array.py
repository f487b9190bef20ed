"""Ordered-map backed collection with JavaScript array methods.

Keys may be sparse integers or arbitrary hashable tokens; insertion order is
preserved by every operation. Operations never mutate the receiver, they
return a new JsArray.

Example:
    >>> from jsarray import JsArray
    >>> JsArray.of(1, [2, 3], 4).flat().to_list()
    [1, 2, 3, 4]
    >>> JsArray({"a": 1, "b": 2}).map(lambda v: v * 10)
    JsArray({'a': 10, 'b': 20})
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from jsarray._internal.introspection import adapt_callback
from jsarray._internal.keys import (
    is_array_like,
    is_dense,
    iter_elements,
    next_index,
    strict_equals,
)
from jsarray.errors import EmptyReduceError
from jsarray.log import get_logger

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT")

logger = get_logger()


class _Missing(Enum):
    NO_INITIAL = "NO_INITIAL"

    def __repr__(self) -> str:
        return self.value


NO_INITIAL = _Missing.NO_INITIAL
"""Marks a reduce() call without an initial accumulator. ``None`` is a real value."""


class JsArray(Mapping[KT, VT], Generic[KT, VT]):
    """An immutable ordered mapping with JavaScript-style array methods.

    Callbacks receive ``(value, key, array)``; ``reduce`` callbacks receive
    ``(accumulator, value, key, array)``. Like JavaScript, trailing arguments
    a callback does not declare are dropped, so ``lambda v: v * 2`` works.
    """

    __slots__ = ("_items", "length")

    _items: dict[KT, VT]
    length: int

    def __init__(self, items: Mapping[KT, VT] | Iterable[VT] | None = None, /) -> None:
        if items is None:
            data: dict[Any, VT] = {}
        elif isinstance(items, Mapping):
            data = dict(items)
        elif isinstance(items, Iterable):
            data = dict(enumerate(items))
        else:
            msg = f"JsArray items must be a mapping or an iterable, got {type(items).__name__}"
            raise TypeError(msg)

        self._items = data
        self.length = len(data)

    @classmethod
    def from_(cls, items: Mapping[KT, VT] | Iterable[VT]) -> JsArray[KT, VT]:
        """Create from a mapping (keys kept) or an iterable (keys 0..n-1)."""
        return cls(items)

    @classmethod
    def of(cls, *items: VT) -> JsArray[int, VT]:
        return cls(items)  # type: ignore[return-value]

    @classmethod
    def _wrap(cls, data: dict[Any, Any]) -> JsArray[Any, Any]:
        # Takes ownership of `data`; callers must not keep a reference.
        instance = cls.__new__(cls)
        instance._items = data
        instance.length = len(data)
        return instance

    # Mapping protocol

    def __getitem__(self, key: KT) -> VT:
        return self._items[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsArray):
            return list(self._items.items()) == list(other._items.items())
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def to_dict(self) -> dict[KT, VT]:
        """Convert to a plain dict."""
        return dict(self._items)

    def to_list(self) -> list[VT]:
        """Values in insertion order, keys discarded."""
        return list(self._items.values())

    def is_dense(self) -> bool:
        """True when keys are exactly 0..n-1 in order (empty counts as dense)."""
        return is_dense(self._items)

    # Transforming operations

    def map(self, fn: Callable[..., Any]) -> JsArray[KT, Any]:
        """Replace every value with ``fn(value, key, array)``, keeping keys."""
        call = adapt_callback(fn, max_args=3, min_args=1)
        return self._wrap({key: call(value, key, self) for key, value in self._items.items()})

    def filter(self, fn: Callable[..., Any]) -> JsArray[KT, VT]:
        """Keep entries where ``fn(value, key, array)`` is truthy.

        Surviving entries keep their original keys; nothing is renumbered.
        """
        call = adapt_callback(fn, max_args=3, min_args=1)
        return self._wrap(
            {key: value for key, value in self._items.items() if call(value, key, self)}
        )

    def reduce(
        self,
        fn: Callable[..., Any],
        initial: Any | Literal[_Missing.NO_INITIAL] = NO_INITIAL,
        *,
        strict: bool = False,
    ) -> Any:
        """Fold entries left to right.

        Without ``initial`` the first value seeds the accumulator and folding
        starts at the second entry.

        Returns:
            The final accumulator. An empty collection reduced without an
            initial value gives None, unless ``strict`` is set.

        Raises:
            EmptyReduceError: Strict mode, empty collection, no initial value.
        """
        call = adapt_callback(fn, max_args=4, min_args=2)
        entries = iter(self._items.items())

        if initial is NO_INITIAL:
            first = next(entries, None)
            if first is None:
                if strict:
                    raise EmptyReduceError()
                logger.debug("reduce_empty_without_initial")
                return None
            accumulator = first[1]
        else:
            accumulator = initial

        for key, value in entries:
            accumulator = call(accumulator, value, key, self)
        return accumulator

    def flat(self) -> JsArray[int, Any]:
        """Splice nested lists, tuples and mappings one level deep.

        The result is always keyed 0..n-1, whatever the source keys were.
        """
        result: list[Any] = []
        for value in self._items.values():
            if is_array_like(value):
                result.extend(iter_elements(value))
            else:
                result.append(value)
        return self._wrap(dict(enumerate(result)))

    def flat_map(self, fn: Callable[..., Any]) -> JsArray[int, Any]:
        return self.map(fn).flat()

    def concat(self, *others: Any, reindex: bool = False) -> JsArray[Any, Any]:
        """Append the values of ``others`` after this array's entries.

        Existing keys are kept. Appended values go to the next free integer
        position (one past the largest integer key, or 0), so the result is
        dense only when the receiver was. Array-like arguments are spliced;
        any other argument is appended as a single value. With ``reindex``
        the whole result is renumbered 0..n-1.
        """
        data: dict[Any, Any] = dict(self._items)
        position = next_index(data)
        for other in others:
            values = iter_elements(other) if is_array_like(other) else (other,)
            for value in values:
                data[position] = value
                position += 1

        if reindex:
            data = dict(enumerate(data.values()))
            logger.debug("concat_reindexed", length=len(data))
        return self._wrap(data)

    # Searching

    def find(self, fn: Callable[..., Any]) -> VT | None:
        """First value where ``fn(value, key, array)`` is truthy, else None."""
        call = adapt_callback(fn, max_args=3, min_args=1)
        for key, value in self._items.items():
            if call(value, key, self):
                return value
        return None

    def find_index(self, fn: Callable[..., Any]) -> KT | int | None:
        """Key of the first entry where ``fn(value, key, array)`` is truthy.

        In a dense array the key is the position. When nothing matches a
        dense array gives -1 and a sparse or associative one gives None.
        """
        call = adapt_callback(fn, max_args=3, min_args=1)
        for key, value in self._items.items():
            if call(value, key, self):
                return key
        return -1 if self.is_dense() else None

    def includes(self, value: object) -> bool:
        """Check for a value identical to ``value`` (same type, same value)."""
        return any(strict_equals(item, value) for item in self._items.values())

    def some(self, fn: Callable[..., Any]) -> bool:
        call = adapt_callback(fn, max_args=3, min_args=1)
        return any(call(value, key, self) for key, value in self._items.items())

    def every(self, fn: Callable[..., Any]) -> bool:
        call = adapt_callback(fn, max_args=3, min_args=1)
        return all(call(value, key, self) for key, value in self._items.items())

    # JavaScript spellings
    flatMap = flat_map
    findIndex = find_index
