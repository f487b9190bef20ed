"""Introspection utilities for adapting callbacks to JavaScript call semantics."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(func: Callable[..., object], *, default: int) -> int | None:
    """Count the positional parameters a callable accepts.

    Args:
        func: The callable to inspect.
        default: Value returned when the signature cannot be inspected.

    Returns:
        The number of positional parameters, or None when the callable takes
        ``*args`` and so has no upper bound.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return default

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


def adapt_callback(
    func: Callable[..., Any],
    *,
    max_args: int,
    min_args: int,
) -> Callable[..., Any]:
    """Wrap ``func`` so it is called with only the arguments it accepts.

    JavaScript passes ``(value, index, array)`` to every callback and silently
    drops extras; this mirrors that for Python callables. Callables with
    ``*args`` get all ``max_args`` arguments. Callables that cannot be
    inspected (some builtins) get ``min_args``.

    The returned callable never catches exceptions raised by ``func``.
    """
    if not callable(func):
        msg = f"{type(func).__name__!r} object is not callable"
        raise TypeError(msg)

    arity = positional_arity(func, default=min_args)
    if arity is None or arity >= max_args:
        return func

    def call(*args: Any) -> Any:
        return func(*args[:arity])

    return call
