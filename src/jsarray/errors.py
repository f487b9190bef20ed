"""Exceptions raised by jsarray."""

from __future__ import annotations


class JsArrayError(Exception):
    """Base class for jsarray errors."""


class EmptyReduceError(JsArrayError, TypeError):
    """Raised by a strict reduce over an empty collection without an initial value."""

    def __init__(self) -> None:
        super().__init__("Reduce of empty array with no initial value")
