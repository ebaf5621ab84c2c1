"""Functional options: callables that each set one attribute on an object."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")

Attr = Callable[[object], None]


class Attrs(list):
    """A list of option callables."""

    def apply(self, obj: T) -> T:
        """Apply every option to ``obj`` in order and return it."""
        for attr in self:
            attr(obj)
        return obj