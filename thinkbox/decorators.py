"""Summing a range and timing a function call."""

from __future__ import annotations

import functools
import time
from typing import Callable, TypeVar

R = TypeVar("R")


def sum_range(a: int, b: int) -> int:
    """Return the sum of the integers from ``a`` to ``b`` inclusive."""
    if b < a:
        return 0
    return (a + b) * (b - a + 1) // 2


def consume(func: Callable[..., R]) -> Callable[..., R]:
    """Wrap ``func`` so that every call prints how long it took."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        print(f"{time.perf_counter() - start:.6f}s")
        return result

    return wrapper