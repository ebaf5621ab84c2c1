"""Summing integer ranges, in one piece or split across threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from .decorators import sum_range


def total(low: int, high: int) -> int:
    """Return the sum of the integers from ``low`` to ``high`` inclusive."""
    return sum_range(low, high)


def parallel_total(low: int, high: int, workers: int) -> int:
    """Sum ``low..high`` by splitting it into ``workers`` chunks summed on threads."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    size = high - low + 1
    if size <= 0:
        return 0
    bounds = [
        (low + size * i // workers, low + size * (i + 1) // workers - 1)
        for i in range(workers)
    ]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return sum(executor.map(lambda b: total(*b), bounds))