"""Small classic algorithms."""

from __future__ import annotations

from typing import Sequence


def quick_sort(items: Sequence[int]) -> list[int]:
    """Return a new ascending list using quicksort with the first item as pivot."""
    if len(items) < 2:
        return list(items)
    pivot, *rest = items
    left = [item for item in rest if item <= pivot]
    right = [item for item in rest if item > pivot]
    return quick_sort(left) + [pivot] + quick_sort(right)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return index pairs, flattened, of every two numbers adding up to ``target``."""
    indexes: list[int] = []
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                indexes.extend((i, j))
    return indexes