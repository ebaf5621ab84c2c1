"""A simple set and a max-priority queue."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Iterator


class Set:
    """An insertion-ordered set of hashable elements."""

    def __init__(self, *elements: Hashable) -> None:
        self._items: dict[Hashable, None] = {}
        self.add(*elements)

    def add(self, *args: Hashable) -> Set:
        """Add elements, ignoring duplicates; returns ``self``."""
        for element in args:
            self._items[element] = None
        return self

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return ",".join(str(key) for key in self._items)


@dataclass(eq=False)
class Item:
    value: Any
    priority: int
    index: int = -1


class PriorityQueue:
    """A queue that pops the item with the highest priority first."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._heap: list[tuple[int, int, Item]] = []
        self._counter = itertools.count()
        for item in items:
            self.push(item)

    def push(self, item: Item) -> None:
        item.index = len(self._heap)
        heapq.heappush(self._heap, (-item.priority, next(self._counter), item))

    def pop(self) -> Item:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        item.index = -1
        return item

    def __len__(self) -> int:
        return len(self._heap)