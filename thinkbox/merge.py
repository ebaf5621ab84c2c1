"""Interleaving two sequences, directly and with two alternating threads."""

from __future__ import annotations

import threading
from typing import Any, Sequence


def cross_merge(names: Sequence[str], values: Sequence[int]) -> list[Any]:
    """Return ``[names[0], values[0], names[1], values[1], ...]``.

    Every name needs a matching value; extra values are ignored and a
    missing one raises ``IndexError``.
    """
    merged: list[Any] = []
    for index, name in enumerate(names):
        merged.extend((name, values[index]))
    return merged


def cross_merge_threaded(names: Sequence[str], values: Sequence[int]) -> list[Any]:
    """Interleave like :func:`cross_merge`, using two threads that take turns.

    Both sequences must have the same length.
    """
    if len(names) != len(values):
        raise ValueError("names and values must have the same length")

    merged: list[Any] = []
    names_turn = threading.Semaphore(0)
    values_turn = threading.Semaphore(0)

    def take_names() -> None:
        for name in names:
            names_turn.acquire()
            merged.append(name)
            values_turn.release()

    def take_values() -> None:
        for value in values:
            values_turn.acquire()
            merged.append(value)
            names_turn.release()

    workers = [threading.Thread(target=take_names), threading.Thread(target=take_values)]
    for worker in workers:
        worker.start()
    names_turn.release()
    for worker in workers:
        worker.join()
    return merged