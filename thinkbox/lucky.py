"""Drawing a number of distinct lucky users within a time limit."""

from __future__ import annotations

import random
import time


class LuckyUser:
    """Draws distinct user ids from a half-open range ``[low, high)``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.low = 0
        self.high = 0
        self.users: list[int] = []
        self._rng = rng if rng is not None else random.Random()

    def set_range(self, low: int, high: int) -> LuckyUser:
        """Set the range ids are drawn from; returns ``self`` for chaining."""
        self.low, self.high = low, high
        return self

    def draw(self) -> int:
        """Draw one id from the current range."""
        return self._rng.randrange(self.low, self.high)

    def run(self, num: int, timeout: float = 2.0) -> int:
        """Draw until ``num`` distinct users are held or ``timeout`` seconds pass.

        Users drawn by earlier runs are kept. Returns the number of draws made.
        """
        deadline = time.monotonic() + timeout
        draws = 0
        while len(self.users) < num and time.monotonic() < deadline:
            candidate = self.draw()
            if candidate not in self.users:
                self.users.append(candidate)
            draws += 1
        return draws