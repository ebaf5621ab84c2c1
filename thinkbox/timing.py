"""Comparing wall-clock time with the summed time of concurrent jobs."""

from __future__ import annotations

import random
import threading
import time
from typing import Iterable


class TakeUpTimer:
    """Runs sleeping jobs on threads and adds up how long each one took."""

    def __init__(self) -> None:
        self.total = 0.0
        self._lock = threading.Lock()

    def _job(self, duration: float) -> None:
        start = time.monotonic()
        try:
            time.sleep(duration)
            print(f"运行了{duration}秒")
        finally:
            with self._lock:
                self.total += time.monotonic() - start

    def take_up(self, durations: Iterable[float] | None = None) -> tuple[float, float]:
        """Run one job per duration concurrently.

        Without durations, five jobs of 0 to 3 whole seconds are run.
        Returns ``(wall_seconds, summed_job_seconds)``.
        """
        if durations is None:
            durations = [random.randrange(4) for _ in range(5)]
        start = time.monotonic()
        threads = [threading.Thread(target=self._job, args=(d,)) for d in durations]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        wall = time.monotonic() - start
        print("主线程执行：", wall)
        print("协程实际总共运行：", self.total)
        return wall, self.total