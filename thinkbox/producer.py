"""A producer/consumer pair and several threads sharing one line reader."""

from __future__ import annotations

import os
import queue
import threading
import time

_END = object()


class ProducerConsumer:
    """A producer emits five multiples of ten; a consumer prints them."""

    def __init__(self, delay: float = 0.5) -> None:
        self.delay = delay

    def _produce(self, channel: queue.Queue) -> None:
        try:
            for i in range(5):
                channel.put(i * 10)
                time.sleep(self.delay)
        finally:
            channel.put(_END)

    def run(self) -> list[int]:
        """Run both sides to completion and return what was consumed."""
        channel: queue.Queue = queue.Queue(maxsize=1)
        producer = threading.Thread(target=self._produce, args=(channel,), daemon=True)
        producer.start()
        consumed: list[int] = []
        while (item := channel.get()) is not _END:
            print(item)
            consumed.append(item)
        producer.join()
        return consumed


def read_lines(
    path: str | os.PathLike, workers: int = 2, delay: float = 0.2
) -> list[tuple[int, str]]:
    """Read a file line by line with several threads taking turns.

    Each worker, numbered from 1, takes the next line, waits ``delay`` seconds
    and prints it. Returns ``(worker, line)`` pairs in file order.
    """
    taken: list[tuple[int, str]] = []
    lock = threading.Lock()
    with open(path, encoding="utf-8") as stream:

        def work(index: int) -> None:
            while True:
                with lock:
                    line = stream.readline()
                    if not line:
                        return
                    time.sleep(delay)
                    print(f"[协程{index}]{line}", end="")
                    taken.append((index, line))

        threads = [
            threading.Thread(target=work, args=(index,))
            for index in range(1, workers + 1)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    return taken