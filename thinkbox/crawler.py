"""Fetching numbered pages concurrently and saving them as HTML files."""

from __future__ import annotations

import os
import queue
import threading
import urllib.request
from pathlib import Path
from typing import Callable


def _fetch(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=10) as response:
        return response.read()


class Crawler:
    """Crawls pages of ``url``, a pattern holding ``%d`` for the page number."""

    def __init__(
        self,
        url: str,
        fetch: Callable[[str], bytes] | None = None,
        idle_timeout: float = 2.0,
    ) -> None:
        self.url = url
        self._fetch = fetch if fetch is not None else _fetch
        self.idle_timeout = idle_timeout

    def get(self, pages: int, output_dir: str | os.PathLike = ".") -> dict[int, Path]:
        """Fetch pages ``1..pages`` and write each to ``<page>.html``.

        Failures are printed and skipped. Writing stops once no page has
        arrived for ``idle_timeout`` seconds. Returns the files written.
        """
        arrived: queue.Queue = queue.Queue()

        def fetch_page(index: int) -> None:
            try:
                body = self._fetch(self.url % index)
            except Exception as exc:
                print(exc)
                body = None
            arrived.put((index, body))

        for index in range(1, pages + 1):
            threading.Thread(target=fetch_page, args=(index,), daemon=True).start()

        directory = Path(output_dir)
        written: dict[int, Path] = {}
        for _ in range(pages):
            try:
                index, body = arrived.get(timeout=self.idle_timeout)
            except queue.Empty:
                break
            if body is None:
                continue
            target = directory / f"{index}.html"
            try:
                target.write_bytes(body)
            except OSError as exc:
                print(exc)
                continue
            written[index] = target
        return written