"""Copying a file under a timestamped name, optionally showing progress."""

from __future__ import annotations

import argparse
import functools
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Callable, TextIO

FORMAT1 = "\b\b%d%%"
FORMAT2 = "\b\b\b%d%%"
FORMAT3 = "\b\b\b%d%%\b"

DEFAULT_FILE = "public/婚礼.mp4"


class _Progress:
    """Writes percentages over the previous one using backspaces."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._format = FORMAT1
        self._last = 0

    def show(self, value: int) -> None:
        if self._last >= 10 and 10 < value < 100:
            self._format = FORMAT2
        elif value >= 100:
            self._format = FORMAT3
        self._out.write(self._format % value)
        self._out.flush()
        self._last = value


class SingleUpload:
    """Uploads one file into ``directory`` under a name taken from ``clock``."""

    def __init__(
        self,
        directory: str | os.PathLike = ".",
        delay: float = 0.1,
        chunk_size: int = 1024 * 100,
        clock: Callable[[], datetime] = datetime.now,
        out: TextIO | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.delay = delay
        self.chunk_size = chunk_size
        self.clock = clock
        self.out = out

    def upload(self, file_name: str | os.PathLike) -> str:
        """Copy the file and return the path of the copy."""
        return self._save(file_name, progress=False)

    def uploading(self, file_name: str | os.PathLike) -> str:
        """Copy the file while printing progress; return the path of the copy."""
        return self._save(file_name, progress=True)

    def _save(self, file_name: str | os.PathLike, progress: bool) -> str:
        source = Path(file_name)
        with source.open("rb") as stream:
            content = self._read(stream, progress)
        target = self.directory / self._save_name(source)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return str(target)

    def _read(self, stream: BinaryIO, progress: bool) -> bytes:
        out = self.out if self.out is not None else sys.stdout
        size = os.fstat(stream.fileno()).st_size
        printer: _Progress | None = None
        if progress:
            out.write("complete:0%")
            out.flush()
            printer = _Progress(out)

        data = bytearray()
        for chunk in iter(functools.partial(stream.read, self.chunk_size), b""):
            time.sleep(self.delay)
            data += chunk
            if printer is not None:
                printer.show(len(data) * 100 // size)
        return bytes(data)

    def _save_name(self, source: Path) -> str:
        return self.clock().strftime("%Y%m%d%H%M%S") + source.suffix


def main(argv: list[str] | None = None) -> int:
    """Upload a file with progress shown."""
    parser = argparse.ArgumentParser(
        description="Copy a file under a timestamped name, showing progress."
    )
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE)
    parser.add_argument("--directory", default=".", help="where the copy is written")
    args = parser.parse_args(argv)
    try:
        SingleUpload(directory=args.directory).uploading(args.file)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())