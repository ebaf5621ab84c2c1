"""Storing an uploaded file as five blocks and streaming it back."""

from __future__ import annotations

import functools
import io
import os
from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterator

from flask import Flask, Response, request

from .helpers import get_prefix, get_suffix
from .responses import error

_BLOCKS = 5
_BLOCK_READS = _BLOCKS + 1


def _block_path(name: str, index: int, directory: Path) -> Path:
    suffix = get_suffix(name)
    prefix = get_prefix(name, suffix)
    return directory / f"{prefix}_{index}{suffix}"


def save_blocks(
    stream: BinaryIO, filename: str, size: int, storage_dir: str | os.PathLike = "."
) -> list[Path]:
    """Split ``stream`` into blocks of ``size // 5`` bytes named ``<prefix>_<n><suffix>``.

    A file smaller than five bytes stores nothing. Returns the paths written.
    """
    block = size // _BLOCKS
    directory = Path(storage_dir)
    saved: list[Path] = []
    if block <= 0:
        return saved
    for index, chunk in enumerate(iter(functools.partial(stream.read, block), b"")):
        target = _block_path(filename, index, directory)
        target.write_bytes(chunk)
        saved.append(target)
    return saved


def read_blocks(name: str, storage_dir: str | os.PathLike = ".") -> Iterator[bytes]:
    """Yield the stored blocks of ``name`` in order, skipping any that are missing."""
    directory = Path(storage_dir)
    for index in range(_BLOCK_READS):
        try:
            data = _block_path(name, index, directory).read_bytes()
        except OSError:
            continue
        yield data


def _recover(view: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return view(*args, **kwargs)
        except Exception as exc:
            return error({"error": str(exc)})

    return wrapper


def create_upload_app(storage_dir: str | os.PathLike = ".") -> Flask:
    """Build an application that stores uploads in blocks and streams them back."""
    app = Flask(__name__)
    storage = Path(storage_dir)

    @app.post("/upload")
    @_recover
    def upload() -> Any:
        uploaded = request.files.get("file")
        if uploaded is None:
            raise ValueError("http: no such file")
        content = uploaded.read()
        save_blocks(io.BytesIO(content), uploaded.filename or "", len(content), storage)
        return {"message": "ok"}, 200

    @app.get("/file")
    def file() -> Response:
        name = request.args.get("name", "")
        return Response(read_blocks(name, storage), mimetype="image/png")

    return app