"""Hashing and file-name helpers."""

from __future__ import annotations

import hashlib


def md5_encrypt(value: str) -> str:
    """Return the hex MD5 digest of ``value``, or an empty string for empty input."""
    if not value:
        return ""
    return hashlib.md5(value.encode("utf-8")).hexdigest()


def _base(name: str) -> str:
    """Return the last slash-separated element of ``name``."""
    if not name:
        return "."
    stripped = name.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def get_prefix(name: str, suffix: str) -> str:
    """Return the base name of ``name`` with ``suffix`` removed from its end."""
    base = _base(name)
    if suffix and base.endswith(suffix):
        return base[: -len(suffix)]
    return base


def get_suffix(name: str) -> str:
    """Return the extension of the last path element, dot included, or ``""``."""
    tail = name.rsplit("/", 1)[-1]
    dot = tail.rfind(".")
    return tail[dot:] if dot >= 0 else ""