"""Uniform JSON response bodies and helpers that pair them with a status."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable

from .options import Attrs

Response = tuple[Any, int]


@dataclass
class JSONResult:
    code: int = 0
    message: str = ""
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}


def with_code(code: int) -> Callable[[JSONResult], None]:
    def set_code(res: JSONResult) -> None:
        res.code = code

    return set_code


def with_message(message: str) -> Callable[[JSONResult], None]:
    def set_message(res: JSONResult) -> None:
        res.message = message

    return set_message


def with_data(data: Any) -> Callable[[JSONResult], None]:
    def set_data(res: JSONResult) -> None:
        res.data = data

    return set_data


def make_result(*args: Callable[[JSONResult], None]) -> JSONResult:
    """Create a result with the given options applied."""
    return Attrs(args).apply(JSONResult())


def _body(payload: Any) -> Any:
    return payload.to_dict() if isinstance(payload, JSONResult) else payload


def ok(payload: Any) -> Response:
    """A JSON body with status 200."""
    return _body(payload), int(HTTPStatus.OK)


def error(payload: Any) -> Response:
    """A JSON body with status 400."""
    return _body(payload), int(HTTPStatus.BAD_REQUEST)


def ok_text(payload: Any) -> Response:
    """A plain-text body with status 200."""
    return str(payload), int(HTTPStatus.OK)


def handle(api: Callable[..., tuple[int, str, Any]]) -> Callable[..., Response]:
    """Wrap a function returning ``(code, message, data)`` into a JSON response."""

    @functools.wraps(api)
    def wrapper(*args: Any, **kwargs: Any) -> Response:
        code, message, data = api(*args, **kwargs)
        return ok(JSONResult(code, message, data))

    return wrapper