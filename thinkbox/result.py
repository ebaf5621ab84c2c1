"""A value paired with an optional error, unwrapped the way the caller chooses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .validation import raise_if_validation_error


class ResultError(RuntimeError):
    """Raised when unwrapping a result that holds an error."""


@dataclass(frozen=True)
class ErrorResult:
    data: Any = None
    error: BaseException | None = None

    def unwrap(self) -> Any:
        """Return the data, or raise if there is an error.

        Validation errors with a registered tip are raised with that tip.
        """
        if self.error is not None:
            raise_if_validation_error(self.error)
            raise ResultError(str(self.error)) from self.error
        return self.data

    def unwrap_or(self, default: Any) -> Any:
        """Return the data, or ``default`` if there is an error."""
        return default if self.error is not None else self.data

    def unwrap_fun(self, func: Callable[[], Any]) -> Any:
        """Return the data, or the result of ``func()`` if there is an error."""
        return func() if self.error is not None else self.data


def result(*args: Any) -> ErrorResult:
    """Build a result from ``(error)`` or ``(data, error)``.

    Any other shape gives a result holding an ``"error result"`` error.
    """
    if len(args) == 1:
        (only,) = args
        if only is None:
            return ErrorResult()
        if isinstance(only, BaseException):
            return ErrorResult(None, only)
    elif len(args) == 2:
        data, error = args
        if error is None:
            return ErrorResult(data)
        if isinstance(error, BaseException):
            return ErrorResult(data, error)
    return ErrorResult(None, ResultError("error result"))