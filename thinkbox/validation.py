"""Named validation functions and a small rule checker."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Callable, Iterable

_validations: dict[str, Callable[[Any], bool]] = {}
_tips: dict[str, str] = {}


class ValidationError(ValueError):
    """Raised when a value fails one or more named validations."""

    def __init__(self, tags: Iterable[str], message: str | None = None) -> None:
        self.tags = list(tags)
        self.message = message or f"validation failed on {', '.join(self.tags)}"
        super().__init__(self.message)


def _number(param: str) -> float:
    try:
        return float(param)
    except ValueError:
        raise ValueError(f"bad rule parameter {param!r}") from None


def _measure(value: Any) -> float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Sized):
        return len(value)
    raise TypeError(f"cannot measure a value of type {type(value).__name__}")


def _required(value: Any, _param: str) -> bool:
    if value is None:
        return False
    if isinstance(value, (int, float, bool)):
        return value != 0
    if isinstance(value, Sized):
        return len(value) > 0
    return True


_RULES: dict[str, Callable[[Any, str], bool]] = {
    "required": _required,
    "min": lambda value, param: _measure(value) >= _number(param),
    "max": lambda value, param: _measure(value) <= _number(param),
    "gt": lambda value, param: _measure(value) > _number(param),
    "gte": lambda value, param: _measure(value) >= _number(param),
    "lt": lambda value, param: _measure(value) < _number(param),
    "lte": lambda value, param: _measure(value) <= _number(param),
}


def check_rules(value: Any, rules: str) -> str | None:
    """Check ``value`` against comma-separated rules such as ``"required,min=2"``.

    Returns the name of the first rule that fails, or ``None`` if all pass.
    """
    for rule in filter(None, (part.strip() for part in rules.split(","))):
        name, _, param = rule.partition("=")
        check = _RULES.get(name)
        if check is None:
            raise ValueError(f"undefined validation rule {name!r}")
        if not check(value, param):
            return name
    return None


def register_validation(
    tag: str, func: Callable[[Any], bool], tip: str | None = None
) -> None:
    """Register ``func`` under ``tag``, with an optional user-facing message."""
    if not tag:
        raise ValueError("validation tag cannot be empty")
    _validations[tag] = func
    if tip is not None:
        _tips[tag] = tip


def validate(tag: str, value: Any) -> Any:
    """Run the validation registered as ``tag``; returns ``value`` when it passes."""
    func = _validations.get(tag)
    if func is None:
        raise ValueError(f"undefined validation {tag!r}")
    if not func(value):
        raise ValidationError([tag])
    return value


def raise_if_validation_error(error: BaseException) -> None:
    """Raise a :class:`ValidationError` carrying the registered tip, if any applies."""
    if not isinstance(error, ValidationError):
        return
    for tag in error.tags:
        tip = _tips.get(tag)
        if tip is not None:
            raise ValidationError([tag], tip) from error


_USER_NAME_RULES = "required,min=2,max=10"


def _user_name(value: Any) -> bool:
    return isinstance(value, str) and check_rules(value, _USER_NAME_RULES) is None


register_validation("UserName", _user_name, "用户名必须在2-10位之间")