"""Filtering users with a tiny rule language such as ``"age > 25"``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable


class RuleError(ValueError):
    """Raised when a filter rule cannot be understood."""


@dataclass
class User:
    id: int
    name: str
    age: int


@dataclass(frozen=True)
class AgeExpression:
    operator: str
    value: int

    def interpret(self, user: User) -> bool:
        """Compare the user's age; an unknown operator means equality."""
        if self.operator == ">":
            return user.age > self.value
        if self.operator == ">=":
            return user.age >= self.value
        if self.operator == "<":
            return user.age < self.value
        if self.operator == "<=":
            return user.age <= self.value
        return user.age == self.value


_INTEGER = re.compile(r"[+-]?\d+")


class UserFilter:
    """Filters users by a rule of the form ``<field> <operator> <value>``."""

    def __init__(self, rule: str) -> None:
        parts = re.split(r"\s+", rule)
        if len(parts) != 3:
            raise RuleError("error rule")
        field, operator, raw_value = parts
        if field != "age":
            raise RuleError("found no expression")
        if not _INTEGER.fullmatch(raw_value):
            raise RuleError("error rule value")
        self.expression = AgeExpression(operator, int(raw_value))

    def filter(self, users: Iterable[User]) -> list[User]:
        """Return the users the rule accepts, in order."""
        return [user for user in users if self.expression.interpret(user)]