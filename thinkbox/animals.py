"""Animal models built with options and a simple factory."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Union

from .options import Attrs


class AnimalType(enum.IntEnum):
    FISH = 0
    BIRD = 1


@dataclass(slots=True)
class Bird:
    id: int = 0
    name: str = ""
    color: str = ""


@dataclass(slots=True)
class Fish:
    id: int = 0
    name: str = ""


Animal = Union[Bird, Fish]


def with_id(value: int) -> Callable[[Animal], None]:
    def set_id(animal: Animal) -> None:
        animal.id = value

    return set_id


def with_name(value: str) -> Callable[[Animal], None]:
    def set_name(animal: Animal) -> None:
        animal.name = value

    return set_name


def with_color(value: str) -> Callable[[Bird], None]:
    """Set a bird's colour; fish have none and raise ``AttributeError``."""

    def set_color(animal: Bird) -> None:
        animal.color = value

    return set_color


_MODELS: dict[AnimalType, type] = {AnimalType.FISH: Fish, AnimalType.BIRD: Bird}


def create_animal(kind: int) -> Callable[..., Animal]:
    """Return a constructor for ``kind`` that takes option callables."""
    try:
        model = _MODELS[AnimalType(kind)]
    except ValueError:
        raise ValueError(f"unknown animal type: {kind!r}") from None

    def create(*attrs: Callable[[Animal], None]) -> Animal:
        return Attrs(attrs).apply(model())

    return create