"""Vehicles that can be parked in a lot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CarSize(IntEnum):
    """Size category of a car."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Car:
    """A vehicle identified by its plate."""

    plate: str
    make: str
    color: str
    size: CarSize = CarSize.SMALL