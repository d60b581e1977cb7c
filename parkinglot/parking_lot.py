"""A parking lot with bounded capacity, occupancy observers and car lookups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from parkinglot.car import Car, CarSize
from parkinglot.observers import Owner, Security

LOT_FULL_MESSAGE = "Lot is full"
SPACE_AVAILABLE_MESSAGE = "Space is Available"


@dataclass(frozen=True)
class CarParkingInfo:
    """Where a car parked by row was placed."""

    car: Car
    row: str
    slot_id: int
    is_handicap: bool


class ParkingLot:
    """A lot holding up to ``capacity`` cars in parking order."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._parked: list[Car] = []
        self._owner: Owner | None = None
        self._security: Security | None = None
        self._was_full = False
        self._parking_times: dict[str, datetime] = {}
        self._parking_info: dict[str, CarParkingInfo] = {}

    def add_owner_observer(self, owner: Owner) -> None:
        """Set the owner to be told about occupancy changes."""
        self._owner = owner

    def add_security_observer(self, security: Security) -> None:
        """Set the security staff to be told when the lot is full."""
        self._security = security

    def park(self, car: Car) -> bool:
        """Park a car; return False if the lot has no room."""
        if len(self._parked) >= self.capacity:
            return False
        self._parked.append(car)
        self._parking_times[car.plate] = datetime.now()
        if len(self._parked) == self.capacity:
            if self._owner is not None:
                self._owner.on_lot_full(LOT_FULL_MESSAGE)
            if self._security is not None:
                self._security.on_lot_full(LOT_FULL_MESSAGE)
            self._was_full = True
        return True

    def unpark(self, car: Car) -> bool:
        """Remove the car with the same plate; return False if it is not here."""
        slot = self.find_car(car.plate)
        if slot is None:
            return False
        del self._parked[slot]
        self._parking_times.pop(car.plate, None)
        if self._was_full and len(self._parked) == self.capacity - 1:
            if self._owner is not None:
                self._owner.on_space_available(SPACE_AVAILABLE_MESSAGE)
            self._was_full = False
        return True

    def parked_cars_count(self) -> int:
        """Number of cars currently parked."""
        return len(self._parked)

    def is_full(self) -> bool:
        """Whether the lot is at capacity."""
        return len(self._parked) == self.capacity

    def available_spaces(self) -> int:
        """Number of free spaces."""
        return self.capacity - len(self._parked)

    def find_car(self, plate: str) -> int | None:
        """Slot number of the car with this plate, or None if not parked."""
        return next(
            (slot for slot, car in enumerate(self._parked) if car.plate == plate),
            None,
        )

    def parking_time(self, plate: str) -> datetime | None:
        """When the car was parked, or None if it is not parked."""
        return self._parking_times.get(plate)

    def parking_duration(self, plate: str) -> timedelta | None:
        """How long the car has been parked, or None if it is not parked."""
        parked_at = self._parking_times.get(plate)
        if parked_at is None:
            return None
        return datetime.now() - parked_at

    def find_cars_by_color(self, color: str) -> list[Car]:
        """All parked cars of the given colour."""
        return [car for car in self._parked if car.color == color]

    def find_cars_by_make_and_color(self, make: str, color: str) -> list[Car]:
        """All parked cars of the given make and colour."""
        return [car for car in self._parked if car.make == make and car.color == color]

    def find_cars_by_make(self, make: str) -> list[Car]:
        """All parked cars of the given make."""
        return [car for car in self._parked if car.make == make]

    def find_cars_parked_in_last_minutes(self, minutes: int) -> list[Car]:
        """All cars parked after the given number of minutes ago."""
        cutoff = datetime.now() - timedelta(minutes=minutes)
        return [
            car
            for car in self._parked
            if car.plate in self._parking_times and self._parking_times[car.plate] > cutoff
        ]

    def set_parking_time(self, plate: str, park_time: datetime) -> None:
        """Override the recorded parking time of a car."""
        self._parking_times[plate] = park_time

    def park_in_row(self, car: Car, row: str, is_handicap: bool) -> bool:
        """Park a car and record its row and handicap designation."""
        if not self.park(car):
            return False
        self._parking_info[car.plate] = CarParkingInfo(
            car=car,
            row=row,
            slot_id=len(self._parked) - 1,
            is_handicap=is_handicap,
        )
        return True

    def find_small_handicap_cars_in_rows(
        self, target_rows: Iterable[str]
    ) -> list[CarParkingInfo]:
        """Small handicap cars parked by row in any of the given rows."""
        rows = set(target_rows)
        return [
            info
            for info in self._parking_info.values()
            if info.car.size is CarSize.SMALL and info.is_handicap and info.row in rows
        ]

    def all_parked_cars(self) -> list[Car]:
        """A copy of the list of parked cars, in parking order."""
        return list(self._parked)