"""Police investigations that search parked cars across lots."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

from parkinglot.attendant import ParkingAttendant
from parkinglot.car import Car
from parkinglot.parking_lot import CarParkingInfo, ParkingLot

_T = TypeVar("_T")


@dataclass(frozen=True)
class CarLocation:
    """A car and where it is parked."""

    car: Car
    lot_id: int
    slot_id: int | None


@dataclass(frozen=True)
class SecurityInvestigation(CarLocation):
    """A car's location, for security enhancement."""


@dataclass(frozen=True)
class RobberyInvestigation(CarLocation):
    """A car's location together with the attendant on duty."""

    attendant_name: str


@dataclass(frozen=True)
class BombThreatInvestigation(CarLocation):
    """A car's location and when it was parked."""

    parking_time: datetime | None


@dataclass(frozen=True)
class HandicapFraudInvestigation:
    """Row parking details of a suspect car and the lot it is in."""

    car_info: CarParkingInfo
    lot_id: int


@dataclass(frozen=True)
class PlateInvestigation:
    """A car in a single lot, its slot and when it was parked."""

    car: Car
    slot_id: int | None
    parking_time: datetime | None


def _across(
    lots: Sequence[ParkingLot], search: Callable[[ParkingLot], Iterable[_T]]
) -> Iterator[tuple[int, ParkingLot, _T]]:
    """Yield each search hit with its lot and the lot's index."""
    for lot_id, lot in enumerate(lots):
        for hit in search(lot):
            yield lot_id, lot, hit


@dataclass(frozen=True)
class PoliceDepartment:
    """A law enforcement department that investigates parked cars."""

    name: str

    def investigate_white_cars(self, lots: Sequence[ParkingLot]) -> list[CarLocation]:
        """All white cars across the lots, with their locations."""
        return [
            CarLocation(car, lot_id, lot.find_car(car.plate))
            for lot_id, lot, car in _across(lots, lambda lot: lot.find_cars_by_color("White"))
        ]

    def investigate_blue_toyotas(
        self, lots: Sequence[ParkingLot], attendant: ParkingAttendant
    ) -> list[RobberyInvestigation]:
        """All blue Toyotas across the lots, with locations and attendant name."""
        search = lambda lot: lot.find_cars_by_make_and_color("Toyota", "Blue")  # noqa: E731
        return [
            RobberyInvestigation(car, lot_id, lot.find_car(car.plate), attendant.name)
            for lot_id, lot, car in _across(lots, search)
        ]

    def investigate_bmw_cars(
        self, lots: Sequence[ParkingLot]
    ) -> list[SecurityInvestigation]:
        """All BMWs across the lots, with their locations."""
        return [
            SecurityInvestigation(car, lot_id, lot.find_car(car.plate))
            for lot_id, lot, car in _across(lots, lambda lot: lot.find_cars_by_make("BMW"))
        ]

    def investigate_recently_parked_cars(
        self, lots: Sequence[ParkingLot], minutes: int
    ) -> list[BombThreatInvestigation]:
        """All cars parked within the last ``minutes`` across the lots."""
        search = lambda lot: lot.find_cars_parked_in_last_minutes(minutes)  # noqa: E731
        return [
            BombThreatInvestigation(
                car, lot_id, lot.find_car(car.plate), lot.parking_time(car.plate)
            )
            for lot_id, lot, car in _across(lots, search)
        ]

    def investigate_handicap_permit_fraud(
        self, lots: Sequence[ParkingLot], target_rows: Iterable[str]
    ) -> list[HandicapFraudInvestigation]:
        """Small handicap cars in the given rows across the lots."""
        rows = list(target_rows)
        search = lambda lot: lot.find_small_handicap_cars_in_rows(rows)  # noqa: E731
        return [
            HandicapFraudInvestigation(info, lot_id)
            for lot_id, _, info in _across(lots, search)
        ]

    def investigate_fraudulent_plates(self, lot: ParkingLot) -> list[PlateInvestigation]:
        """Every car in one lot, with slot and parking time."""
        return [
            PlateInvestigation(car, lot.find_car(car.plate), lot.parking_time(car.plate))
            for car in lot.all_parked_cars()
        ]