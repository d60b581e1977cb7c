"""Parking attendants who choose lots and park cars on drivers' behalf."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from parkinglot.car import Car
from parkinglot.parking_lot import ParkingLot

_Chooser = Callable[[list[ParkingLot]], ParkingLot]


def _park_in_chosen(lots: Sequence[ParkingLot], car: Car, choose: _Chooser) -> bool:
    """Park in the lot picked from those with room; False if none has room."""
    open_lots = [lot for lot in lots if not lot.is_full()]
    return bool(open_lots) and choose(open_lots).park(car)


@dataclass(frozen=True)
class ParkingAttendant:
    """An employee who parks cars in parking lots."""

    name: str

    def park_car(self, lot: ParkingLot, car: Car) -> bool:
        """Park a car in the given lot; return False if it has no room."""
        return lot.park(car)

    def unpark_car(self, lot: ParkingLot, car: Car) -> bool:
        """Take a car out of the given lot; return False if it is not there."""
        return lot.unpark(car)

    def park_car_evenly(self, lots: Sequence[ParkingLot], car: Car) -> bool:
        """Park in the open lot holding the fewest cars, the first one on ties."""
        return _park_in_chosen(
            lots, car, lambda open_lots: min(open_lots, key=ParkingLot.parked_cars_count)
        )

    def park_handicap_car(self, lots: Sequence[ParkingLot], car: Car) -> bool:
        """Park in the nearest lot that has room, lots being ordered by distance."""
        return _park_in_chosen(lots, car, lambda open_lots: open_lots[0])

    def park_large_car(self, lots: Sequence[ParkingLot], car: Car) -> bool:
        """Park in the open lot with the most free spaces, the first one on ties."""
        return _park_in_chosen(
            lots, car, lambda open_lots: max(open_lots, key=ParkingLot.available_spaces)
        )