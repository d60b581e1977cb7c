from datetime import datetime, timedelta

import pytest

from parkinglot.attendant import ParkingAttendant
from parkinglot.car import Car, CarSize
from parkinglot.parking_lot import ParkingLot
from parkinglot.police import PoliceDepartment


@pytest.fixture
def police():
    return PoliceDepartment("City Police")


def test_department_name_is_kept():
    assert PoliceDepartment("Harbour Police").name == "Harbour Police"


def test_investigate_white_cars_returns_all_with_locations(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    white1 = Car("TEST-0001", "Toyota", "White", CarSize.SMALL)
    white2 = Car("TEST-0002", "Honda", "White", CarSize.MEDIUM)
    blue = Car("TEST-0003", "BMW", "Blue", CarSize.LARGE)
    lot1.park(white1)
    lot1.park(blue)
    lot2.park(white2)

    found = police.investigate_white_cars([lot1, lot2])

    assert len(found) == 2
    assert all(loc.car.color == "White" for loc in found)
    assert {(loc.car.plate, loc.lot_id, loc.slot_id) for loc in found} == {
        ("TEST-0001", 0, 0),
        ("TEST-0002", 1, 0),
    }


def test_investigate_white_cars_empty_when_none(police):
    lot = ParkingLot(10)
    lot.park(Car("TEST-0001", "Toyota", "Red"))
    assert police.investigate_white_cars([lot]) == []


def test_investigate_blue_toyotas_returns_complete_information(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    attendant = ParkingAttendant("Officer Smith")
    toyota1 = Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL)
    toyota2 = Car("TEST-0002", "Toyota", "Blue", CarSize.MEDIUM)
    honda = Car("TEST-0003", "Honda", "Blue", CarSize.LARGE)
    attendant.park_car(lot1, toyota1)
    attendant.park_car(lot1, honda)
    attendant.park_car(lot2, toyota2)

    found = police.investigate_blue_toyotas([lot1, lot2], attendant)

    assert len(found) == 2
    for inv in found:
        assert inv.car.make == "Toyota"
        assert inv.car.color == "Blue"
        assert inv.attendant_name == "Officer Smith"
    assert {(inv.car.plate, inv.lot_id, inv.slot_id) for inv in found} == {
        ("TEST-0001", 0, 0),
        ("TEST-0002", 1, 0),
    }


def test_investigate_bmw_cars_returns_all_with_locations(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    bmw1 = Car("TEST-0001", "BMW", "Black", CarSize.LARGE)
    bmw2 = Car("TEST-0002", "BMW", "White", CarSize.MEDIUM)
    toyota = Car("TEST-0003", "Toyota", "Blue", CarSize.SMALL)
    lot1.park(toyota)
    lot1.park(bmw1)
    lot2.park(bmw2)

    found = police.investigate_bmw_cars([lot1, lot2])

    assert len(found) == 2
    assert all(inv.car.make == "BMW" for inv in found)
    assert {(inv.car.plate, inv.lot_id, inv.slot_id) for inv in found} == {
        ("TEST-0001", 0, 1),
        ("TEST-0002", 1, 0),
    }


def test_investigate_recently_parked_cars(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    recent1 = Car("TEST-0002", "Honda", "White", CarSize.MEDIUM)
    recent2 = Car("TEST-0003", "BMW", "Black", CarSize.LARGE)
    old = Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL)
    lot1.park(recent1)
    lot1.park(old)
    lot2.park(recent2)
    lot1.set_parking_time(old.plate, datetime.now() - timedelta(minutes=45))

    found = police.investigate_recently_parked_cars([lot1, lot2], 30)

    assert len(found) == 2
    assert {inv.car.plate for inv in found} == {"TEST-0002", "TEST-0003"}
    now = datetime.now()
    for inv in found:
        assert 0 <= inv.lot_id < 2
        assert inv.slot_id == 0
        assert inv.parking_time is not None
        assert now - inv.parking_time <= timedelta(minutes=30)


def test_investigate_handicap_permit_fraud(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    small1 = Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL)
    small2 = Car("TEST-0002", "Honda", "White", CarSize.SMALL)
    large = Car("TEST-0003", "BMW", "Black", CarSize.LARGE)
    lot1.park_in_row(small1, "B", True)
    lot1.park_in_row(large, "D", True)
    lot2.park_in_row(small2, "D", True)

    found = police.investigate_handicap_permit_fraud([lot1, lot2], ["B", "D"])

    assert len(found) == 2
    for inv in found:
        assert inv.car_info.car.size is CarSize.SMALL
        assert inv.car_info.is_handicap is True
    assert {(inv.car_info.car.plate, inv.lot_id, inv.car_info.row) for inv in found} == {
        ("TEST-0001", 0, "B"),
        ("TEST-0002", 1, "D"),
    }


def test_investigate_handicap_permit_fraud_ignores_other_rows(police):
    lot = ParkingLot(10)
    lot.park_in_row(Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL), "A", True)
    assert police.investigate_handicap_permit_fraud([lot], ["B", "D"]) == []


def test_investigate_fraudulent_plates_returns_all_cars_in_lot(police):
    lot1, lot2 = ParkingLot(100), ParkingLot(100)
    car1 = Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL)
    car2 = Car("TEST-0002", "Honda", "White", CarSize.MEDIUM)
    car3 = Car("TEST-0003", "BMW", "Black", CarSize.LARGE)
    lot1.park(car1)
    lot1.park(car2)
    lot2.park(car3)

    found = police.investigate_fraudulent_plates(lot1)

    assert len(found) == 2
    assert [(inv.car.plate, inv.slot_id) for inv in found] == [
        ("TEST-0001", 0),
        ("TEST-0002", 1),
    ]
    for inv in found:
        assert inv.parking_time is not None
        assert inv.parking_time <= datetime.now()


def test_investigate_fraudulent_plates_empty_lot(police):
    assert police.investigate_fraudulent_plates(ParkingLot(5)) == []