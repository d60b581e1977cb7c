# parkinglot

A small in-memory domain model of parking lots. It covers lots with a fixed
capacity, attendants who choose a lot by different rules, observers that are
told when a lot fills up or frees a space, and police queries over the cars
that are parked.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
from parkinglot.car import Car, CarSize
from parkinglot.parking_lot import ParkingLot
from parkinglot.attendant import ParkingAttendant
from parkinglot.police import PoliceDepartment

lot_a = ParkingLot(2)
lot_b = ParkingLot(2)
lots = [lot_a, lot_b]

attendant = ParkingAttendant("Sam")
attendant.park_car_evenly(lots, Car("TEST-0001", "Toyota", "Blue", CarSize.SMALL))
attendant.park_car_evenly(lots, Car("TEST-0002", "BMW", "White", CarSize.LARGE))

lot_a.find_car("TEST-0001")          # 0
lot_a.find_car("TEST-0002")          # None: it went to lot_b
lot_b.find_cars_by_color("White")    # [Car(plate='TEST-0002', ...)]

police = PoliceDepartment("City Police")
police.investigate_white_cars(lots)  # [CarLocation(car=..., lot_id=1, slot_id=0)]
```

## Cars

`parkinglot.car.Car` is a frozen dataclass with `plate`, `make`, `color` and
`size`. `size` is a `CarSize` (`SMALL`, `MEDIUM`, `LARGE`) and defaults to
`CarSize.SMALL`; `str(CarSize.LARGE)` gives `"Large"`. Cars are told apart by
their plate.

## Parking lots

`parkinglot.parking_lot.ParkingLot(capacity)` keeps its cars in parking order;
a car's slot number is its position in that order.

- `park(car)` returns `False` when the lot is full, otherwise parks the car,
  records the current time for its plate and returns `True`.
- `unpark(car)` removes the car with the same plate and its parking time, and
  returns `False` if no such car is parked.
- `parked_cars_count()`, `available_spaces()` and `is_full()` report occupancy.
- `find_car(plate)` gives the slot number, or `None` if the car is not parked.
- `parking_time(plate)` gives the `datetime` the car was parked and
  `parking_duration(plate)` the `timedelta` since then; both give `None` for a
  car that is not parked. `set_parking_time(plate, park_time)` overrides the
  recorded time.
- `find_cars_by_color(color)`, `find_cars_by_make(make)` and
  `find_cars_by_make_and_color(make, color)` return matching cars in parking
  order.
- `find_cars_parked_in_last_minutes(minutes)` returns the cars parked after
  that many minutes ago.
- `all_parked_cars()` returns a copy of the list of parked cars.
- `park_in_row(car, row, is_handicap)` parks a car like `park` and also
  records a `CarParkingInfo` (`car`, `row`, `slot_id`, `is_handicap`).
  `find_small_handicap_cars_in_rows(target_rows)` returns the records of small
  handicap cars in any of the given rows. These records are not removed when
  the car is unparked.

## Notifications

A lot has at most one owner and one security observer; adding another
replaces the previous one. Subclass the abstract classes in
`parkinglot.observers` and attach them:

```python
from parkinglot.observers import Owner

class PrintingOwner(Owner):
    def on_lot_full(self, message):
        print(message)

    def on_space_available(self, message):
        print(message)

lot = ParkingLot(1)
lot.add_owner_observer(PrintingOwner())
```

When a car fills the lot, the owner's and the security observer's
`on_lot_full` are called with `"Lot is full"`. When a car leaves a lot that
was full, the owner's `on_space_available` is called with
`"Space is Available"`. `Security` has only `on_lot_full`.

## Attendants

`parkinglot.attendant.ParkingAttendant(name)` parks cars by these rules:

- `park_car(lot, car)` and `unpark_car(lot, car)`: in the given lot.
- `park_car_evenly(lots, car)`: the lot with the fewest parked cars.
- `park_handicap_car(lots, car)`: the first lot that is not full, the lots
  being listed nearest first.
- `park_large_car(lots, car)`: the lot with the most free spaces.

Full lots are skipped, ties go to the earlier lot in the list, and each method
returns `True` if the car was parked and `False` if no lot had room.

## Police investigations

`parkinglot.police.PoliceDepartment(name)` runs queries across a list of lots.
In the results, `lot_id` is the lot's index in that list and `slot_id` is the
car's slot in its lot.

- `investigate_white_cars(lots)` → `CarLocation` records.
- `investigate_blue_toyotas(lots, attendant)` → `RobberyInvestigation`
  records, each with the attendant's name.
- `investigate_bmw_cars(lots)` → `SecurityInvestigation` records.
- `investigate_recently_parked_cars(lots, minutes)` →
  `BombThreatInvestigation` records with the parking time.
- `investigate_handicap_permit_fraud(lots, target_rows)` →
  `HandicapFraudInvestigation` records holding the `CarParkingInfo` and lot.
- `investigate_fraudulent_plates(lot)` → a `PlateInvestigation` for every car
  in one lot, with its slot and parking time.

## What this package does not do

It is a library only: there is no command-line program, server or user
interface. All state lives in memory in `ParkingLot` objects; nothing is
saved to disk or a database.