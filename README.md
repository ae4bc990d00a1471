# skybooking

This is the core of a small flight booking system. It provides:

- the records the system keeps
- password hashing and strength scoring
- seat selection on a fixed cabin layout
- the rows of the schedule and home page tables
- the list of one user's bookings

Everything is plain Python objects held in memory.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `skybooking.enums`

Result values of operations:

- `TicketResult`
- `AdminResult`
- `AirportResult`
- `LoginResult`
- `SignUpResult`

It also defines the constants `EARTH_RADIUS_KM`, `FIRST_CLASS_MULTIPLIER`, `BUSINESS_CLASS_MULTIPLIER` and `ECONOMY_CLASS_MULTIPLIER`.

### `skybooking.models`

Dataclass records:

- `Seat`
- `Airplane`
- `Flight`
- `Ticket`
- `User`
- `City`
- `Airport`
- `Admin`

Two `Flight` objects compare equal, and hash alike, when their `flight_id` values match.

`Database` holds the lists `planes`, `models`, `flights`, `users`, `cities`, `airports` and `admins`. `Database.flight_by_id(flight_id)` returns the matching flight. It raises `KeyError` when there is none.

### `skybooking.passwords`

- `password_hash(password)` gives a deterministic integer hash. Each UTF-8 byte is weighted by one of the first 60 primes, taken in cycling order. The result is reduced modulo `HASH_MODULUS`.
- `password_strength(password)` gives a score from 0 to 8.
  - Any password shorter than 8 characters scores 0.
  - Points are added for length, for upper-case letters, for lower-case letters, for digits, for special characters, and for having all four kinds.
  - One point is taken off for three characters in a run, either ascending or descending. One more point is taken off for three repeated characters.
- `strength_label(score)` turns a score into a word: `"very weak"`, `"weak"`, `"strong"` or `"very strong"`. It raises `ValueError` when the score is outside 0–8.

### `skybooking.seating`

`SeatMap(adults=1, children=0)` is the cabin grid.

- It has 15 rows and 9 columns, labelled `A B Aisle C D E Aisle F G`.
- Columns 2 and 6 are aisles.
- Rows 1–2 are first class, rows 3–6 are business and the rest are economy. Rows are counted from 0 in the API.

Selection:

- `max_selection()` is `adults + children`. That is the number of seats that can be selected at once.
- `toggle(row, column)` flips a seat.
- Once the limit is reached, unselected seats are disabled. Check this with `is_enabled`.
- `set_passengers(adults, children)` changes the counts. If the selection is over the new limit, seats are dropped from the back of the plane first.
- `is_checked`, `selected_seats()`, `clear()` and `load(seats)` manage the selection.
- A position that is off the grid, or that is an aisle, raises `ValueError`.

Pricing and tooltips:

- `total_price(flight)` adds up the flight's `high_price`, `mid_price` or `low_price` for each selected seat, according to the seat's tier.
- `tooltip(row, column, flight)` describes a seat.

`tier_for_row(row)` and `is_seat_column(column)` can be used on their own.

### `skybooking.schedule`

- `format_departure(when)` formats a time as `YYYY-MM-DD HH:MM`.
- `format_duration(duration)` formats a duration as `HH:MM:SS`.
- `schedule_rows(flights)` builds the full schedule as a list of `ScheduleRow`.
- `home_rows(flights)` builds the home page list as `(origin, destination, departure)` tuples.
- `plane_details(planes, row)` returns a `PlaneDetails`. It raises `IndexError` for a missing row.
- `route_options(flights)` gives the departure and arrival choices.
- `flight_options(planes, flights, flight_ids, arrival)` describes the first two matching flights as `FlightOption`. It raises `LookupError` when `flight_ids` is empty.

### `skybooking.bookings`

`BookingManager(database, user_index)` keeps one user's tickets.

- `save(flight_id, adults, children, seats, editing)` stores a booking.
  - When `editing` is `None`, it adds a new ticket. Otherwise it updates the ticket at index `editing`.
  - It returns the ticket's index.
  - It needs at least one adult.
- `edit(index)` returns a ticket so it can be changed.
- `delete(index)` removes a ticket and returns it.
- `rows()` gives the booking history as `BookingRow` values, numbered from 1.

## Example

```python
from datetime import datetime, timedelta

from skybooking.bookings import BookingManager
from skybooking.models import Database, Flight, User
from skybooking.passwords import password_strength, strength_label
from skybooking.seating import SeatMap

password = "password"
score = password_strength(password)
print(score, strength_label(score))  # 2 very weak

flight = Flight(
    flight_id=0,
    origin="Cairo",
    destination="Rome",
    high_price=300,
    mid_price=200,
    low_price=100,
    estimated_time=timedelta(hours=3),
    departure_date=datetime(2025, 6, 1, 9, 30),
)
db = Database(
    flights=[flight],
    users=[User(user_id=0, username="traveller", email="traveller@example.com")],
)

seats = SeatMap(adults=2)
seats.toggle(0, 0)   # first class
seats.toggle(7, 3)   # economy
print(seats.total_price(flight))  # 400

manager = BookingManager(db, 0)
manager.save(flight.flight_id, 2, 0, seats.selected_seats(), None)
print(manager.rows())
```

## What it does not do

There is no user interface and no command to run. There is also no storage: records live only in a `Database` object in memory, and nothing is saved to or loaded from disk.

The package also leaves these out:

- logging in and signing up
- searching flights by route
- the rules for creating tickets

The result enums name the outcomes of these operations, but the package does not implement the operations. A caller supplies the matching flight ids to `flight_options`, for example.