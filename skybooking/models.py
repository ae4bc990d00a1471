"""Records held by the booking system and the in-memory store that keeps them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

_EPOCH = datetime(1970, 1, 1)


@dataclass
class Seat:
    """A seat on a plane; tier 1 is first, 2 business, 3 economy class."""

    row: int
    column: int
    booked: bool = False
    tier: int = 3


@dataclass
class Airplane:
    """A plane in the fleet."""

    plane_id: int
    current_city: str = ""
    number_of_seats: int = 0
    manufacturer: str = ""
    model: str = ""
    number_of_flights: int = 0
    speed: float = 0.0  # average speed in km/h
    fuel_price: float = 0.0  # price per kilometre


@dataclass(eq=False)
class Flight:
    """A scheduled flight; two flights are the same when their ids match."""

    flight_id: int
    from_airport_id: int = 0
    to_airport_id: int = 0
    origin: str = ""
    destination: str = ""
    high_price: int = 0
    mid_price: int = 0
    low_price: int = 0
    available_seats: int = 0
    plane_id: int = 0
    estimated_time: timedelta = field(default_factory=timedelta)
    departure_date: datetime = _EPOCH
    arrival_date: datetime = _EPOCH

    def __eq__(self, other):
        if not isinstance(other, Flight):
            return NotImplemented
        return self.flight_id == other.flight_id

    def __hash__(self):
        return hash(self.flight_id)


@dataclass
class Ticket:
    """A booking of seats on one flight."""

    adults: int
    children: int
    flight_id: int
    seats: list[Seat] = field(default_factory=list)


@dataclass
class User:
    """A passenger account; the password is stored as its hash."""

    user_id: int
    email: str = ""
    password: int = 0
    username: str = ""
    phone_number: str = ""
    future_flight_ids: list[int] = field(default_factory=list)
    flight_history_ids: list[int] = field(default_factory=list)
    seat_preference: int = 1
    tier_preference: int = 2
    tickets: list[Ticket] = field(default_factory=list)


@dataclass
class City:
    """A location with its code and coordinates."""

    location: str
    code: str = ""
    longitude: float = 0.0
    latitude: float = 0.0


@dataclass
class Airport:
    """An airport account and the planes and flights it handles."""

    airport_id: int
    city: City
    email: str = ""
    password: int = 0
    capacity: int = 0
    scheduled_plane_ids: list[int] = field(default_factory=list)
    free_plane_ids: list[int] = field(default_factory=list)
    future_flight_ids: list[int] = field(default_factory=list)
    pending_plane_ids: list[int] = field(default_factory=list)
    pending_requests: list[Flight] = field(default_factory=list)
    sent_pending_requests: list[Flight] = field(default_factory=list)


@dataclass
class Admin:
    """An administrator account."""

    admin_id: int
    username: str = ""
    email: str = ""
    password: int = 0


@dataclass
class Database:
    """All records known to the system."""

    planes: list[Airplane] = field(default_factory=list)
    models: list[Airplane] = field(default_factory=list)
    flights: list[Flight] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    cities: list[City] = field(default_factory=list)
    airports: list[Airport] = field(default_factory=list)
    admins: list[Admin] = field(default_factory=list)

    def flight_by_id(self, flight_id):
        """Return the flight with the given id, or raise KeyError."""
        for flight in self.flights:
            if flight.flight_id == flight_id:
                return flight
        raise KeyError(f"no flight with id {flight_id}")