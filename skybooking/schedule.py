"""Flight schedule listings, plane details and route choices for the booking pages."""

from __future__ import annotations

from dataclasses import dataclass

MAX_FLIGHT_OPTIONS = 2
NO_FLIGHTS_MESSAGE = "No flights found matching the travel route.\nTry again"


@dataclass(frozen=True)
class ScheduleRow:
    """One line of the full flight schedule."""

    number: int
    origin: str
    destination: str
    plane_label: str
    departure: str
    duration: str
    plane_index: int


@dataclass(frozen=True)
class PlaneDetails:
    """What the plane details view shows about one plane."""

    model: str
    manufacturer: str
    seats: str
    city: str
    flights: str


@dataclass(frozen=True)
class FlightOption:
    """One of the matching flights offered on the booking page."""

    flight_id: int
    plane_label: str
    destination_label: str
    departure_label: str


def format_departure(when):
    """Date and time as 'YYYY-MM-DD HH:MM'."""
    return when.strftime("%Y-%m-%d %H:%M")


def format_duration(duration):
    """Duration as 'HH:MM:SS', hours not wrapped at a day, negative with a '-'."""
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def schedule_rows(flights):
    """Rows of the full schedule, one per flight, in the order given."""
    return [
        ScheduleRow(
            number=flight.flight_id + 1,
            origin=flight.origin,
            destination=flight.destination,
            plane_label=f"Plane {index + 1}",
            departure=format_departure(flight.departure_date),
            duration=format_duration(flight.estimated_time),
            plane_index=index,
        )
        for index, flight in enumerate(flights)
    ]


def home_rows(flights):
    """Rows of the home page table: origin, destination and departure text."""
    return [
        (flight.origin, flight.destination, format_departure(flight.departure_date))
        for flight in flights
    ]


def plane_details(planes, row):
    """Details of the plane at the given row of the schedule."""
    if not 0 <= row < len(planes):
        raise IndexError(f"no plane at row {row}")
    plane = planes[row]
    return PlaneDetails(
        model=plane.model,
        manufacturer=plane.manufacturer,
        seats=str(plane.number_of_seats),
        city=plane.current_city,
        flights=str(plane.number_of_flights),
    )


def route_options(flights):
    """Choices for the departure and arrival drop-downs, one entry per flight."""
    departures = [flight.origin for flight in flights]
    arrivals = [flight.destination for flight in flights]
    return departures, arrivals


def flight_options(planes, flights, flight_ids, arrival):
    """Describe the first matching flights; raise LookupError when none match."""
    if not flight_ids:
        raise LookupError(NO_FLIGHTS_MESSAGE)
    options = []
    for flight_id in list(flight_ids)[:MAX_FLIGHT_OPTIONS]:
        if not 0 <= flight_id < len(planes) or not 0 <= flight_id < len(flights):
            raise IndexError(f"no flight or plane for id {flight_id}")
        plane = planes[flight_id]
        flight = flights[flight_id]
        options.append(
            FlightOption(
                flight_id=flight_id,
                plane_label=f"Plane: {plane.manufacturer} {plane.model}",
                destination_label=f"Goes: {arrival}",
                departure_label=f"Leaves At: {format_departure(flight.departure_date)}",
            )
        )
    return options