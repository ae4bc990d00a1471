"""A passenger's bookings: the booking history table and saving, editing and deleting tickets."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Seat, Ticket
from .schedule import format_departure
from .seating import tier_for_row

CHECKOUT_MESSAGE = "Check out complete!!!"
BOOKING_ACTIONS = ("Edit Booking", "Delete Booking")


@dataclass(frozen=True)
class BookingRow:
    """One line of the booking history table."""

    number: int
    departure_airport: str
    arrival_airport: str
    takeoff: str
    passengers: int


class BookingManager:
    """Tickets of one user in a database, kept in booking order."""

    def __init__(self, database, user_index):
        if not 0 <= user_index < len(database.users):
            raise IndexError(f"no user at index {user_index}")
        self.database = database
        self.user = database.users[user_index]

    def _check_index(self, index):
        if not 0 <= index < len(self.user.tickets):
            raise IndexError(f"no booking at index {index}")

    def rows(self):
        """Rows of the booking history, numbered from 1."""
        result = []
        for number, ticket in enumerate(self.user.tickets, start=1):
            flight = self.database.flight_by_id(ticket.flight_id)
            result.append(
                BookingRow(
                    number=number,
                    departure_airport=flight.origin,
                    arrival_airport=flight.destination,
                    takeoff=format_departure(flight.departure_date),
                    passengers=len(ticket.seats),
                )
            )
        return result

    def save(self, flight_id, adults, children, seats, editing):
        """Store a booking; update the ticket at index editing, or add a new one when None.

        Returns the index of the saved ticket.
        """
        if adults < 1:
            raise ValueError("a booking needs at least one adult")
        if children < 0:
            raise ValueError("children cannot be negative")
        self.database.flight_by_id(flight_id)
        booked = [
            Seat(row=seat.row, column=seat.column, booked=True, tier=tier_for_row(seat.row))
            for seat in seats
        ]
        if editing is not None:
            self._check_index(editing)
            ticket = self.user.tickets[editing]
            ticket.adults = adults
            ticket.children = children
            ticket.flight_id = flight_id
            ticket.seats = booked
            return editing
        self.user.tickets.append(
            Ticket(adults=adults, children=children, flight_id=flight_id, seats=booked)
        )
        return len(self.user.tickets) - 1

    def edit(self, index):
        """The ticket at index, to fill the booking page for editing."""
        self._check_index(index)
        return self.user.tickets[index]

    def delete(self, index):
        """Remove the ticket at index and return it."""
        self._check_index(index)
        return self.user.tickets.pop(index)