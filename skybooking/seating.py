"""Seat map of a plane: selection limits, seat tiers, prices and tooltips."""

from __future__ import annotations

from .models import Seat

ROWS = 15
COLUMNS = 9
COLUMN_LABELS = ("A", "B", "Aisle", "C", "D", "E", "Aisle", "F", "G")
AISLE_COLUMNS = frozenset({2, 6})

FIRST_CLASS_ROWS = 2
BUSINESS_CLASS_ROWS = 6

CLASS_NAMES = {1: "First Class", 2: "Business", 3: "Economy"}

_TOOLTIP = (
    "Col: {column}\nRow: {row}\nClass: {name}\nPrice: ${price:.2f}\n"
    "Has Wifi and Power Outlets for charging!"
)


def tier_for_row(row):
    """Seat tier of a row: 1 first class, 2 business, 3 economy."""
    if row < FIRST_CLASS_ROWS:
        return 1
    if row < BUSINESS_CLASS_ROWS:
        return 2
    return 3


def is_seat_column(column):
    """True when the column holds seats rather than an aisle."""
    return 0 <= column < COLUMNS and column not in AISLE_COLUMNS


def _price_for_tier(flight, tier):
    if tier == 1:
        return flight.high_price
    if tier == 2:
        return flight.mid_price
    return flight.low_price


class SeatMap:
    """Selectable seats of one plane, limited to the number of passengers."""

    def __init__(self, adults=1, children=0):
        self._checked = set()
        self.adults = 0
        self.children = 0
        self.set_passengers(adults, children)

    def _check_position(self, row, column):
        if not 0 <= row < ROWS or not 0 <= column < COLUMNS:
            raise ValueError(f"no such place on the seat map: ({row}, {column})")
        if not is_seat_column(column):
            raise ValueError(f"column {column} is an aisle, not a seat")

    def _positions(self):
        """Every seat position in row-major order."""
        for row in range(ROWS):
            for column in range(COLUMNS):
                if is_seat_column(column):
                    yield row, column

    def _enforce_limit(self):
        """Drop selections from the back of the plane until within the limit."""
        limit = self.max_selection()
        for position in reversed(list(self._positions())):
            if len(self._checked) <= limit:
                break
            self._checked.discard(position)

    def max_selection(self):
        """How many seats may be selected at once."""
        return self.adults + self.children

    def set_passengers(self, adults, children):
        """Change the passenger counts and trim any selection beyond the limit."""
        if adults < 0 or children < 0:
            raise ValueError("passenger counts cannot be negative")
        self.adults = adults
        self.children = children
        self._enforce_limit()

    def toggle(self, row, column):
        """Flip a seat's selection if it can be clicked; return whether it is selected."""
        self._check_position(row, column)
        position = (row, column)
        if not self.is_enabled(row, column):
            return False
        if position in self._checked:
            self._checked.remove(position)
        else:
            self._checked.add(position)
        self._enforce_limit()
        return position in self._checked

    def is_checked(self, row, column):
        """Whether the seat is selected."""
        self._check_position(row, column)
        return (row, column) in self._checked

    def is_enabled(self, row, column):
        """Whether the seat can be clicked: selected seats always, others until the limit."""
        self._check_position(row, column)
        if (row, column) in self._checked:
            return True
        return len(self._checked) < self.max_selection()

    def selected_seats(self):
        """Selected seats in row-major order."""
        return [
            Seat(row=row, column=column, booked=True, tier=tier_for_row(row))
            for row, column in self._positions()
            if (row, column) in self._checked
        ]

    def total_price(self, flight):
        """Sum of the flight's price for the tier of every selected seat."""
        return sum(_price_for_tier(flight, seat.tier) for seat in self.selected_seats())

    def clear(self):
        """Deselect every seat."""
        self._checked.clear()

    def load(self, seats):
        """Replace the selection with the given seats, skipping aisle or missing places."""
        self._checked.clear()
        for seat in seats:
            if 0 <= seat.row < ROWS and is_seat_column(seat.column):
                self._checked.add((seat.row, seat.column))
        self._enforce_limit()

    def tooltip(self, row, column, flight):
        """Text describing a seat: its column, row, class and price on the flight."""
        self._check_position(row, column)
        tier = tier_for_row(row)
        return _TOOLTIP.format(
            column=COLUMN_LABELS[column],
            row=row + 1,
            name=CLASS_NAMES[tier],
            price=float(_price_for_tier(flight, tier)),
        )