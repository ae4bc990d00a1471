import pytest

from skybooking.models import Flight, Seat
from skybooking.seating import (
    COLUMN_LABELS,
    SeatMap,
    is_seat_column,
    tier_for_row,
)


@pytest.fixture
def flight():
    return Flight(flight_id=0, high_price=300, mid_price=200, low_price=150)


@pytest.mark.parametrize(
    "row, tier",
    [(0, 1), (1, 1), (2, 2), (5, 2), (6, 3), (14, 3)],
)
def test_tier_for_row(row, tier):
    assert tier_for_row(row) == tier


@pytest.mark.parametrize("column", [2, 6])
def test_aisle_columns_hold_no_seats(column):
    assert is_seat_column(column) is False
    assert COLUMN_LABELS[column] == "Aisle"


@pytest.mark.parametrize("column", [0, 1, 3, 4, 5, 7, 8])
def test_seat_columns(column):
    assert is_seat_column(column) is True


def test_out_of_range_column_is_not_a_seat():
    assert is_seat_column(9) is False
    assert is_seat_column(-1) is False


def test_max_selection_counts_adults_and_children():
    seats = SeatMap(adults=2, children=3)
    assert seats.max_selection() == 5


def test_toggle_selects_and_deselects():
    seats = SeatMap(adults=2)
    assert seats.toggle(3, 0) is True
    assert seats.is_checked(3, 0) is True
    assert seats.toggle(3, 0) is False
    assert seats.is_checked(3, 0) is False


def test_limit_disables_unselected_seats():
    seats = SeatMap(adults=1)
    seats.toggle(0, 0)
    assert seats.is_enabled(0, 0) is True
    assert seats.is_enabled(0, 1) is False
    assert seats.toggle(0, 1) is False
    assert [(s.row, s.column) for s in seats.selected_seats()] == [(0, 0)]


def test_deselecting_reenables_seats():
    seats = SeatMap(adults=1)
    seats.toggle(0, 0)
    seats.toggle(0, 0)
    assert seats.is_enabled(0, 1) is True


def test_reducing_passengers_drops_rearmost_selection():
    seats = SeatMap(adults=3)
    seats.toggle(10, 8)
    seats.toggle(0, 0)
    seats.toggle(4, 3)
    seats.set_passengers(1, 1)
    assert [(s.row, s.column) for s in seats.selected_seats()] == [(0, 0), (4, 3)]
    assert len(seats.selected_seats()) == seats.max_selection()


def test_negative_passengers_rejected():
    with pytest.raises(ValueError):
        SeatMap(adults=-1)
    seats = SeatMap()
    with pytest.raises(ValueError):
        seats.set_passengers(1, -1)


def test_selected_seats_are_row_major_with_tiers():
    seats = SeatMap(adults=3)
    seats.toggle(7, 1)
    seats.toggle(0, 8)
    seats.toggle(3, 4)
    selected = seats.selected_seats()
    assert [(s.row, s.column) for s in selected] == [(0, 8), (3, 4), (7, 1)]
    assert [s.tier for s in selected] == [tier_for_row(s.row) for s in selected]
    assert all(s.booked for s in selected)


def test_total_price_uses_tier_prices(flight):
    seats = SeatMap(adults=3)
    seats.toggle(0, 0)
    seats.toggle(3, 0)
    seats.toggle(9, 0)
    assert seats.total_price(flight) == flight.high_price + flight.mid_price + flight.low_price


def test_total_price_of_empty_selection_is_zero(flight):
    assert SeatMap().total_price(flight) == 0


def test_clear_removes_selection():
    seats = SeatMap(adults=2)
    seats.toggle(1, 1)
    seats.toggle(2, 3)
    seats.clear()
    assert seats.selected_seats() == []
    assert seats.is_enabled(5, 5) is True


def test_load_round_trip():
    seats = SeatMap(adults=2)
    seats.toggle(0, 0)
    seats.toggle(12, 7)
    saved = seats.selected_seats()
    other = SeatMap(adults=2)
    other.load(saved)
    assert other.selected_seats() == saved


def test_load_skips_aisle_places():
    seats = SeatMap(adults=2)
    seats.load([Seat(row=1, column=2), Seat(row=1, column=3)])
    assert [(s.row, s.column) for s in seats.selected_seats()] == [(1, 3)]


def test_toggle_aisle_raises():
    with pytest.raises(ValueError):
        SeatMap().toggle(0, 2)


def test_toggle_outside_plane_raises():
    with pytest.raises(ValueError):
        SeatMap().toggle(15, 0)


def test_tooltip_first_class(flight):
    text = SeatMap().tooltip(0, 0, flight)
    assert text == (
        "Col: A\nRow: 1\nClass: First Class\nPrice: $300.00\n"
        "Has Wifi and Power Outlets for charging!"
    )


def test_tooltip_uses_column_letter_and_class(flight):
    text = SeatMap().tooltip(8, 3, flight)
    assert text.startswith("Col: C\nRow: 9\nClass: Economy\nPrice: $150.00")


def test_tooltip_for_aisle_raises(flight):
    with pytest.raises(ValueError):
        SeatMap().tooltip(0, 6, flight)