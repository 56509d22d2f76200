"""Property-based tests for seat names and the availability rule.

Uses Hypothesis to check invariants over generated inputs.
"""

from datetime import date, timedelta

from hypothesis import given
from hypothesis import strategies as st
from uuid_extensions import uuid7

from src.domain.entities import Reservation
from src.domain.value_objects import FirstName, SeatName
from tests.conftest import create_seat, create_user

rows = st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", min_size=1, max_size=4)
numbers = st.text(alphabet="0123456789", min_size=1, max_size=4)
days = st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31))


@given(number=numbers, row=rows)
def test_seat_name_string_round_trip(number, row):
    """Parsing the canonical string gives back an equal seat name."""
    name = SeatName.create(number, row).value

    parsed = SeatName.convert_from_string(str(name))

    assert parsed.value == name
    assert parsed.value.row.value == row
    assert parsed.value.number.value == number


@given(text=st.text(max_size=20))
def test_seat_name_parser_never_raises(text):
    """Any text yields a Result, never an exception."""
    result = SeatName.convert_from_string(text)

    assert result.is_success or result.errors


@given(value=st.text(max_size=60))
def test_name_failures_are_never_empty(value):
    """A failing name always explains itself, and blank input gives one error."""
    result = FirstName.create(value)

    if result.is_failure:
        assert result.errors
        if not value.strip():
            assert [e.code for e in result.errors] == ["FirstName.IsNullOrEmpty"]


@given(first=days, second=days)
def test_second_booking_succeeds_only_on_other_day(first, second):
    """A seat holds at most one reservation per calendar day."""
    seat = create_seat()
    existing = Reservation.create(uuid7(), first, create_user(), seat).value
    seat.add_reservation(existing)

    result = Reservation.create(uuid7(), second, create_user(), seat)

    assert result.is_success == (first != second)


@given(day=days, offset=st.integers(min_value=1, max_value=365))
def test_reschedule_never_collides(day, offset):
    """After any successful reschedule, no two reservations share a day."""
    seat = create_seat()
    for delta in (0, offset):
        reservation = Reservation.create(
            uuid7(), day + timedelta(days=delta), create_user(), seat
        ).value
        seat.add_reservation(reservation)

    moving = seat.reservations[1]
    moving.change_date(day)

    booked_days = [r.date for r in seat.reservations]
    assert len(booked_days) == len(set(booked_days))
