"""Reservation queries (CQRS read operations).

List queries return an empty list, never a failure, when nothing matches.
"""

from dataclasses import dataclass, replace
from typing import Self

from src.application.filters import normalize_email, normalize_seat_name
from src.domain.types import EmailAddress, EntityId, ReservationDate, SeatNameText


@dataclass(frozen=True, kw_only=True)
class GetReservationById:
    """Get a single reservation by ID."""

    reservation_id: EntityId


@dataclass(frozen=True, kw_only=True)
class ListReservationsBySeat:
    """List a seat's reservations, ordered by day."""

    seat_id: EntityId


@dataclass(frozen=True, kw_only=True)
class ListReservationsByUser:
    """List a user's reservations, ordered by day."""

    user_id: EntityId


@dataclass(frozen=True, kw_only=True)
class ListReservationsByDate:
    """List every reservation on a day, ordered by seat name.

    Example:
        >>> query = ListReservationsByDate(date=date(2025, 3, 1))
        >>> result = await handler.handle(query)
        >>> [r.seat_name for r in result.value]
        ['A1', 'A2']
    """

    date: ReservationDate


@dataclass(frozen=True, kw_only=True)
class GetAllReservations:
    """List every reservation, ordered by day then seat name."""


@dataclass(frozen=True, kw_only=True)
class ListReservationsBySeatName:
    """List a seat's reservations by the seat's name ("a1" finds "A1")."""

    name: SeatNameText

    def filtered(self) -> Self:
        return replace(self, name=normalize_seat_name(self.name))


@dataclass(frozen=True, kw_only=True)
class ListReservationsByUserEmail:
    """List a user's reservations by the user's email (case-insensitive)."""

    email: EmailAddress

    def filtered(self) -> Self:
        return replace(self, email=normalize_email(self.email))
