"""Reservation commands (CQRS write operations).

Reservation dates are calendar days. The input filter reduces a datetime
to its day, and the validation pipeline rejects days before today unless
past reservations are allowed by configuration.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Self

from src.domain.types import EntityId, ReservationDate


def _as_day(value: date | datetime | None) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True, kw_only=True)
class CreateReservation:
    """Reserve a seat for a user on a day.

    Attributes:
        user_id: User making the reservation.
        seat_id: Seat to reserve.
        date: Day to reserve.

    Example:
        >>> command = CreateReservation(
        ...     user_id=user.id,
        ...     seat_id=seat.id,
        ...     date=date(2025, 3, 1),
        ... )
        >>> result = await handler.handle(command)
        >>> # Success(ReservationResponse) or Failure((Seat.NotAvailable, ...))
    """

    user_id: EntityId
    seat_id: EntityId
    date: ReservationDate

    def filtered(self) -> Self:
        return replace(self, date=_as_day(self.date))


@dataclass(frozen=True, kw_only=True)
class UpdateReservation:
    """Move a reservation to another day, seat or user.

    Fields left as None keep their current value.
    """

    reservation_id: EntityId
    user_id: EntityId | None = None
    seat_id: EntityId | None = None
    date: ReservationDate | None = None

    def filtered(self) -> Self:
        return replace(self, date=_as_day(self.date))


@dataclass(frozen=True, kw_only=True)
class DeleteReservation:
    """Cancel a reservation."""

    reservation_id: EntityId
