"""Seat availability rule.

A seat cannot hold two reservations on the same calendar day. This module is
the single definition of a collision; the Seat entity and every repository
``is_available`` implementation delegate to it.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from src.core.result import Failure, Result, ok
from src.domain.errors import SeatError

if TYPE_CHECKING:
    from src.domain.entities.reservation import Reservation
    from src.domain.value_objects import Date


def is_day_free(
    reservations: Iterable[Reservation],
    day: Date,
    exclude_reservation_id: UUID | None = None,
) -> bool:
    """Return True when no reservation other than the excluded one is on ``day``.

    Args:
        reservations: Reservations of a single seat.
        day: Day to check.
        exclude_reservation_id: Reservation to ignore, typically the one being
            re-dated or moved.
    """
    return not any(
        reservation.date == day and reservation.id != exclude_reservation_id
        for reservation in reservations
    )


def ensure_available(seat_id: UUID, day: date, available: bool) -> Result[None]:
    """Turn an availability answer into a Result.

    Returns:
        ok() when available, otherwise Failure(Seat.NotAvailable).
    """
    if available:
        return ok()
    return Failure(errors=SeatError.not_available(seat_id, day))
