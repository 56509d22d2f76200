"""SeatRepository protocol for seat persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.seat import Seat
from src.domain.value_objects import Date


class SeatRepository(Protocol):
    """Seat repository protocol (port).

    Storage-level uniqueness violations come back as
    ``Failure(SeatError.NAME_ALREADY_IN_USE)`` (category CONFLICT).

    Methods:
        find_by_id: Retrieve seat by ID
        find_by_name: Retrieve seat by canonical name ("A23")
        is_name_unique: Uniqueness predicate used before writes
        is_available: Same-day booking predicate for a seat
        list_all: Retrieve every seat
        save: Create new seat
        update: Persist changes to an existing seat
        delete: Remove seat
    """

    async def find_by_id(self, seat_id: UUID) -> Seat | None:
        ...

    async def find_by_name(self, name: str) -> Seat | None:
        """Find seat by canonical name (case-insensitive).

        Returns:
            Seat if found, None otherwise.
        """
        ...

    async def is_name_unique(
        self, name: str, exclude_seat_id: UUID | None = None
    ) -> bool:
        ...

    async def is_available(
        self,
        seat_id: UUID,
        date: Date,
        exclude_reservation_id: UUID | None = None,
    ) -> bool:
        """Check that the seat holds no other reservation on ``date``.

        Args:
            seat_id: Seat to check.
            date: Calendar day to check.
            exclude_reservation_id: Reservation to ignore (the one being
                updated).

        Returns:
            True when the day is free for this seat.
        """
        ...

    async def list_all(self) -> list[Seat]:
        ...

    async def save(self, seat: Seat) -> Result[None]:
        ...

    async def update(self, seat: Seat) -> Result[None]:
        ...

    async def delete(self, seat_id: UUID) -> Result[None]:
        ...
