"""ReservationRepository protocol for reservation persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.reservation import Reservation
from src.domain.value_objects import Date


class ReservationRepository(Protocol):
    """Reservation repository protocol (port).

    Implementations keep a unique index on (seat id, day). A write that
    would put two reservations on the same seat and day returns
    ``Failure(SeatError.not_available(...))`` (category CONFLICT), even when
    the caller skipped the availability check or lost a race.

    Methods:
        find_by_id: Retrieve reservation by ID
        list_by_seat_id: Reservations of a seat, ordered by date
        list_by_user_id: Reservations of a user, ordered by date
        list_by_date: Reservations on a day
        list_all: Every reservation, ordered by date then seat name
        save: Create new reservation
        update: Persist changes to an existing reservation
        delete: Remove reservation
    """

    async def find_by_id(self, reservation_id: UUID) -> Reservation | None:
        ...

    async def list_by_seat_id(self, seat_id: UUID) -> list[Reservation]:
        ...

    async def list_by_user_id(self, user_id: UUID) -> list[Reservation]:
        ...

    async def list_by_date(self, date: Date) -> list[Reservation]:
        ...

    async def list_all(self) -> list[Reservation]:
        ...

    async def save(self, reservation: Reservation) -> Result[None]:
        """Create new reservation.

        Returns:
            Success, or Failure(Seat.NotAvailable) when the seat is already
            booked on that day.
        """
        ...

    async def update(self, reservation: Reservation) -> Result[None]:
        ...

    async def delete(self, reservation_id: UUID) -> Result[None]:
        ...
