"""ReservationRepository - SQLAlchemy implementation of ReservationRepository protocol.

The (seat id, day) unique constraint is the last line of defence against
double booking: a write that collides returns Failure(Seat.NotAvailable)
even when the availability check was skipped or a concurrent request won.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, ok
from src.domain.entities.reservation import Reservation
from src.domain.errors import ReservationError, SeatError, UserError
from src.domain.value_objects import Date
from src.infrastructure.persistence.mappers import (
    copy_reservation,
    load_reservation,
    load_reservations,
    load_seat,
    load_user,
    reservation_to_model,
)
from src.infrastructure.persistence.models import (
    ReservationModel,
    SeatModel,
    UserModel,
)
from src.infrastructure.persistence.repositories.commit import commit_or_conflict


def _by_day_and_seat(reservation: Reservation) -> tuple:
    return (reservation.date.value, reservation.seat.name.value)


class ReservationRepository:
    """SQLAlchemy implementation of ReservationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, reservation_id: UUID) -> Reservation | None:
        return await load_reservation(self.session, reservation_id)

    async def list_by_seat_id(self, seat_id: UUID) -> list[Reservation]:
        seat = await load_seat(self.session, seat_id)
        return list(seat.reservations) if seat is not None else []

    async def list_by_user_id(self, user_id: UUID) -> list[Reservation]:
        user = await load_user(self.session, user_id)
        return list(user.reservations) if user is not None else []

    async def list_by_date(self, date: Date) -> list[Reservation]:
        stmt = select(ReservationModel.id).where(ReservationModel.day == date.value)
        ids = list((await self.session.scalars(stmt)).all())
        reservations = await load_reservations(self.session, ids)
        return sorted(reservations, key=lambda r: r.seat.name.value)

    async def list_all(self) -> list[Reservation]:
        ids = list((await self.session.scalars(select(ReservationModel.id))).all())
        reservations = await load_reservations(self.session, ids)
        return sorted(reservations, key=_by_day_and_seat)

    async def save(self, reservation: Reservation) -> Result[None]:
        """Create new reservation.

        Returns:
            Success, Failure(User.NotFound) / Failure(Seat.NotFound) for
            dangling references, or Failure(Seat.NotAvailable) when the seat
            is already booked that day.
        """
        missing = await self._check_references(reservation)
        if missing is not None:
            return missing
        self.session.add(reservation_to_model(reservation))
        return await commit_or_conflict(self.session, self._collision(reservation))

    async def update(self, reservation: Reservation) -> Result[None]:
        model = await self.session.get(ReservationModel, reservation.id)
        if model is None:
            return Failure(errors=ReservationError.not_found(reservation.id))
        missing = await self._check_references(reservation)
        if missing is not None:
            return missing
        copy_reservation(reservation, model)
        return await commit_or_conflict(self.session, self._collision(reservation))

    async def delete(self, reservation_id: UUID) -> Result[None]:
        model = await self.session.get(ReservationModel, reservation_id)
        if model is None:
            return Failure(errors=ReservationError.not_found(reservation_id))
        await self.session.delete(model)
        await self.session.commit()
        return ok()

    @staticmethod
    def _collision(reservation: Reservation):
        return SeatError.not_available(reservation.seat_id, reservation.date.value)

    async def _check_references(self, reservation: Reservation) -> Failure | None:
        if await self.session.get(UserModel, reservation.user_id) is None:
            return Failure(errors=UserError.not_found(reservation.user_id))
        if await self.session.get(SeatModel, reservation.seat_id) is None:
            return Failure(errors=SeatError.not_found(reservation.seat_id))
        return None
