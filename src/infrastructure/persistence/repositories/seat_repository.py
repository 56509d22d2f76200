"""SeatRepository - SQLAlchemy implementation of SeatRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, ok
from src.domain.entities.seat import Seat
from src.domain.errors import SeatError
from src.domain.services import is_day_free
from src.domain.value_objects import Date
from src.infrastructure.persistence.mappers import copy_seat, load_seat, seat_to_model
from src.infrastructure.persistence.models import ReservationModel, SeatModel
from src.infrastructure.persistence.repositories.commit import commit_or_conflict


class SeatRepository:
    """SQLAlchemy implementation of SeatRepository protocol.

    Seat names compare case-insensitively ("a1" finds "A1").

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, seat_id: UUID) -> Seat | None:
        return await load_seat(self.session, seat_id)

    async def find_by_name(self, name: str) -> Seat | None:
        seat_id = await self._owner_of(name)
        if seat_id is None:
            return None
        return await load_seat(self.session, seat_id)

    async def is_name_unique(
        self, name: str, exclude_seat_id: UUID | None = None
    ) -> bool:
        owner = await self._owner_of(name)
        return owner is None or owner == exclude_seat_id

    async def is_available(
        self,
        seat_id: UUID,
        date: Date,
        exclude_reservation_id: UUID | None = None,
    ) -> bool:
        seat = await load_seat(self.session, seat_id)
        reservations = seat.reservations if seat is not None else []
        return is_day_free(reservations, date, exclude_reservation_id)

    async def list_all(self) -> list[Seat]:
        stmt = select(SeatModel.id).order_by(
            func.upper(SeatModel.row), func.length(SeatModel.number), SeatModel.number
        )
        seats = [
            await load_seat(self.session, seat_id)
            for seat_id in (await self.session.scalars(stmt)).all()
        ]
        return [seat for seat in seats if seat is not None]

    async def save(self, seat: Seat) -> Result[None]:
        self.session.add(seat_to_model(seat))
        return await commit_or_conflict(self.session, SeatError.NAME_ALREADY_IN_USE)

    async def update(self, seat: Seat) -> Result[None]:
        model = await self.session.get(SeatModel, seat.id)
        if model is None:
            return Failure(errors=SeatError.not_found(seat.id))
        copy_seat(seat, model)
        return await commit_or_conflict(self.session, SeatError.NAME_ALREADY_IN_USE)

    async def delete(self, seat_id: UUID) -> Result[None]:
        """Delete seat and its reservations."""
        model = await self.session.get(SeatModel, seat_id)
        if model is None:
            return Failure(errors=SeatError.not_found(seat_id))
        await self.session.execute(
            delete(ReservationModel).where(ReservationModel.seat_id == seat_id)
        )
        await self.session.delete(model)
        await self.session.commit()
        return ok()

    async def _owner_of(self, name: str) -> UUID | None:
        stmt = select(SeatModel.id).where(
            func.upper(SeatModel.row + SeatModel.number) == name.upper()
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()
