"""Model <-> entity mapping.

Loading rebuilds an entity graph from rows: a seat comes with its
reservations, each reservation with its user; a user comes with their
reservations, each reservation with its (fully loaded) seat. Stored rows
always hold values that passed validation, so rebuilding through the
entity factories cannot fail; if it does, the database is corrupt and
``InvalidResultError`` propagates.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Reservation, Seat, User
from src.domain.value_objects import Date
from src.domain.value_objects.base import FACTORY_KEY
from src.infrastructure.persistence.models import (
    ReservationModel,
    SeatModel,
    UserModel,
)


def user_to_model(user: User) -> UserModel:
    return UserModel(
        id=user.id,
        first_name=user.name.first_name.value,
        last_name=user.name.last_name.value,
        email=user.credentials.email.value,
        password=user.credentials.password.value,
    )


def seat_to_model(seat: Seat) -> SeatModel:
    return SeatModel(
        id=seat.id,
        row=seat.name.row.value,
        number=seat.name.number.value,
        description=seat.description.value,
        is_blocked=seat.is_blocked,
    )


def reservation_to_model(reservation: Reservation) -> ReservationModel:
    return ReservationModel(
        id=reservation.id,
        day=reservation.date.value,
        user_id=reservation.user_id,
        seat_id=reservation.seat_id,
    )


def copy_user(user: User, model: UserModel) -> None:
    """Write the entity's current state onto an existing row."""
    model.first_name = user.name.first_name.value
    model.last_name = user.name.last_name.value
    model.email = user.credentials.email.value
    model.password = user.credentials.password.value


def copy_seat(seat: Seat, model: SeatModel) -> None:
    model.row = seat.name.row.value
    model.number = seat.name.number.value
    model.description = seat.description.value
    model.is_blocked = seat.is_blocked


def copy_reservation(reservation: Reservation, model: ReservationModel) -> None:
    model.day = reservation.date.value
    model.user_id = reservation.user_id
    model.seat_id = reservation.seat_id


def user_from_model(model: UserModel) -> User:
    return User.create(
        model.id, model.first_name, model.last_name, model.email, model.password
    ).value


def seat_from_model(model: SeatModel) -> Seat:
    seat: Seat = Seat.create(model.id, model.number, model.row, model.description).value
    seat.is_blocked = model.is_blocked
    return seat


def reservation_from_model(
    model: ReservationModel, user: User, seat: Seat
) -> Reservation:
    # Stored reservations are rebuilt as-is: the seat may be blocked since.
    return Reservation(
        id=model.id,
        date=Date.create(model.day).value,
        user=user,
        seat=seat,
        _key=FACTORY_KEY,
    )


async def load_seat(session: AsyncSession, seat_id: UUID) -> Seat | None:
    model = await session.get(SeatModel, seat_id)
    if model is None:
        return None

    seat = seat_from_model(model)
    stmt = (
        select(ReservationModel, UserModel)
        .join(UserModel, ReservationModel.user_id == UserModel.id)
        .where(ReservationModel.seat_id == seat_id)
        .order_by(ReservationModel.day)
    )
    rows = await session.execute(stmt)
    for reservation_model, user_model in rows.all():
        user = user_from_model(user_model)
        reservation = reservation_from_model(reservation_model, user, seat)
        seat.reservations.append(reservation)
        user.reservations.append(reservation)
    return seat


async def load_reservation(
    session: AsyncSession, reservation_id: UUID
) -> Reservation | None:
    model = await session.get(ReservationModel, reservation_id)
    if model is None:
        return None
    seat = await load_seat(session, model.seat_id)
    if seat is None:
        return None
    return next((r for r in seat.reservations if r.id == reservation_id), None)


async def load_user(session: AsyncSession, user_id: UUID) -> User | None:
    model = await session.get(UserModel, user_id)
    if model is None:
        return None

    user = user_from_model(model)
    stmt = (
        select(ReservationModel.id)
        .where(ReservationModel.user_id == user_id)
        .order_by(ReservationModel.day)
    )
    for reservation_id in (await session.scalars(stmt)).all():
        reservation = await load_reservation(session, reservation_id)
        if reservation is None:
            continue
        reservation.user = user
        user.reservations.append(reservation)
    return user


async def load_reservations(
    session: AsyncSession, reservation_ids: list[UUID]
) -> list[Reservation]:
    """Load several reservations, skipping any deleted meanwhile."""
    loaded = [await load_reservation(session, rid) for rid in reservation_ids]
    return [reservation for reservation in loaded if reservation is not None]
