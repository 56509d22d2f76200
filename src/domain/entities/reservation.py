"""Reservation domain entity.

Binds one user to one seat for one calendar day.

Business Rules:
    - A seat holds at most one reservation per day
    - Blocked seats accept no new reservations
    - Every change is validated completely before any attribute is assigned
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as date_type
from datetime import datetime
from uuid import UUID

from src.core.errors import Error
from src.core.result import Failure, Result, Success, ok
from src.domain.entities.entity import Entity
from src.domain.entities.seat import Seat
from src.domain.entities.user import User
from src.domain.errors import SeatError, UserError
from src.domain.value_objects import Date
from src.domain.value_objects.base import FACTORY_KEY


@dataclass(eq=False, kw_only=True)
class Reservation(Entity):
    """Reservation domain entity.

    Attributes:
        id: Unique reservation identifier
        date: Reserved calendar day
        user: User holding the reservation
        seat: Reserved seat

    Example:
        >>> result = Reservation.create(uuid7(), date(2025, 3, 1), user, seat)
        >>> reservation = result.value
        >>> seat.add_reservation(reservation)
        >>> Reservation.create(uuid7(), date(2025, 3, 1), other, seat).first_error.code
        'Seat.NotAvailable'
    """

    date: Date
    user: User = field(repr=False)
    seat: Seat = field(repr=False)

    @property
    def user_id(self) -> UUID:
        return self.user.id

    @property
    def seat_id(self) -> UUID:
        return self.seat.id

    @classmethod
    def create(
        cls,
        id: UUID,
        date: date_type | datetime | None,
        user: User | None,
        seat: Seat | None,
    ) -> Result[Reservation]:
        """Validate and build a reservation.

        Missing or invalid date, user and seat are reported together. Only
        when all three are present is the seat checked, against the
        reservations already loaded on it, for a booking on the same day
        (``Seat.NotAvailable``) and for being blocked (``Seat.Blocked``).

        The new reservation is not attached to the user or the seat; the
        caller does that once it is persisted.
        """
        day = Date.create(date)
        if user is None or seat is None or day.is_failure:
            errors: list[Error] = list(day.errors)
            if user is None:
                errors.append(UserError.IS_NULL)
            if seat is None:
                errors.append(SeatError.IS_NULL)
            return Failure(errors=errors)

        if not seat.is_available_on(day.value):
            return Failure(errors=SeatError.not_available(seat.id, day.value.value))
        if seat.is_blocked:
            return Failure(errors=SeatError.BLOCKED)

        return Success(
            value=cls(id=id, date=day.value, user=user, seat=seat, _key=FACTORY_KEY)
        )

    def reschedule(
        self, seat: Seat | None, date: date_type | datetime | None
    ) -> Result[None]:
        """Move the reservation to a seat and day in one step.

        The target seat must be free on the target day (this reservation
        excluded); a blocked seat is refused unless it is the current one.
        Nothing is assigned unless every check passes.
        """
        new_day = Date.create(date)
        if seat is None:
            return Failure(errors=[*new_day.errors, SeatError.IS_NULL])
        if new_day.is_failure:
            return new_day

        if not seat.is_available_on(new_day.value, self.id):
            return Failure(errors=SeatError.not_available(seat.id, new_day.value.value))
        if seat != self.seat and seat.is_blocked:
            return Failure(errors=SeatError.BLOCKED)

        if seat != self.seat:
            self.seat.remove_reservation(self)
            seat.add_reservation(self)
            self.seat = seat
        self.date = new_day.value
        return ok()

    def change_date(self, date: date_type | datetime | None) -> Result[None]:
        return self.reschedule(self.seat, date)

    def change_seat(self, seat: Seat | None) -> Result[None]:
        if seat is None:
            return Failure(errors=SeatError.IS_NULL)
        return self.reschedule(seat, self.date.value)

    def change_user(self, user: User | None) -> Result[None]:
        if user is None:
            return Failure(errors=UserError.IS_NULL)
        if user == self.user:
            return ok()

        self.user.remove_reservation(self)
        user.add_reservation(self)
        self.user = user
        return ok()
