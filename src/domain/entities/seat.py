"""Seat domain entity.

A bookable seat, named by row and number (``"A23"``). Blocked seats keep
their existing reservations but accept no new ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from src.core.result import Result, Success, combine, ok
from src.domain.entities.entity import Entity
from src.domain.services.seat_availability import is_day_free
from src.domain.value_objects import Date, Description, SeatName
from src.domain.value_objects.base import FACTORY_KEY

if TYPE_CHECKING:
    from src.domain.entities.reservation import Reservation


@dataclass(eq=False, kw_only=True)
class Seat(Entity):
    """Seat domain entity.

    Attributes:
        id: Unique seat identifier
        name: Row + number seat name (unique among seats)
        description: Optional free text
        is_blocked: Whether new reservations are refused
        reservations: Reservations loaded for this seat
    """

    name: SeatName
    description: Description
    is_blocked: bool = False
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    @classmethod
    def create(
        cls,
        id: UUID,
        number: str | None,
        row: str | None,
        description: str | None = None,
    ) -> Result[Seat]:
        """Validate name parts and description and build a seat.

        Returns:
            Success(Seat), or Failure carrying the errors of all invalid
            fields.
        """
        name = SeatName.create(number, row)
        text = Description.create(description)
        failure = combine(name, text)
        if failure is not None:
            return failure
        return Success(
            value=cls(id=id, name=name.value, description=text.value, _key=FACTORY_KEY)
        )

    def change_name(self, number: str | None, row: str | None) -> Result[None]:
        name = SeatName.create(number, row)
        if name.is_failure:
            return name
        self.name = name.value
        return ok()

    def change_description(self, description: str | None) -> Result[None]:
        text = Description.create(description)
        if text.is_failure:
            return text
        self.description = text.value
        return ok()

    def block(self) -> None:
        self.is_blocked = True

    def unblock(self) -> None:
        self.is_blocked = False

    def is_available_on(
        self, date: Date, exclude_reservation_id: UUID | None = None
    ) -> bool:
        """Check the loaded reservations for a booking on the same day.

        Args:
            date: Day to check.
            exclude_reservation_id: Reservation to ignore (the one being
                moved or re-dated).
        """
        return is_day_free(self.reservations, date, exclude_reservation_id)

    def add_reservation(self, reservation: Reservation) -> None:
        if reservation not in self.reservations:
            self.reservations.append(reservation)

    def remove_reservation(self, reservation: Reservation) -> None:
        if reservation in self.reservations:
            self.reservations.remove(reservation)
