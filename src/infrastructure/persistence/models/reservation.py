"""Reservation database model.

The ``(seat_id, day)`` unique constraint is the storage-level guarantee
that a seat is booked at most once per calendar day.
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel

SEAT_DAY_CONSTRAINT = "uq_reservations_seat_day"


class ReservationModel(BaseMutableModel):
    """Reservation row.

    Fields:
        day: Reserved calendar day
        user_id: Holder (FK users.id, deleted with the user)
        seat_id: Reserved seat (FK seats.id, deleted with the seat)

    Constraints:
        - uq_reservations_seat_day: unique (seat_id, day)
    """

    __tablename__ = "reservations"
    __table_args__ = (UniqueConstraint("seat_id", "day", name=SEAT_DAY_CONSTRAINT),)

    day: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    seat_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("seats.id", ondelete="CASCADE"), nullable=False
    )
