"""Seat database model.

A seat is stored as its row letters and number digits. The unique index on
``(upper(row), number)`` is the seat-name uniqueness rule: rows are letters
and numbers digits, so two seats share a name exactly when they share both.
"""

from sqlalchemy import Boolean, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel

NAME_INDEX = "ix_seats_name"


class SeatModel(BaseMutableModel):
    """Seat row.

    Fields:
        row: Row letters ("A")
        number: Number digits ("23")
        description: Free text, empty when none
        is_blocked: Whether new reservations are refused

    Indexes:
        - ix_seats_name: unique on (upper(row), number)
    """

    __tablename__ = "seats"

    row: Mapped[str] = mapped_column("seat_row", String(50), nullable=False)
    number: Mapped[str] = mapped_column("seat_number", String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_blocked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    @property
    def name(self) -> str:
        return f"{self.row}{self.number}"


Index(NAME_INDEX, func.upper(SeatModel.row), SeatModel.number, unique=True)
