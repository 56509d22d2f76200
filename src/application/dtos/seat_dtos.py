"""Seat DTOs (Data Transfer Objects)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities import Seat


@dataclass(frozen=True, kw_only=True)
class SeatResponse:
    """Public view of a seat.

    Attributes:
        id: Seat's unique identifier.
        name: Canonical name ("A23").
        row: Row letters.
        number: Number digits.
        description: Free text, possibly empty.
        is_blocked: Whether new reservations are refused.
    """

    id: UUID
    name: str
    row: str
    number: str
    description: str
    is_blocked: bool

    @classmethod
    def from_entity(cls, seat: Seat) -> "SeatResponse":
        return cls(
            id=seat.id,
            name=seat.name.value,
            row=seat.name.row.value,
            number=seat.name.number.value,
            description=seat.description.value,
            is_blocked=seat.is_blocked,
        )
