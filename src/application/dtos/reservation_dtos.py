"""Reservation DTOs (Data Transfer Objects)."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.domain.entities import Reservation


@dataclass(frozen=True, kw_only=True)
class ReservationResponse:
    """Public view of a reservation.

    Attributes:
        id: Reservation's unique identifier.
        date: Reserved day.
        user_id: Holder of the reservation.
        user_email: Holder's email address.
        seat_id: Reserved seat.
        seat_name: Reserved seat's canonical name.
    """

    id: UUID
    date: date
    user_id: UUID
    user_email: str
    seat_id: UUID
    seat_name: str

    @classmethod
    def from_entity(cls, reservation: Reservation) -> "ReservationResponse":
        return cls(
            id=reservation.id,
            date=reservation.date.value,
            user_id=reservation.user_id,
            user_email=reservation.user.email.value,
            seat_id=reservation.seat_id,
            seat_name=reservation.seat.name.value,
        )
