"""Reservation domain errors."""

from uuid import UUID

from src.core.errors import Error


class ReservationError:
    """Reservation error constants."""

    @staticmethod
    def not_found(reservation_id: UUID) -> Error:
        return Error.not_found(
            "Reservation.NotFound",
            f"The reservation with the identifier {reservation_id} was not found.",
        )
