"""Seat domain errors.

Usage:
    from src.domain.errors import SeatError
    from src.core.result import Failure

    if not available:
        return Failure(errors=SeatError.not_available(seat_id, day))
"""

from datetime import date
from uuid import UUID

from src.core.errors import Error


class SeatError:
    """Seat error constants.

    Error Categories:
        - Validation: IS_NULL
        - Conflict: NAME_ALREADY_IN_USE, BLOCKED, not_available()
        - Lookup: not_found(), name_not_exist()
    """

    IS_NULL = Error.validation("Seat.IsNull", "The seat cannot be null.")

    NAME_ALREADY_IN_USE = Error.conflict(
        "Seat.NameAlreadyInUse", "The seat name is already in use."
    )

    BLOCKED = Error.conflict("Seat.Blocked", "The seat is blocked.")
    """Blocked seats accept no new reservations."""

    @staticmethod
    def not_found(seat_id: UUID) -> Error:
        return Error.not_found(
            "Seat.NotFound", f"The seat with the identifier {seat_id} was not found."
        )

    @staticmethod
    def name_not_exist(name: str) -> Error:
        return Error.not_found(
            "Seat.NameNotExist", f"The seat with the name {name} does not exist."
        )

    @staticmethod
    def not_available(seat_id: UUID, day: date) -> Error:
        """Seat already holds a reservation on ``day``."""
        return Error.conflict(
            "Seat.NotAvailable",
            f"The seat with the identifier {seat_id} is not available "
            f"for the date {day.isoformat()}.",
        )
