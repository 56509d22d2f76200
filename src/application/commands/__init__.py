"""Commands (CQRS write operations)."""

from src.application.commands.reservation_commands import (
    CreateReservation,
    DeleteReservation,
    UpdateReservation,
)
from src.application.commands.seat_commands import CreateSeat, DeleteSeat, UpdateSeat
from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser

__all__ = [
    "CreateReservation",
    "CreateSeat",
    "CreateUser",
    "DeleteReservation",
    "DeleteSeat",
    "DeleteUser",
    "UpdateReservation",
    "UpdateSeat",
    "UpdateUser",
]
