"""Command handlers (write side)."""

from src.application.commands.handlers.reservation_handlers import (
    CreateReservationHandler,
    DeleteReservationHandler,
    UpdateReservationHandler,
)
from src.application.commands.handlers.seat_handlers import (
    CreateSeatHandler,
    DeleteSeatHandler,
    UpdateSeatHandler,
)
from src.application.commands.handlers.user_handlers import (
    CreateUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
)

__all__ = [
    "CreateReservationHandler",
    "CreateSeatHandler",
    "CreateUserHandler",
    "DeleteReservationHandler",
    "DeleteSeatHandler",
    "DeleteUserHandler",
    "UpdateReservationHandler",
    "UpdateSeatHandler",
    "UpdateUserHandler",
]
