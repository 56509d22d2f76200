"""Domain errors package.

Exports all domain-level error catalogs for convenient importing.

Usage:
    from src.domain.errors import EmailError, SeatError, UserError
"""

from src.domain.errors.date_error import DateError
from src.domain.errors.description_error import DescriptionError
from src.domain.errors.email_error import EmailError
from src.domain.errors.name_error import FirstNameError, LastNameError
from src.domain.errors.password_error import PasswordError
from src.domain.errors.reservation_error import ReservationError
from src.domain.errors.seat_error import SeatError
from src.domain.errors.seat_name_error import (
    SeatNameError,
    SeatNumberError,
    SeatRowError,
)
from src.domain.errors.user_error import UserError

__all__ = [
    "DateError",
    "DescriptionError",
    "EmailError",
    "FirstNameError",
    "LastNameError",
    "PasswordError",
    "ReservationError",
    "SeatError",
    "SeatNameError",
    "SeatNumberError",
    "SeatRowError",
    "UserError",
]
