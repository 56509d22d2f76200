"""Response DTOs returned by command and query handlers."""

from src.application.dtos.reservation_dtos import ReservationResponse
from src.application.dtos.seat_dtos import SeatResponse
from src.application.dtos.user_dtos import UserResponse

__all__ = [
    "ReservationResponse",
    "SeatResponse",
    "UserResponse",
]
