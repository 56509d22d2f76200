"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer.
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.reservation_repository import ReservationRepository
from src.domain.protocols.seat_repository import SeatRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "LoggerProtocol",
    "ReservationRepository",
    "SeatRepository",
    "UserRepository",
]
