"""Repository implementations (adapters for hexagonal architecture).

This package contains SQLAlchemy implementations of the repository
protocols defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.reservation_repository import (
    ReservationRepository,
)
from src.infrastructure.persistence.repositories.seat_repository import SeatRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "ReservationRepository",
    "SeatRepository",
    "UserRepository",
]
