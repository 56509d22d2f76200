"""Database models (SQLAlchemy).

Importing this package registers every table on ``BaseModel.metadata``.
"""

from src.infrastructure.persistence.models.reservation import ReservationModel
from src.infrastructure.persistence.models.seat import SeatModel
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ReservationModel",
    "SeatModel",
    "UserModel",
]
