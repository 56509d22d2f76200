"""Domain entities.

Identity-compared, mutable objects built only through their ``create``
factories and changed only through methods that return a Result.
"""

from src.domain.entities.entity import Entity
from src.domain.entities.reservation import Reservation
from src.domain.entities.seat import Seat
from src.domain.entities.user import User

__all__ = [
    "Entity",
    "Reservation",
    "Seat",
    "User",
]
