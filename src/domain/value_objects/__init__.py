"""Domain value objects.

Single value objects wrap one primitive; composite value objects combine
validated single ones. All are immutable and built only through ``create``
(or ``of`` for composites assembled from already-validated parts).
"""

from src.domain.value_objects.base import unwrap
from src.domain.value_objects.credentials import Credentials
from src.domain.value_objects.date import Date
from src.domain.value_objects.description import Description
from src.domain.value_objects.email import Email
from src.domain.value_objects.full_name import FullName
from src.domain.value_objects.names import FirstName, LastName
from src.domain.value_objects.password import Password
from src.domain.value_objects.seat_name import SeatName
from src.domain.value_objects.seat_parts import SeatNumber, SeatRow

__all__ = [
    "Credentials",
    "Date",
    "Description",
    "Email",
    "FirstName",
    "FullName",
    "LastName",
    "Password",
    "SeatName",
    "SeatNumber",
    "SeatRow",
    "unwrap",
]
