"""Reservation date value object.

Reservations are day-granular: a ``Date`` wraps a ``datetime.date`` and a
``datetime`` input is reduced to its calendar day. Equality and hashing
therefore compare calendar days.
"""

from dataclasses import InitVar, dataclass
from datetime import date, datetime

from src.core.result import Failure, Result, Success
from src.domain.errors import DateError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory


@dataclass(frozen=True, slots=True, order=True)
class Date(ValueObject):
    """A valid calendar day.

    Example:
        >>> Date.create(datetime(2025, 3, 1, 9, 30)).value == Date.create(date(2025, 3, 1)).value
        True
        >>> Date.create(None).first_error.code
        'Date.Invalid'
    """

    value: date
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    def __str__(self) -> str:
        return self.value.isoformat()

    @classmethod
    def create(cls, value: date | datetime | None) -> Result["Date"]:
        """Validate and wrap a day.

        Returns:
            Failure(Date.Invalid) for anything that is not a date or
            datetime (None and ISO strings included) and for the minimum
            date, otherwise Success(Date) holding the calendar day.
        """
        if not isinstance(value, date):
            return Failure(errors=DateError.INVALID)
        day = value.date() if isinstance(value, datetime) else value
        if day == date.min:
            return Failure(errors=DateError.INVALID)
        return Success(value=cls(day, FACTORY_KEY))  # type: ignore[arg-type]
