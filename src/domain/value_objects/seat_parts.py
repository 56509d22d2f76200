"""Seat number and seat row value objects.

A seat is named by its row (letters) and its number (digits). Both parts
keep the caller's text exactly; upper-casing happens in the input filter.
"""

import re
from dataclasses import InitVar, dataclass

from src.core.result import Failure, Result, Success
from src.core.validation import validate_pattern
from src.domain.errors import SeatNumberError, SeatRowError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory

NUMBER_PATTERN = re.compile(r"[0-9]+")
ROW_PATTERN = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True, slots=True)
class SeatNumber(ValueObject):
    """Digits-only seat number, e.g. ``"23"``."""

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["SeatNumber"]:
        if value is None or not value.strip():
            return Failure(errors=SeatNumberError.IS_NULL_OR_EMPTY)
        match validate_pattern(value, NUMBER_PATTERN, SeatNumberError.INVALID_FORMAT):
            case Success():
                return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]
            case failure:
                return failure


@dataclass(frozen=True, slots=True)
class SeatRow(ValueObject):
    """Letters-only seat row, e.g. ``"A"``."""

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["SeatRow"]:
        if value is None or not value.strip():
            return Failure(errors=SeatRowError.IS_NULL_OR_EMPTY)
        match validate_pattern(value, ROW_PATTERN, SeatRowError.INVALID_FORMAT):
            case Success():
                return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]
            case failure:
                return failure
