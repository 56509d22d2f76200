"""SeatName composite value object (row + number).

The canonical text form is the row letters immediately followed by the
number digits, e.g. ``"A23"``. Parsing and formatting use the same shape,
so ``SeatName.create_from_string(str(name))`` always yields ``name``.
"""

import re
from dataclasses import InitVar, dataclass

from src.core.result import Failure, Result, Success, combine
from src.core.validation import validate_not_empty
from src.domain.errors import SeatNameError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory
from src.domain.value_objects.seat_parts import SeatNumber, SeatRow

SEAT_NAME_PATTERN = re.compile(r"(?P<row>[A-Za-z]+)(?P<number>[0-9]+)")


@dataclass(frozen=True, slots=True)
class SeatName(ValueObject):
    """Seat name made of a row and a number.

    Example:
        >>> name = SeatName.create("23", "A").value
        >>> str(name)
        'A23'
        >>> SeatName.convert_from_string("A23").value == name
        True
    """

    number: SeatNumber
    row: SeatRow
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @property
    def value(self) -> str:
        return f"{self.row.value}{self.number.value}"

    @classmethod
    def create(cls, number: str | None, row: str | None) -> Result["SeatName"]:
        """Validate number and row; errors of both are reported together."""
        number_result = SeatNumber.create(number)
        row_result = SeatRow.create(row)
        failure = combine(number_result, row_result)
        if failure is not None:
            return failure
        return Success(value=cls(number_result.value, row_result.value, FACTORY_KEY))

    @classmethod
    def of(cls, number: SeatNumber, row: SeatRow) -> "SeatName":
        """Compose already-validated parts."""
        return cls(number, row, FACTORY_KEY)

    @classmethod
    def convert_from_string(cls, text: str | None) -> Result["SeatName"]:
        """Parse the canonical form (``"A23"``).

        Returns:
            Failure(SeatName.IsNullOrEmpty) for blank text,
            Failure(SeatName.InvalidFormat) for anything that is not row
            letters followed by number digits, otherwise Success(SeatName).
        """
        present = validate_not_empty(text, SeatNameError.IS_NULL_OR_EMPTY)
        if present.is_failure:
            return present

        parsed = SEAT_NAME_PATTERN.fullmatch(text or "")
        if parsed is None:
            return Failure(errors=SeatNameError.INVALID_FORMAT)
        return cls.create(parsed.group("number"), parsed.group("row"))

    @classmethod
    def create_from_string(cls, text: str | None) -> Result["SeatName"]:
        """Alias of ``convert_from_string``; both share one parser."""
        return cls.convert_from_string(text)
