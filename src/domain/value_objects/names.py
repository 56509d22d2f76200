"""Person name value objects (FirstName, LastName).

Both share one rule set: 2 to 50 characters, letters only (accented Latin
letters included), words separated by a single space.
"""

import re
from dataclasses import InitVar, dataclass

from src.core.errors import Error
from src.core.result import Failure, Result, Success, combine
from src.core.validation import (
    validate_max_length,
    validate_min_length,
    validate_pattern,
)
from src.domain.errors import FirstNameError, LastNameError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory

MIN_LENGTH = 2
MAX_LENGTH = 50

_LETTERS = "a-zA-ZáéíóúÁÉÍÓÚñÑçÇüÜàÀèÈìÌòÒùÙâêÊîôûäëïöß"
NAME_PATTERN = re.compile(rf"[{_LETTERS}]+(?: [{_LETTERS}]+)*")


def _check_name(
    value: str | None,
    *,
    empty: Error,
    too_short: Error,
    too_long: Error,
    invalid_format: Error,
) -> Failure | None:
    if value is None or not value.strip():
        return Failure(errors=empty)
    return combine(
        validate_min_length(value, MIN_LENGTH, too_short),
        validate_max_length(value, MAX_LENGTH, too_long),
        validate_pattern(value, NAME_PATTERN, invalid_format),
    )


@dataclass(frozen=True, slots=True)
class FirstName(ValueObject):
    """A person's first name.

    Example:
        >>> FirstName.create("Ana María").value.value
        'Ana María'
        >>> [e.code for e in FirstName.create("J1").errors]
        ['FirstName.InvalidFormat']
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["FirstName"]:
        """Validate and wrap a first name (no trimming, no case folding)."""
        failure = _check_name(
            value,
            empty=FirstNameError.IS_NULL_OR_EMPTY,
            too_short=FirstNameError.too_short(MIN_LENGTH),
            too_long=FirstNameError.too_long(MAX_LENGTH),
            invalid_format=FirstNameError.INVALID_FORMAT,
        )
        if failure is not None:
            return failure
        return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class LastName(ValueObject):
    """A person's last name. Same rules as FirstName."""

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["LastName"]:
        failure = _check_name(
            value,
            empty=LastNameError.IS_NULL_OR_EMPTY,
            too_short=LastNameError.too_short(MIN_LENGTH),
            too_long=LastNameError.too_long(MAX_LENGTH),
            invalid_format=LastNameError.INVALID_FORMAT,
        )
        if failure is not None:
            return failure
        return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]
