"""Email value object with validation.

Immutable value object that validates email length and format. The value is
kept exactly as given; lower-casing happens in the request input filter.
"""

import re
from dataclasses import InitVar, dataclass

from src.core.result import Failure, Result, Success, combine
from src.core.validation import (
    validate_max_length,
    validate_min_length,
    validate_pattern,
)
from src.domain.errors import EmailError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory

MIN_LENGTH = 5
MAX_LENGTH = 100
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


@dataclass(frozen=True, slots=True)
class Email(ValueObject):
    """Email value object with format validation.

    Attributes:
        value: The email address string.

    Example:
        >>> result = Email.create("user@example.com")
        >>> str(result.value)
        'user@example.com'
        >>> [e.code for e in Email.create("a@b").errors]
        ['Email.TooShort', 'Email.InvalidFormat']
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["Email"]:
        """Validate and wrap an email address.

        Returns:
            Success(Email), or Failure with a single IsNullOrEmpty error for
            blank input, or every failing length/format error otherwise.
        """
        if value is None or not value.strip():
            return Failure(errors=EmailError.IS_NULL_OR_EMPTY)

        failure = combine(
            validate_min_length(value, MIN_LENGTH, EmailError.too_short(MIN_LENGTH)),
            validate_max_length(value, MAX_LENGTH, EmailError.too_long(MAX_LENGTH)),
            validate_pattern(value, EMAIL_PATTERN, EmailError.INVALID_FORMAT),
        )
        if failure is not None:
            return failure
        return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]
