"""Password value object.

Holds a plaintext password that satisfied the strength rules. The string
and repr forms are masked so the secret never reaches logs or tracebacks.
Hashing is an infrastructure concern and out of scope here.
"""

import re
from dataclasses import InitVar, dataclass

from src.core.result import Failure, Result, Success, combine
from src.core.validation import (
    validate_max_length,
    validate_min_length,
    validate_pattern,
)
from src.domain.errors import PasswordError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory

MIN_LENGTH = 8
MAX_LENGTH = 100
# lowercase, uppercase, digit and one non-alphanumeric character
STRENGTH_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^A-Za-z0-9]).*", re.DOTALL)

MASK = "********"


@dataclass(frozen=True, slots=True, repr=False)
class Password(ValueObject):
    """Password that meets length and strength requirements.

    Example:
        >>> password = Password.create("SecurePass1!").value
        >>> str(password)
        '********'
        >>> password.value
        'SecurePass1!'
    """

    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"Password('{MASK}')"

    @classmethod
    def create(cls, value: str | None) -> Result["Password"]:
        """Validate and wrap a password. The value is never altered."""
        if value is None or not value.strip():
            return Failure(errors=PasswordError.IS_NULL_OR_EMPTY)

        failure = combine(
            validate_min_length(
                value, MIN_LENGTH, PasswordError.too_short(MIN_LENGTH)
            ),
            validate_max_length(value, MAX_LENGTH, PasswordError.too_long(MAX_LENGTH)),
            validate_pattern(value, STRENGTH_PATTERN, PasswordError.INVALID_FORMAT),
        )
        if failure is not None:
            return failure
        return Success(value=cls(value, FACTORY_KEY))  # type: ignore[arg-type]
