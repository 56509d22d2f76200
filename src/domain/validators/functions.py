"""Centralized validation functions (DRY principle).

All request-level validation logic is defined once and reused through the
Annotated types in ``src.domain.types``. Validators are pure functions that
raise ValueError on validation failure; pydantic turns that into a
validation error for the offending field.

The patterns are the same ones the value objects enforce, so a request that
passes these checks also passes the value-object factories.
"""

from uuid import UUID

from src.domain.value_objects.email import EMAIL_PATTERN
from src.domain.value_objects.names import NAME_PATTERN
from src.domain.value_objects.password import STRENGTH_PATTERN
from src.domain.value_objects.seat_name import SEAT_NAME_PATTERN

NIL_UUID = UUID(int=0)


def validate_person_name(v: str) -> str:
    """Validate a first or last name.

    Raises:
        ValueError: If the name contains anything but letters and single
            inner spaces.

    Example:
        >>> validate_person_name("Ana María")
        'Ana María'
        >>> validate_person_name("R2D2")
        ValueError: Name may only contain letters separated by single spaces
    """
    if NAME_PATTERN.fullmatch(v) is None:
        raise ValueError("Name may only contain letters separated by single spaces")
    return v


def validate_email(v: str) -> str:
    """Validate email format.

    Raises:
        ValueError: If email format is invalid.
    """
    if EMAIL_PATTERN.fullmatch(v) is None:
        raise ValueError(f"Invalid email format: {v}")
    return v


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Length is enforced by the Field constraints; this checks composition.
    The password is never echoed in the error.

    Raises:
        ValueError: If the password misses a lowercase letter, an uppercase
            letter, a digit or a symbol.
    """
    if STRENGTH_PATTERN.fullmatch(v) is None:
        raise ValueError(
            "Password must contain a lowercase letter, an uppercase letter, "
            "a digit and a symbol"
        )
    return v


def validate_seat_name(v: str) -> str:
    """Validate the canonical seat name form (row letters then digits).

    Raises:
        ValueError: If the value is not like "A23".
    """
    if SEAT_NAME_PATTERN.fullmatch(v) is None:
        raise ValueError("Seat name must be row letters followed by digits, e.g. 'A23'")
    return v


def validate_not_nil_uuid(v: UUID) -> UUID:
    """Reject the all-zero UUID.

    Raises:
        ValueError: If the identifier is the nil UUID.
    """
    if v == NIL_UUID:
        raise ValueError("Identifier cannot be the nil UUID")
    return v
