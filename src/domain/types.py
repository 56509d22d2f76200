"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.
Commands and queries declare their fields with these types; the application
validation pipeline checks a request against them before any handler runs.

Usage:
    from src.domain.types import EmailAddress, PersonName

    @dataclass(frozen=True, kw_only=True)
    class CreateUser:
        first_name: PersonName  # Validation included!
        email: EmailAddress  # Validation included!
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_not_nil_uuid,
    validate_person_name,
    validate_seat_name,
    validate_strong_password,
)

# ============================================================================
# User Types
# ============================================================================

PersonName = Annotated[
    str,
    Field(
        min_length=2,
        max_length=50,
        description="First or last name",
        examples=["Ana", "María José"],
    ),
    AfterValidator(validate_person_name),
]
"""First or last name: 2-50 letters (accented allowed), single inner spaces."""

EmailAddress = Annotated[
    str,
    Field(
        min_length=5,
        max_length=100,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address (user@domain.tld), 5-100 characters."""

StrongPassword = Annotated[
    str,
    Field(
        min_length=8,
        max_length=100,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- 8 to 100 characters
- At least one uppercase letter
- At least one lowercase letter
- At least one digit
- At least one non-alphanumeric character
"""

# ============================================================================
# Seat Types
# ============================================================================

SeatNameText = Annotated[
    str,
    Field(
        min_length=2,
        max_length=50,
        description="Seat name: row letters followed by number digits",
        examples=["A23"],
    ),
    AfterValidator(validate_seat_name),
]

DescriptionText = Annotated[
    str,
    Field(max_length=255, description="Optional seat description"),
]

# ============================================================================
# Identifier and Date Types
# ============================================================================

EntityId = Annotated[
    UUID,
    AfterValidator(validate_not_nil_uuid),
]
"""Identifier of an existing entity; the nil UUID is rejected."""

ReservationDate = Annotated[
    date,
    Field(gt=date.min, description="Reserved calendar day"),
]
"""Calendar day of a reservation. Past-day rejection depends on settings
and lives in the application validation pipeline."""
