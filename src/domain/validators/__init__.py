"""Validation functions backing the Annotated request types."""

from src.domain.validators.functions import (
    NIL_UUID,
    validate_email,
    validate_not_nil_uuid,
    validate_person_name,
    validate_seat_name,
    validate_strong_password,
)

__all__ = [
    "NIL_UUID",
    "validate_email",
    "validate_not_nil_uuid",
    "validate_person_name",
    "validate_seat_name",
    "validate_strong_password",
]
