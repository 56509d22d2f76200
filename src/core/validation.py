"""Validation helpers for value-object factories.

Each helper checks one rule and returns a Result carrying the caller's
catalog error on failure, so factories can run every rule and aggregate the
outcome with ``combine`` (fail-slow).

Usage:
    from src.core.result import combine
    from src.core.validation import validate_max_length, validate_min_length

    failure = combine(
        validate_min_length(value, 2, FirstNameError.TOO_SHORT),
        validate_max_length(value, 50, FirstNameError.TOO_LONG),
    )
    if failure is not None:
        return failure
"""

import re
from typing import Any

from src.core.errors import Error
from src.core.result import Failure, Result, Success


def is_blank(value: Any) -> bool:
    """Return True for None and for strings that are empty or whitespace only."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_not_empty(value: Any, error: Error) -> Result[Any]:
    """Validate that a value is not None and not a blank string.

    Args:
        value: Value to validate.
        error: Error to report when the value is empty.

    Returns:
        Success with value if not empty, Failure with ``error`` otherwise.
    """
    if is_blank(value):
        return Failure(errors=error)
    return Success(value=value)


def validate_min_length(value: str, min_length: int, error: Error) -> Result[str]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        error: Error to report when the string is shorter.

    Returns:
        Success with value if valid, Failure with ``error`` otherwise.
    """
    if len(value) < min_length:
        return Failure(errors=error)
    return Success(value=value)


def validate_max_length(value: str, max_length: int, error: Error) -> Result[str]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        error: Error to report when the string is longer.

    Returns:
        Success with value if valid, Failure with ``error`` otherwise.
    """
    if len(value) > max_length:
        return Failure(errors=error)
    return Success(value=value)


def validate_pattern(value: str, pattern: re.Pattern[str], error: Error) -> Result[str]:
    """Validate that the whole string matches a compiled pattern.

    Args:
        value: String to validate.
        pattern: Compiled regular expression; matched with ``fullmatch``.
        error: Error to report on mismatch.

    Returns:
        Success with value if it matches, Failure with ``error`` otherwise.
    """
    if pattern.fullmatch(value) is None:
        return Failure(errors=error)
    return Success(value=value)
