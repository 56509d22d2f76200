"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit,
testable and aggregable: a failure carries every error that applies, not
just the first one encountered.

Usage:
    def parse_day(raw: str) -> Result[date]:
        try:
            return Success(value=date.fromisoformat(raw))
        except ValueError:
            return Failure(errors=DateError.INVALID)

    result = parse_day("2025-03-01")
    match result:
        case Success(value):
            print(f"Day: {value}")
        case Failure(errors):
            print(f"Errors: {errors}")

    # Or, without pattern matching:
    message = result.match(
        on_success=lambda day: day.isoformat(),
        on_failure=lambda errors: errors[0].message,
    )

Misuse (reading ``value`` from a ``Failure``, or building a ``Failure``
without a reason) raises ``InvalidResultError``. That is a programming error
and is never translated into a user-facing message.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeAlias, TypeVar

from src.core.errors import CommonErrors, Error

T = TypeVar("T")  # Success type
R = TypeVar("R")  # Match return type


class InvalidResultError(RuntimeError):
    """Raised when a Result is used in a way that is never valid.

    Examples:
        - Reading ``value`` from a ``Failure``
        - Building a ``Failure`` with no errors, or with ``CommonErrors.NONE``
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (None for operations that only
            report success).
    """

    __match_args__ = ("value",)

    value: T = None  # type: ignore[assignment]

    @property
    def is_success(self) -> bool:
        """Always True."""
        return True

    @property
    def is_failure(self) -> bool:
        """Always False."""
        return False

    @property
    def errors(self) -> tuple[Error, ...]:
        """Successes carry no errors."""
        return ()

    @property
    def first_error(self) -> Error:
        """The "no error" sentinel."""
        return CommonErrors.NONE

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[tuple[Error, ...]], R],
    ) -> R:
        """Branch on the outcome; calls ``on_success(value)``."""
        return on_success(self.value)

    def on_success(self, action: Callable[[T], Any]) -> "Success[T]":
        """Run ``action(value)`` and return self for chaining."""
        action(self.value)
        return self

    def on_failure(self, action: Callable[[tuple[Error, ...]], Any]) -> "Success[T]":
        """No-op for successes."""
        return self


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure:
    """Represents a failed operation result.

    Accepts a single ``Error`` or any iterable of errors. Errors are stored
    as a tuple in first-occurrence order with duplicates removed.

    Attributes:
        errors: Non-empty tuple of errors describing why the operation failed.

    Raises:
        InvalidResultError: If no error is given, or if ``CommonErrors.NONE``
            is among them.

    Example:
        >>> failure = Failure(errors=[too_short, bad_format, too_short])
        >>> failure.errors
        (too_short, bad_format)
    """

    __match_args__ = ("errors",)

    errors: tuple[Error, ...] = field(default=())

    def __post_init__(self) -> None:
        """Normalize errors to a de-duplicated tuple and enforce non-emptiness."""
        raw: Error | Iterable[Error] = self.errors
        items = [raw] if isinstance(raw, Error) else list(raw)
        # dict preserves insertion order; Error hashes by (code, message)
        unique = tuple(dict.fromkeys(items))

        if not unique:
            raise InvalidResultError("A failure result requires at least one error")
        if CommonErrors.NONE in unique:
            raise InvalidResultError("The 'none' error cannot describe a failure")

        object.__setattr__(self, "errors", unique)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        """Build a failure from an unexpected exception (category EXCEPTION)."""
        return cls(errors=Error.from_exception(exc))

    @property
    def value(self) -> Any:
        """Never available on a failure.

        Raises:
            InvalidResultError: Always.
        """
        raise InvalidResultError("The value of a failure result cannot be accessed")

    @property
    def is_success(self) -> bool:
        """Always False."""
        return False

    @property
    def is_failure(self) -> bool:
        """Always True."""
        return True

    @property
    def first_error(self) -> Error:
        """First error in insertion order."""
        return self.errors[0]

    def match(
        self,
        on_success: Callable[[Any], R],
        on_failure: Callable[[tuple[Error, ...]], R],
    ) -> R:
        """Branch on the outcome; calls ``on_failure(errors)``."""
        return on_failure(self.errors)

    def on_success(self, action: Callable[[Any], Any]) -> "Failure":
        """No-op for failures."""
        return self

    def on_failure(self, action: Callable[[tuple[Error, ...]], Any]) -> "Failure":
        """Run ``action(errors)`` and return self for chaining."""
        action(self.errors)
        return self


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure


_OK: Success[None] = Success()


def ok() -> Success[None]:
    """Shared value-less success for operations that only report completion."""
    return _OK


def from_optional(value: T | None) -> Result[T]:
    """Wrap a possibly-None value.

    Returns:
        Success(value) when value is not None, otherwise
        Failure(CommonErrors.NULL_VALUE).
    """
    if value is None:
        return Failure(errors=CommonErrors.NULL_VALUE)
    return Success(value=value)


def combine(*results: Success[Any] | Failure) -> Failure | None:
    """Aggregate independent validations (fail-slow).

    Args:
        *results: Results of checks that do not depend on each other.

    Returns:
        A single Failure holding the errors of every failed result, in call
        order with duplicates collapsed, or None when all succeeded.

    Example:
        >>> failure = combine(FirstName.create(""), LastName.create(""))
        >>> [e.code for e in failure.errors]
        ['FirstName.IsNullOrEmpty', 'LastName.IsNullOrEmpty']
    """
    errors = [error for result in results for error in result.errors]
    if not errors:
        return None
    return Failure(errors=errors)
