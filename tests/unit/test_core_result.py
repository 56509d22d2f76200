"""Unit tests for Result types (Success, Failure) and helpers.

Tests cover:
- Success/Failure state and accessors
- Failure normalisation (single error, de-duplication, emptiness)
- Misuse raising InvalidResultError
- match / on_success / on_failure
- ok, from_optional, combine
- Structural pattern matching
"""

import pytest

from src.core.errors import CommonErrors, Error
from src.core.result import (
    Failure,
    InvalidResultError,
    Success,
    combine,
    from_optional,
    ok,
)

TOO_SHORT = Error.validation("Name.TooShort", "Too short.")
BAD_FORMAT = Error.validation("Name.InvalidFormat", "Bad format.")


@pytest.mark.unit
class TestSuccess:
    """Test Success result."""

    def test_success_holds_value(self):
        """Test Success exposes its value."""
        result = Success(value=42)

        assert result.is_success is True
        assert result.is_failure is False
        assert result.value == 42

    def test_success_has_no_errors(self):
        """Test Success carries no errors and the NONE sentinel."""
        result = Success(value="x")

        assert result.errors == ()
        assert result.first_error == CommonErrors.NONE

    def test_valueless_success(self):
        """Test Success without a value."""
        assert Success().value is None

    def test_ok_returns_shared_instance(self):
        """Test ok() returns the same value-less success every time."""
        assert ok() is ok()
        assert ok().is_success

    def test_match_calls_success_branch(self):
        """Test match() dispatches to on_success."""
        outcome = Success(value=2).match(
            on_success=lambda v: v * 10,
            on_failure=lambda errors: -1,
        )

        assert outcome == 20

    def test_on_success_runs_action(self):
        """Test on_success() runs the action and chains."""
        seen = []

        result = Success(value="a").on_success(seen.append).on_failure(seen.append)

        assert seen == ["a"]
        assert result.value == "a"


@pytest.mark.unit
class TestFailure:
    """Test Failure result."""

    def test_failure_accepts_single_error(self):
        """Test a single Error is wrapped into a tuple."""
        result = Failure(errors=TOO_SHORT)

        assert result.errors == (TOO_SHORT,)
        assert result.is_failure is True
        assert result.is_success is False

    def test_failure_preserves_order_and_removes_duplicates(self):
        """Test errors are de-duplicated in first-occurrence order."""
        result = Failure(errors=[TOO_SHORT, BAD_FORMAT, TOO_SHORT])

        assert result.errors == (TOO_SHORT, BAD_FORMAT)
        assert result.first_error == TOO_SHORT

    def test_failure_deduplicates_across_categories(self):
        """Test equal code+message with different category count once."""
        result = Failure(
            errors=[TOO_SHORT, Error.conflict(TOO_SHORT.code, TOO_SHORT.message)]
        )

        assert len(result.errors) == 1

    def test_empty_failure_raises(self):
        """Test a failure needs at least one error."""
        with pytest.raises(InvalidResultError):
            Failure(errors=[])

    def test_none_error_in_failure_raises(self):
        """Test the NONE sentinel cannot describe a failure."""
        with pytest.raises(InvalidResultError):
            Failure(errors=[TOO_SHORT, CommonErrors.NONE])

    def test_reading_value_raises(self):
        """Test value access on a failure is a programming error."""
        with pytest.raises(InvalidResultError):
            _ = Failure(errors=TOO_SHORT).value

    def test_from_exception(self):
        """Test exception conversion."""
        result = Failure.from_exception(ValueError("broken"))

        assert result.first_error.code == "ValueError"

    def test_match_calls_failure_branch_with_all_errors(self):
        """Test match() passes the error tuple."""
        outcome = Failure(errors=[TOO_SHORT, BAD_FORMAT]).match(
            on_success=lambda v: [],
            on_failure=lambda errors: [e.code for e in errors],
        )

        assert outcome == ["Name.TooShort", "Name.InvalidFormat"]

    def test_on_failure_runs_action(self):
        """Test on_failure() runs and on_success() is skipped."""
        seen = []

        Failure(errors=TOO_SHORT).on_success(seen.append).on_failure(seen.append)

        assert seen == [(TOO_SHORT,)]


@pytest.mark.unit
class TestResultHelpers:
    """Test module-level helpers."""

    def test_from_optional_wraps_value(self):
        """Test a present value becomes Success."""
        assert from_optional(5).value == 5

    def test_from_optional_none_is_null_value_failure(self):
        """Test None becomes Failure(NULL_VALUE)."""
        assert from_optional(None).errors == (CommonErrors.NULL_VALUE,)

    def test_combine_all_success_returns_none(self):
        """Test combine() of successes is None."""
        assert combine(Success(value=1), ok()) is None

    def test_combine_collects_errors_in_call_order(self):
        """Test combine() is fail-slow and de-duplicates."""
        failure = combine(
            Failure(errors=TOO_SHORT),
            Success(value=1),
            Failure(errors=[BAD_FORMAT, TOO_SHORT]),
        )

        assert failure is not None
        assert failure.errors == (TOO_SHORT, BAD_FORMAT)

    def test_combine_without_arguments(self):
        """Test combine() with nothing to check."""
        assert combine() is None


@pytest.mark.unit
class TestResultPatternMatching:
    """Test structural pattern matching support."""

    def test_match_statement_on_success(self):
        """Test Success(value) pattern."""
        match Success(value="seat"):
            case Success(value):
                matched = value
            case Failure(errors):
                matched = errors

        assert matched == "seat"

    def test_match_statement_on_failure(self):
        """Test Failure(errors) pattern."""
        match Failure(errors=BAD_FORMAT):
            case Success(value):
                matched = value
            case Failure(errors):
                matched = errors

        assert matched == (BAD_FORMAT,)
