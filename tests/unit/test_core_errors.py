"""Unit tests for Error and CommonErrors.

Tests cover:
- Equality by (code, message), category ignored
- Construction rules (None rejected, blank allowed)
- Category factories
- String form and exception conversion
"""

import pytest

from src.core.enums import ErrorCategory
from src.core.errors import CommonErrors, Error


@pytest.mark.unit
class TestErrorEquality:
    """Test Error identity semantics."""

    def test_errors_with_same_code_and_message_are_equal(self):
        """Test two errors built separately compare equal."""
        assert Error.failure("Seat.X", "message") == Error.failure("Seat.X", "message")

    def test_category_is_ignored_for_equality(self):
        """Test errors differing only by category are equal."""
        assert Error.validation("A.B", "m") == Error.conflict("A.B", "m")

    def test_category_is_ignored_for_hash(self):
        """Test equal errors share a hash."""
        assert hash(Error.validation("A.B", "m")) == hash(Error.not_found("A.B", "m"))

    def test_different_message_is_not_equal(self):
        """Test message participates in identity."""
        assert Error.failure("A.B", "one") != Error.failure("A.B", "two")


@pytest.mark.unit
class TestErrorConstruction:
    """Test Error construction rules."""

    def test_none_code_raises_type_error(self):
        """Test a None code is rejected."""
        with pytest.raises(TypeError):
            Error(code=None, message="m")  # type: ignore[arg-type]

    def test_none_message_raises_type_error(self):
        """Test a None message is rejected."""
        with pytest.raises(TypeError):
            Error(code="A.B", message=None)  # type: ignore[arg-type]

    def test_default_category_is_failure(self):
        """Test the default category."""
        assert Error(code="A.B", message="m").category == ErrorCategory.FAILURE

    @pytest.mark.parametrize(
        ("factory", "category"),
        [
            (Error.failure, ErrorCategory.FAILURE),
            (Error.unexpected, ErrorCategory.UNEXPECTED),
            (Error.validation, ErrorCategory.VALIDATION),
            (Error.conflict, ErrorCategory.CONFLICT),
            (Error.not_found, ErrorCategory.NOT_FOUND),
            (Error.unauthorized, ErrorCategory.UNAUTHORIZED),
            (Error.forbidden, ErrorCategory.FORBIDDEN),
            (Error.exception, ErrorCategory.EXCEPTION),
        ],
    )
    def test_factories_set_category(self, factory, category):
        """Test each named factory sets its category."""
        assert factory("A.B", "m").category == category

    def test_create_with_explicit_category(self):
        """Test create() accepts any category."""
        error = Error.create("A.B", "m", ErrorCategory.FORBIDDEN)

        assert error.category == ErrorCategory.FORBIDDEN

    def test_str_joins_code_and_message(self):
        """Test the string form."""
        assert str(Error.failure("Seat.Blocked", "The seat is blocked.")) == (
            "Seat.Blocked: The seat is blocked."
        )

    def test_from_exception_uses_exception_category(self):
        """Test converting an exception keeps its message."""
        error = Error.from_exception(RuntimeError("boom"))

        assert error.category == ErrorCategory.EXCEPTION
        assert "boom" in error.message


@pytest.mark.unit
class TestCommonErrors:
    """Test the shared error constants."""

    def test_none_has_empty_code_and_message(self):
        """Test the 'no error' sentinel."""
        assert CommonErrors.NONE.code == ""
        assert CommonErrors.NONE.message == ""
        assert CommonErrors.NONE.category == ErrorCategory.NONE

    def test_null_value_code(self):
        """Test the null-value error code."""
        assert CommonErrors.NULL_VALUE.code == "Error.NullValue"
