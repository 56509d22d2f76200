"""Unit tests for single value objects.

Tests cover:
- FirstName / LastName: length and letters-only rules
- Email: length and format
- Password: length, strength, masked string forms
- Description: optional text, maximum length
- Date: day granularity, invalid values
- SeatNumber / SeatRow: digits / letters only
- Factory-only construction

Architecture:
- Unit tests for domain value objects
- No dependencies or mocking needed
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from src.domain.value_objects import (
    Date,
    Description,
    Email,
    FirstName,
    LastName,
    Password,
    SeatNumber,
    SeatRow,
    unwrap,
)


def codes(result) -> list[str]:
    return [error.code for error in result.errors]


@pytest.mark.unit
class TestPersonNames:
    """Test FirstName and LastName."""

    @pytest.mark.parametrize("value", ["Ana", "María José", "Ñandú", "Lo"])
    def test_valid_first_names(self, value):
        """Test valid names keep their text."""
        assert FirstName.create(value).value.value == value

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_yields_single_error(self, value):
        """Test blank input reports only IsNullOrEmpty."""
        assert codes(FirstName.create(value)) == ["FirstName.IsNullOrEmpty"]

    def test_too_short(self):
        assert codes(FirstName.create("A")) == ["FirstName.TooShort"]

    def test_too_long(self):
        assert codes(LastName.create("a" * 51)) == ["LastName.TooLong"]

    def test_length_boundaries(self):
        """Test 2 and 50 characters are accepted."""
        assert LastName.create("ab").is_success
        assert LastName.create("a" * 50).is_success

    @pytest.mark.parametrize("value", ["J1", "Ana  Maria", "Ana-Maria", " Ana"])
    def test_invalid_format(self, value):
        """Test digits, double spaces, hyphens and edge spaces are rejected."""
        assert codes(FirstName.create(value)) == ["FirstName.InvalidFormat"]

    def test_all_failing_rules_reported(self):
        """Test a short non-letter name reports both rules."""
        assert codes(LastName.create("1")) == ["LastName.TooShort", "LastName.InvalidFormat"]

    def test_str_and_unwrap(self):
        name = FirstName.create("Ana").value

        assert str(name) == "Ana"
        assert unwrap(name) == "Ana"

    def test_equality_by_value(self):
        assert FirstName.create("Ana").value == FirstName.create("Ana").value

    def test_direct_construction_raises(self):
        """Test the factory cannot be bypassed."""
        with pytest.raises(TypeError):
            FirstName("Ana")

    def test_immutable(self):
        name = FirstName.create("Ana").value

        with pytest.raises(FrozenInstanceError):
            name.value = "Eva"  # type: ignore[misc]


@pytest.mark.unit
class TestEmail:
    """Test Email value object."""

    def test_valid_email(self):
        assert str(Email.create("user@example.com").value) == "user@example.com"

    def test_value_kept_as_given(self):
        """Test no case folding happens in the value object."""
        assert Email.create("User@Example.com").value.value == "User@Example.com"

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty(self, value):
        assert codes(Email.create(value)) == ["Email.IsNullOrEmpty"]

    def test_short_and_invalid_reported_together(self):
        assert codes(Email.create("a@b")) == ["Email.TooShort", "Email.InvalidFormat"]

    @pytest.mark.parametrize(
        "value", ["userexample.com", "user@example", "user@@example.com", "us er@example.com"]
    )
    def test_invalid_format(self, value):
        assert codes(Email.create(value)) == ["Email.InvalidFormat"]

    def test_too_long(self):
        value = "a" * 95 + "@x.com"

        assert "Email.TooLong" in codes(Email.create(value))

    def test_direct_construction_raises(self):
        with pytest.raises(TypeError):
            Email("user@example.com")


@pytest.mark.unit
class TestPassword:
    """Test Password value object."""

    def test_valid_password_kept_unchanged(self):
        assert Password.create("SecurePass1!").value.value == "SecurePass1!"

    def test_str_and_repr_are_masked(self):
        """Test the secret never appears in string forms."""
        password = Password.create("SecurePass1!").value

        assert str(password) == "********"
        assert "SecurePass1!" not in repr(password)

    @pytest.mark.parametrize(
        "value",
        [
            "securepass1!",  # no uppercase
            "SECUREPASS1!",  # no lowercase
            "SecurePass!!",  # no digit
            "SecurePass11",  # no symbol
        ],
    )
    def test_weak_passwords(self, value):
        assert codes(Password.create(value)) == ["Password.InvalidFormat"]

    def test_too_short_and_weak(self):
        assert codes(Password.create("Ab1!")) == ["Password.TooShort"]

    def test_too_long(self):
        assert "Password.TooLong" in codes(Password.create("Aa1!" * 26))

    def test_empty(self):
        assert codes(Password.create("")) == ["Password.IsNullOrEmpty"]


@pytest.mark.unit
class TestDescription:
    """Test Description value object."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_description_is_empty(self, value):
        assert Description.create(value).value.value == ""

    def test_max_length(self):
        assert Description.create("x" * 255).is_success
        assert codes(Description.create("x" * 256)) == ["Description.TooLong"]


@pytest.mark.unit
class TestDate:
    """Test Date value object."""

    def test_date_keeps_day(self):
        assert Date.create(date(2025, 3, 1)).value.value == date(2025, 3, 1)

    def test_datetime_reduced_to_day(self):
        """Test two times on the same day are the same Date."""
        morning = Date.create(datetime(2025, 3, 1, 8, 0)).value
        evening = Date.create(datetime(2025, 3, 1, 20, 0)).value

        assert morning == evening
        assert hash(morning) == hash(evening)

    @pytest.mark.parametrize("value", [None, date.min, datetime.min])
    def test_invalid(self, value):
        assert codes(Date.create(value)) == ["Date.Invalid"]

    @pytest.mark.parametrize("value", ["2025-03-01", 20250301, "tomorrow"])
    def test_non_date_values_rejected(self, value):
        """Test only real dates are wrapped, never their text or number forms."""
        assert codes(Date.create(value)) == ["Date.Invalid"]

    def test_ordering(self):
        assert Date.create(date(2025, 3, 1)).value < Date.create(date(2025, 3, 2)).value

    def test_str_is_iso(self):
        assert str(Date.create(date(2025, 3, 1)).value) == "2025-03-01"


@pytest.mark.unit
class TestSeatParts:
    """Test SeatNumber and SeatRow."""

    def test_number_digits_only(self):
        assert SeatNumber.create("23").value.value == "23"
        assert codes(SeatNumber.create("2a")) == ["SeatNumber.InvalidFormat"]
        assert codes(SeatNumber.create(" ")) == ["SeatNumber.IsNullOrEmpty"]

    def test_number_ascii_digits_only(self):
        """Test digits from other scripts are not seat numbers."""
        assert codes(SeatNumber.create("\u0661\u0662")) == ["SeatNumber.InvalidFormat"]

    def test_row_letters_only(self):
        assert SeatRow.create("AB").value.value == "AB"
        assert codes(SeatRow.create("A1")) == ["SeatRow.InvalidFormat"]
        assert codes(SeatRow.create(None)) == ["SeatRow.IsNullOrEmpty"]
