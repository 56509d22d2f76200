"""Person name errors.

Error constants and parametrised factories for the FirstName and LastName
value objects. All errors carry the VALIDATION category.

Usage:
    from src.domain.errors import FirstNameError
    from src.core.result import Failure

    if not value:
        return Failure(errors=FirstNameError.IS_NULL_OR_EMPTY)
"""

from src.core.errors import Error


class FirstNameError:
    """First name error constants."""

    IS_NULL_OR_EMPTY = Error.validation(
        "FirstName.IsNullOrEmpty", "The first name cannot be empty."
    )
    """First name is required."""

    INVALID_FORMAT = Error.validation(
        "FirstName.InvalidFormat", "First name format is invalid."
    )
    """Only letters (accented included) separated by single spaces."""

    @staticmethod
    def too_long(length: int) -> Error:
        """First name exceeds ``length`` characters."""
        return Error.validation(
            "FirstName.TooLong",
            f"First name cannot be longer than {length} characters.",
        )

    @staticmethod
    def too_short(length: int) -> Error:
        """First name is shorter than ``length`` characters."""
        return Error.validation(
            "FirstName.TooShort",
            f"First name must be at least {length} characters.",
        )


class LastNameError:
    """Last name error constants."""

    IS_NULL_OR_EMPTY = Error.validation(
        "LastName.IsNullOrEmpty", "The last name cannot be empty."
    )

    INVALID_FORMAT = Error.validation(
        "LastName.InvalidFormat", "The last name format is invalid."
    )

    @staticmethod
    def too_long(length: int) -> Error:
        return Error.validation(
            "LastName.TooLong",
            f"The last name cannot exceed {length} characters.",
        )

    @staticmethod
    def too_short(length: int) -> Error:
        return Error.validation(
            "LastName.TooShort",
            f"The last name must be at least {length} characters.",
        )
