"""Email address errors."""

from src.core.errors import Error


class EmailError:
    """Email error constants.

    Format and length rules only. Uniqueness is a persistence concern and is
    reported as ``UserError.EMAIL_ALREADY_IN_USE``.
    """

    IS_NULL_OR_EMPTY = Error.validation(
        "Email.IsNullOrEmpty", "The email cannot be empty."
    )

    INVALID_FORMAT = Error.validation(
        "Email.InvalidFormat", "The email does not meet the formatting guidelines."
    )

    @staticmethod
    def too_long(length: int) -> Error:
        return Error.validation(
            "Email.TooLong", f"The email cannot exceed {length} characters."
        )

    @staticmethod
    def too_short(length: int) -> Error:
        return Error.validation(
            "Email.TooShort", f"The email must be at least {length} characters."
        )
