"""Password errors.

Messages never echo the password value.
"""

from src.core.errors import Error


class PasswordError:
    """Password error constants.

    Error Categories:
        - Presence: IS_NULL_OR_EMPTY
        - Length: too_short(), too_long()
        - Strength: INVALID_FORMAT (lower, upper, digit and symbol required)
    """

    IS_NULL_OR_EMPTY = Error.validation(
        "Password.IsNullOrEmpty", "The password cannot be empty."
    )

    INVALID_FORMAT = Error.validation(
        "Password.InvalidFormat",
        "The password does not meet the formatting guidelines.",
    )
    """Missing a lowercase letter, uppercase letter, digit or symbol."""

    @staticmethod
    def too_long(length: int) -> Error:
        return Error.validation(
            "Password.TooLong", f"The password cannot exceed {length} characters."
        )

    @staticmethod
    def too_short(length: int) -> Error:
        return Error.validation(
            "Password.TooShort",
            f"The password must be at least {length} characters.",
        )
