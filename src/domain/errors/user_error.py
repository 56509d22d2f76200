"""User domain errors.

Usage:
    from src.domain.errors import UserError
    from src.core.result import Failure

    if user is None:
        return Failure(errors=UserError.not_found(user_id))
"""

from uuid import UUID

from src.core.errors import Error


class UserError:
    """User error constants.

    Error Categories:
        - Validation: IS_NULL
        - Conflict: EMAIL_ALREADY_IN_USE
        - Lookup: not_found(), email_not_exist()
    """

    IS_NULL = Error.validation("User.IsNull", "The user cannot be null.")

    EMAIL_ALREADY_IN_USE = Error.conflict(
        "User.EmailAlreadyInUse", "The specified email is already in use."
    )
    """Raised by the uniqueness check and by the storage unique index."""

    @staticmethod
    def not_found(user_id: UUID) -> Error:
        return Error.not_found(
            "User.NotFound", f"The user with the identifier {user_id} was not found."
        )

    @staticmethod
    def email_not_exist(email: str) -> Error:
        return Error.not_found(
            "User.EmailNotExist", f"The email {email} does not exist."
        )
