"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Write operations return a Result: storage-level uniqueness violations
    come back as ``Failure(UserError.EMAIL_ALREADY_IN_USE)`` (category
    CONFLICT) and never escape as exceptions.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email
        is_email_unique: Uniqueness predicate used before writes
        list_all: Retrieve every user
        save: Create new user
        update: Persist changes to an existing user
        delete: Remove user
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def is_email_unique(
        self, email: str, exclude_user_id: UUID | None = None
    ) -> bool:
        """Check that no other user owns ``email`` (case-insensitive).

        Args:
            email: Email address to check.
            exclude_user_id: User allowed to own the email (the one being
                updated).
        """
        ...

    async def list_all(self) -> list[User]:
        ...

    async def save(self, user: User) -> Result[None]:
        """Create new user.

        Returns:
            Success, or Failure(User.EmailAlreadyInUse) when the email is taken.
        """
        ...

    async def update(self, user: User) -> Result[None]:
        """Persist changes to an existing user.

        Returns:
            Success, Failure(User.NotFound) or Failure(User.EmailAlreadyInUse).
        """
        ...

    async def delete(self, user_id: UUID) -> Result[None]:
        """Delete user.

        Returns:
            Success, or Failure(User.NotFound).
        """
        ...
