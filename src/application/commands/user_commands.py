"""User commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic beyond input filtering)
- Handlers execute business logic and return Result types
- Annotated types declare the request-level validation rules
"""

from dataclasses import dataclass, replace
from typing import Self

from src.application.filters import capitalize_words, normalize_email
from src.domain.types import EmailAddress, EntityId, PersonName, StrongPassword


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Register a new user.

    Attributes:
        first_name: First name (capitalised by the input filter).
        last_name: Last name (capitalised by the input filter).
        email: Email address (lower-cased by the input filter, must be unique).
        password: Password (never altered).

    Example:
        >>> command = CreateUser(
        ...     first_name="ana",
        ...     last_name="lopez",
        ...     email="Ana@Example.com",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    first_name: PersonName
    last_name: PersonName
    email: EmailAddress
    password: StrongPassword

    def filtered(self) -> Self:
        return replace(
            self,
            first_name=capitalize_words(self.first_name),
            last_name=capitalize_words(self.last_name),
            email=normalize_email(self.email),
        )


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Change some or all of a user's attributes.

    Fields left as None keep their current value.
    """

    user_id: EntityId
    first_name: PersonName | None = None
    last_name: PersonName | None = None
    email: EmailAddress | None = None
    password: StrongPassword | None = None

    def filtered(self) -> Self:
        return replace(
            self,
            first_name=capitalize_words(self.first_name),
            last_name=capitalize_words(self.last_name),
            email=normalize_email(self.email),
        )


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a user together with their reservations."""

    user_id: EntityId
