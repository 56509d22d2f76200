"""User queries (CQRS read operations).

Queries represent requests for information. They are immutable dataclasses
with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass, replace
from typing import Self

from src.application.filters import normalize_email
from src.domain.types import EmailAddress, EntityId


@dataclass(frozen=True, kw_only=True)
class GetUserById:
    """Get a single user by ID."""

    user_id: EntityId


@dataclass(frozen=True, kw_only=True)
class GetUserByEmail:
    """Get a single user by email address (case-insensitive).

    Example:
        >>> query = GetUserByEmail(email=" Ana@Example.com ")
        >>> result = await handler.handle(query)
    """

    email: EmailAddress

    def filtered(self) -> Self:
        return replace(self, email=normalize_email(self.email))


@dataclass(frozen=True, kw_only=True)
class GetAllUsers:
    """List every user, ordered by email."""
