"""User DTOs (Data Transfer Objects).

Response dataclasses carried inside Success from user handlers to the
presentation layer. Passwords never appear in a DTO.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserResponse:
    """Public view of a user.

    Attributes:
        id: User's unique identifier.
        first_name: First name.
        last_name: Last name.
        full_name: "First Last".
        email: Email address.
    """

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.name.first_name.value,
            last_name=user.name.last_name.value,
            full_name=user.name.value,
            email=user.email.value,
        )
