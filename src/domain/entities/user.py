"""User domain entity.

Pure business logic, no framework dependencies. A user owns a full name,
login credentials and the reservations booked under their account.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from src.core.result import Result, Success, combine, ok
from src.domain.entities.entity import Entity
from src.domain.value_objects import Credentials, Email, FullName, Password
from src.domain.value_objects.base import FACTORY_KEY

if TYPE_CHECKING:
    from src.domain.entities.reservation import Reservation


@dataclass(eq=False, kw_only=True)
class User(Entity):
    """User domain entity.

    Business Rules:
        - Name and credentials are always valid value objects
        - A failed change leaves the user untouched
        - Email uniqueness is checked by the repository, not here

    Attributes:
        id: Unique user identifier
        name: First and last name
        credentials: Email and password
        reservations: Reservations loaded for this user

    Example:
        >>> result = User.create(uuid7(), "Ana", "Lopez", "ana@example.com", "SecurePass1!")
        >>> user = result.value
        >>> user.change_email("bad").is_failure
        True
        >>> str(user.credentials.email)
        'ana@example.com'
    """

    name: FullName
    credentials: Credentials
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    @classmethod
    def create(
        cls,
        id: UUID,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        password: str | None,
    ) -> Result[User]:
        """Validate every field and build a user.

        Returns:
            Success(User), or Failure carrying the errors of all invalid
            fields in argument order.
        """
        name = FullName.create(first_name, last_name)
        credentials = Credentials.create(email, password)
        failure = combine(name, credentials)
        if failure is not None:
            return failure
        return Success(
            value=cls(
                id=id,
                name=name.value,
                credentials=credentials.value,
                _key=FACTORY_KEY,
            )
        )

    @property
    def email(self) -> Email:
        return self.credentials.email

    def change_name(self, first_name: str | None, last_name: str | None) -> Result[None]:
        name = FullName.create(first_name, last_name)
        if name.is_failure:
            return name
        self.name = name.value
        return ok()

    def change_email(self, email: str | None) -> Result[None]:
        new_email = Email.create(email)
        if new_email.is_failure:
            return new_email
        self.credentials = Credentials.of(new_email.value, self.credentials.password)
        return ok()

    def change_password(self, password: str | None) -> Result[None]:
        new_password = Password.create(password)
        if new_password.is_failure:
            return new_password
        self.credentials = Credentials.of(self.credentials.email, new_password.value)
        return ok()

    def add_reservation(self, reservation: Reservation) -> None:
        if reservation not in self.reservations:
            self.reservations.append(reservation)

    def remove_reservation(self, reservation: Reservation) -> None:
        if reservation in self.reservations:
            self.reservations.remove(reservation)
