"""Credentials composite value object (email + password).

Email uniqueness is not checked here; it belongs to the user repository.
"""

from dataclasses import InitVar, dataclass

from src.core.result import Result, Success, combine
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory
from src.domain.value_objects.email import Email
from src.domain.value_objects.password import MASK, Password


@dataclass(frozen=True, slots=True, repr=False)
class Credentials(ValueObject):
    """Login credentials.

    ``value`` and ``str()`` are ``"<email> <password>"``; ``repr()`` masks
    the password.
    """

    email: Email
    password: Password
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @property
    def value(self) -> str:
        return f"{self.email.value} {self.password.value}"

    def __repr__(self) -> str:
        return f"Credentials(email='{self.email.value}', password='{MASK}')"

    @classmethod
    def create(cls, email: str | None, password: str | None) -> Result["Credentials"]:
        """Validate email and password; errors of both are reported together."""
        email_result = Email.create(email)
        password_result = Password.create(password)
        failure = combine(email_result, password_result)
        if failure is not None:
            return failure
        return Success(value=cls(email_result.value, password_result.value, FACTORY_KEY))

    @classmethod
    def of(cls, email: Email, password: Password) -> "Credentials":
        """Compose already-validated parts."""
        return cls(email, password, FACTORY_KEY)
