"""FullName composite value object (first name + last name)."""

from dataclasses import InitVar, dataclass

from src.core.result import Result, Success, combine
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory
from src.domain.value_objects.names import FirstName, LastName


@dataclass(frozen=True, slots=True)
class FullName(ValueObject):
    """A person's full name.

    Attributes:
        first_name: Validated first name.
        last_name: Validated last name.

    Example:
        >>> FullName.create("Ana", "Lopez").value.value
        'Ana Lopez'
    """

    first_name: FirstName
    last_name: LastName
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @property
    def value(self) -> str:
        return f"{self.first_name.value} {self.last_name.value}"

    @classmethod
    def create(cls, first_name: str | None, last_name: str | None) -> Result["FullName"]:
        """Validate both parts; errors of both are reported together."""
        first = FirstName.create(first_name)
        last = LastName.create(last_name)
        failure = combine(first, last)
        if failure is not None:
            return failure
        return Success(value=cls(first.value, last.value, FACTORY_KEY))

    @classmethod
    def of(cls, first_name: FirstName, last_name: LastName) -> "FullName":
        """Compose already-validated parts."""
        return cls(first_name, last_name, FACTORY_KEY)
