"""Seat description value object. Optional text, at most 255 characters."""

from dataclasses import InitVar, dataclass

from src.core.result import Result, Success
from src.core.validation import validate_max_length
from src.domain.errors import DescriptionError
from src.domain.value_objects.base import FACTORY_KEY, ValueObject, ensure_factory

MAX_LENGTH = 255


@dataclass(frozen=True, slots=True)
class Description(ValueObject):
    value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    @classmethod
    def create(cls, value: str | None) -> Result["Description"]:
        """Wrap a description; None and "" both become the empty description."""
        text = value or ""
        match validate_max_length(text, MAX_LENGTH, DescriptionError.too_long(MAX_LENGTH)):
            case Success():
                return Success(value=cls(text, FACTORY_KEY))  # type: ignore[arg-type]
            case failure:
                return failure
