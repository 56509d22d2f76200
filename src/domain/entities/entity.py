"""Base class for domain entities.

Entities are mutable and compared by identity: two instances are equal when
they are of the same type and carry the same ``id``, whatever their other
attributes hold.
"""

from dataclasses import InitVar, dataclass
from uuid import UUID

from src.domain.value_objects.base import ensure_factory


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity-compared entity built only through its ``create`` factory.

    Attributes:
        id: Unique identifier.
    """

    id: UUID
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        ensure_factory(_key, type(self))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
