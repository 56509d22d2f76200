"""Seat commands (CQRS write operations)."""

from dataclasses import dataclass, replace
from typing import Self

from src.application.filters import normalize_seat_name, trim
from src.domain.types import DescriptionText, EntityId, SeatNameText


@dataclass(frozen=True, kw_only=True)
class CreateSeat:
    """Add a seat.

    Attributes:
        name: Canonical seat name, row letters then number ("A23").
        description: Optional free text.

    Example:
        >>> command = CreateSeat(name="a23", description="Window")
        >>> result = await handler.handle(command)
    """

    name: SeatNameText
    description: DescriptionText | None = None

    def filtered(self) -> Self:
        return replace(
            self,
            name=normalize_seat_name(self.name),
            description=trim(self.description),
        )


@dataclass(frozen=True, kw_only=True)
class UpdateSeat:
    """Rename, re-describe, block or unblock a seat.

    Fields left as None keep their current value.
    """

    seat_id: EntityId
    name: SeatNameText | None = None
    description: DescriptionText | None = None
    is_blocked: bool | None = None

    def filtered(self) -> Self:
        return replace(
            self,
            name=normalize_seat_name(self.name),
            description=trim(self.description),
        )


@dataclass(frozen=True, kw_only=True)
class DeleteSeat:
    """Delete a seat together with its reservations."""

    seat_id: EntityId
