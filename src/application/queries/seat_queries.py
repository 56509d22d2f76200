"""Seat queries (CQRS read operations)."""

from dataclasses import dataclass, replace
from typing import Self

from src.application.filters import normalize_seat_name
from src.domain.types import EntityId, SeatNameText


@dataclass(frozen=True, kw_only=True)
class GetSeatById:
    """Get a single seat by ID."""

    seat_id: EntityId


@dataclass(frozen=True, kw_only=True)
class GetSeatByName:
    """Get a single seat by its canonical name ("A23")."""

    name: SeatNameText

    def filtered(self) -> Self:
        return replace(self, name=normalize_seat_name(self.name))


@dataclass(frozen=True, kw_only=True)
class GetAllSeats:
    """List every seat, ordered by name."""
