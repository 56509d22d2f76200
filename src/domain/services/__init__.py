"""Domain services: rules that span more than one entity."""

from src.domain.services.seat_availability import ensure_available, is_day_free

__all__ = ["ensure_available", "is_day_free"]
