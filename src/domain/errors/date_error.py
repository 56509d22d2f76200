"""Reservation date errors."""

from src.core.errors import Error


class DateError:
    """Date error constants."""

    INVALID = Error.validation("Date.Invalid", "The date is invalid.")
    """Missing date, or the minimum representable date."""

    IN_THE_PAST = Error.validation(
        "Date.InThePast", "The reservation date cannot be earlier than today."
    )
    """Request-level rule; value objects accept any real calendar day."""
