"""Seat naming errors.

Covers the two seat-name parts (number and row) and the combined seat name
("A23": row letters followed by number digits).
"""

from src.core.errors import Error


class SeatNumberError:
    """Seat number error constants."""

    IS_NULL_OR_EMPTY = Error.validation(
        "SeatNumber.IsNullOrEmpty", "Seat number cannot be null or empty."
    )

    INVALID_FORMAT = Error.validation(
        "SeatNumber.InvalidFormat", "Seat number must contain digits only."
    )


class SeatRowError:
    """Seat row error constants."""

    IS_NULL_OR_EMPTY = Error.validation(
        "SeatRow.IsNullOrEmpty", "Seat row cannot be null or empty."
    )

    INVALID_FORMAT = Error.validation(
        "SeatRow.InvalidFormat", "Seat row must contain letters only."
    )


class SeatNameError:
    """Seat name error constants."""

    IS_NULL_OR_EMPTY = Error.validation(
        "SeatName.IsNullOrEmpty", "Seat name cannot be null or empty."
    )

    INVALID_FORMAT = Error.validation(
        "SeatName.InvalidFormat",
        "The value must be in the format 'RowNumber' (for example 'A23').",
    )
