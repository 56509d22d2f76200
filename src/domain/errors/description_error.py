"""Seat description errors."""

from src.core.errors import Error


class DescriptionError:
    """Description error constants. An empty description is valid."""

    @staticmethod
    def too_long(length: int) -> Error:
        return Error.validation(
            "Description.TooLong",
            f"The description cannot exceed {length} characters.",
        )
