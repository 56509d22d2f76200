"""Errors shared by every layer.

Error Constants:
- NONE: "No error" sentinel (empty code and message). Never allowed in a
  failure; ``Success.first_error`` returns it.
- NULL_VALUE: A required value was None.

Usage:
    from src.core.errors import CommonErrors
    from src.core.result import Failure

    return Failure(errors=CommonErrors.NULL_VALUE)
"""

from src.core.enums import ErrorCategory
from src.core.errors.error import Error


class CommonErrors:
    """Error constants that do not belong to any specific domain area."""

    NONE = Error.create("", "", ErrorCategory.NONE)
    """Sentinel for "no error"."""

    NULL_VALUE = Error.validation(
        "Error.NullValue", "The specified result value is null."
    )
    """A value required by the operation was None."""
