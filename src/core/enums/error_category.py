"""Error categories (machine-readable failure kinds).

Every ``Error`` carries one category. The category, not the concrete error
code, decides how a failure is surfaced (see
``src.presentation.errors.status_for``).

Categories:
- NONE: Sentinel for "no error" (never inside a failure)
- FAILURE: Generic failure (default for ``Error.create``)
- UNEXPECTED: Internal state that should not happen
- VALIDATION: Value object / request rule violated
- CONFLICT: Uniqueness or availability invariant violated
- NOT_FOUND: Referenced identifier does not resolve
- UNAUTHORIZED / FORBIDDEN: Authentication and authorization
- EXCEPTION: Unexpected exception converted into an error
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """Kinds of failure an ``Error`` can describe."""

    NONE = "none"
    FAILURE = "failure"
    UNEXPECTED = "unexpected"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    EXCEPTION = "exception"
