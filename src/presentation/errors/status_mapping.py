"""Error category to HTTP status mapping."""

from fastapi import status

from src.core.enums import ErrorCategory

# category -> (status, title, type slug)
_CATEGORY_INFO: dict[ErrorCategory, tuple[int, str, str]] = {
    ErrorCategory.VALIDATION: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
        "validation-failed",
    ),
    ErrorCategory.NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Resource Not Found",
        "not-found",
    ),
    ErrorCategory.CONFLICT: (
        status.HTTP_409_CONFLICT,
        "Resource Conflict",
        "conflict",
    ),
    ErrorCategory.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
        "unauthorized",
    ),
    ErrorCategory.FORBIDDEN: (
        status.HTTP_403_FORBIDDEN,
        "Access Denied",
        "forbidden",
    ),
    ErrorCategory.EXCEPTION: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "internal-server-error",
    ),
}

_DEFAULT_INFO = (status.HTTP_400_BAD_REQUEST, "Bad Request", "bad-request")


def status_for(category: ErrorCategory) -> int:
    """Map an error category to an HTTP status code.

    Example:
        >>> status_for(ErrorCategory.CONFLICT)
        409
        >>> status_for(ErrorCategory.FAILURE)
        400
    """
    return _CATEGORY_INFO.get(category, _DEFAULT_INFO)[0]


def title_for(category: ErrorCategory) -> str:
    """Human-readable problem title for a category."""
    return _CATEGORY_INFO.get(category, _DEFAULT_INFO)[1]


def slug_for(category: ErrorCategory) -> str:
    """Kebab-case slug used in the problem ``type`` URL."""
    return _CATEGORY_INFO.get(category, _DEFAULT_INFO)[2]
