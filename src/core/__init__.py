"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error model (code, message, category) shared by every layer
- Validation helpers that return Results instead of raising

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCategory
from src.core.errors import CommonErrors, Error
from src.core.result import (
    Failure,
    InvalidResultError,
    Result,
    Success,
    combine,
    from_optional,
    ok,
)

__all__ = [
    "CommonErrors",
    "Error",
    "ErrorCategory",
    "Failure",
    "InvalidResultError",
    "Result",
    "Success",
    "combine",
    "from_optional",
    "ok",
]
