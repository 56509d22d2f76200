"""Core errors package.

Exports the error value and shared error constants.

Usage:
    from src.core.errors import CommonErrors, Error
"""

from src.core.errors.common_errors import CommonErrors
from src.core.errors.error import Error

__all__ = [
    "CommonErrors",
    "Error",
]
