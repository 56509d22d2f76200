"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorCategory, Environment
"""

from src.core.enums.environment import Environment
from src.core.enums.error_category import ErrorCategory

__all__ = ["ErrorCategory", "Environment"]
