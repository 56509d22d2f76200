"""Error value for Railway-Oriented Programming.

``Error`` is the single error type of the application. Errors describe
business rule violations and validation failures. They flow through the
system as data (inside ``Failure``), never as raised exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Frozen dataclass: immutable, hashable, safe to share as module constants
- Identity is (code, message); category only classifies the failure

Usage:
    from src.core.errors import Error

    INVALID = Error.validation("Date.Invalid", "The date is invalid.")
    return Failure(errors=INVALID)
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCategory


@dataclass(frozen=True, slots=True, kw_only=True)
class Error:
    """Immutable (code, message, category) triple.

    Two errors are equal when their code and message match. The category
    does not take part in equality or hashing.

    Attributes:
        code: Machine-readable code, ``<Area>.<Reason>`` by convention.
        message: Human-readable description.
        category: Failure kind, decides the transport status.

    Raises:
        TypeError: If code or message is None (programming error).

    Example:
        >>> error = Error.validation("Email.InvalidFormat", "Bad email.")
        >>> str(error)
        'Email.InvalidFormat: Bad email.'
        >>> error == Error.conflict("Email.InvalidFormat", "Bad email.")
        True
    """

    code: str
    message: str
    category: ErrorCategory = field(default=ErrorCategory.FAILURE, compare=False)

    def __post_init__(self) -> None:
        """Reject missing code/message and collapse blank strings.

        Raises:
            TypeError: If code or message is None.
        """
        if self.code is None:
            raise TypeError("Error code cannot be None")
        if self.message is None:
            raise TypeError("Error message cannot be None")
        # frozen dataclass
        if not self.code.strip():
            object.__setattr__(self, "code", "")
        if not self.message.strip():
            object.__setattr__(self, "message", "")

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code}: {self.message}"

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        code: str,
        message: str,
        category: ErrorCategory = ErrorCategory.FAILURE,
    ) -> "Error":
        """Create an error with an explicit category (FAILURE by default)."""
        return cls(code=code, message=message, category=category)

    @classmethod
    def failure(cls, code: str, message: str) -> "Error":
        """Create a generic FAILURE error."""
        return cls(code=code, message=message, category=ErrorCategory.FAILURE)

    @classmethod
    def unexpected(cls, code: str, message: str) -> "Error":
        """Create an UNEXPECTED error."""
        return cls(code=code, message=message, category=ErrorCategory.UNEXPECTED)

    @classmethod
    def validation(cls, code: str, message: str) -> "Error":
        """Create a VALIDATION error."""
        return cls(code=code, message=message, category=ErrorCategory.VALIDATION)

    @classmethod
    def conflict(cls, code: str, message: str) -> "Error":
        """Create a CONFLICT error."""
        return cls(code=code, message=message, category=ErrorCategory.CONFLICT)

    @classmethod
    def not_found(cls, code: str, message: str) -> "Error":
        """Create a NOT_FOUND error."""
        return cls(code=code, message=message, category=ErrorCategory.NOT_FOUND)

    @classmethod
    def unauthorized(cls, code: str, message: str) -> "Error":
        """Create an UNAUTHORIZED error."""
        return cls(code=code, message=message, category=ErrorCategory.UNAUTHORIZED)

    @classmethod
    def forbidden(cls, code: str, message: str) -> "Error":
        """Create a FORBIDDEN error."""
        return cls(code=code, message=message, category=ErrorCategory.FORBIDDEN)

    @classmethod
    def exception(cls, code: str, message: str) -> "Error":
        """Create an EXCEPTION error."""
        return cls(code=code, message=message, category=ErrorCategory.EXCEPTION)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Error":
        """Convert an unexpected exception into an EXCEPTION error.

        Args:
            exc: Exception caught at a boundary (handler catch-all).

        Returns:
            Error whose code is the exception class name and whose message
            is the exception text.
        """
        return cls.exception(type(exc).__name__, str(exc))
