"""LoggerProtocol definition for structured logging.

Backend-agnostic logging port. Implementations MUST log structured
key-value context and MUST NOT log secrets (passwords in particular).

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("seat_created", seat_id=str(seat.id), seat_name=str(seat.name))

    handler_logger = logger.bind(handler="CreateReservationHandler")
    handler_logger.warning("reservation_rejected", error_code=error.code)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: a constant event name plus key-value
    context. Context binding returns a new logger; the original is unchanged.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        ...

    def info(self, message: str, /, **context: Any) -> None:
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Args:
            **context: Context to include in all subsequent log calls.
        """
        ...
