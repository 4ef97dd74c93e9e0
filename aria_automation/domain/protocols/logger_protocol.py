"""LoggerProtocol definition for structured logging.

Backend-agnostic contract for the loggers injected into application
handlers. Implementations MUST emit structured logs (message + key-value
context) and MUST NOT receive secrets: never pass passwords or tokens as
context.

Usage:
    from aria_automation.core.container import get_logger

    logger = get_logger()
    logger.info("server_connected", server="vra.example.com")
    scoped = logger.bind(operation_id=operation_id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case; use context, not f-strings).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
