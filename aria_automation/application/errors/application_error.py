"""Application layer error types.

Application-level errors wrap domain errors and add command execution
context for the caller.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from aria_automation.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from aria_automation.domain.errors import GatewayRateLimitError, NotConnectedError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_CONNECTED,
        ...     message="Connect to a server first",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    NOT_CONNECTED = "not_connected"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error (if any).
        details: Additional context as key-value pairs.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def from_domain(
        cls,
        error: DomainError,
        *,
        details: dict[str, Any] | None = None,
    ) -> "ApplicationError":
        """Wrap a domain error, choosing the code from its type."""
        return cls(
            code=_code_for(error),
            message=error.message,
            domain_error=error,
            details=details,
        )


def _code_for(error: DomainError) -> ApplicationErrorCode:
    # NotConnectedError is an AuthenticationError; check it first
    match error:
        case NotConnectedError():
            return ApplicationErrorCode.NOT_CONNECTED
        case ValidationError():
            return ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        case AuthenticationError():
            return ApplicationErrorCode.UNAUTHORIZED
        case NotFoundError():
            return ApplicationErrorCode.NOT_FOUND
        case ConflictError():
            return ApplicationErrorCode.CONFLICT
        case GatewayRateLimitError():
            return ApplicationErrorCode.RATE_LIMIT_EXCEEDED
        case _:
            return ApplicationErrorCode.COMMAND_EXECUTION_FAILED
