"""Core shared kernel.

Result types, base errors, error codes, settings and fixed constants. The core
package has NO dependencies on the other layers.
"""

from aria_automation.core.enums import ErrorCode
from aria_automation.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from aria_automation.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
