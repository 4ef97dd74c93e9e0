"""Core errors package.

Usage:
    from aria_automation.core.errors import DomainError, ValidationError
"""

from aria_automation.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from aria_automation.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
