"""Common error classes shared by every layer.

Error Types:
- ValidationError: Input rejected before any remote call
- NotFoundError: Resource lookup returned nothing
- ConflictError: Lookup matched more than one resource
- AuthenticationError: Credentials or session missing or rejected
"""

from dataclasses import dataclass

from aria_automation.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Machine, Operation, ...).
        resource_id: Identifier or name that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Lookup matched more than one resource.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that is not unique (name, ...).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (rejected credentials, no session)."""

    pass
