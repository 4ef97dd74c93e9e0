"""Domain value objects."""

from aria_automation.domain.value_objects.login_credentials import (
    ApiTokenCredential,
    ExplicitDomainCredential,
    LoginCredential,
    UsernamePasswordCredential,
)

__all__ = [
    "ApiTokenCredential",
    "ExplicitDomainCredential",
    "LoginCredential",
    "UsernamePasswordCredential",
]
