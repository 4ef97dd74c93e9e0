"""Identity login payload construction.

Turns a username-based credential into the JSON bodies posted to the
identity login endpoint. Every payload is prepared before the first network
call so the negotiator only has to decide which one to send.

Username rules:
    DOMAIN\\user  → rejected (UnsupportedUsernameFormatError)
    user@domain  → primary {username: "user"} + alternate {username: "user@domain"},
                   both with domain "domain"
    user         → single payload with the default domain, no alternate

Some deployments map the directory's UPN attribute to the username field,
which is why the alternate carries the full qualified string.
"""

from dataclasses import dataclass
from typing import Any

from aria_automation.core.constants import (
    DEFAULT_LOGIN_DOMAIN,
    UNSUPPORTED_DOMAIN_SEPARATOR,
    UPN_SEPARATOR,
)
from aria_automation.core.enums import ErrorCode
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.errors import UnsupportedUsernameFormatError
from aria_automation.domain.value_objects import (
    ExplicitDomainCredential,
    UsernamePasswordCredential,
)


@dataclass(frozen=True, kw_only=True)
class LoginPayloads:
    """Prepared identity login bodies.

    Attributes:
        primary: Body sent first.
        alternate: Body sent once if the primary is rejected (None = no retry).
        qualified: Whether the username carried an @ qualifier.
    """

    primary: dict[str, Any]
    alternate: dict[str, Any] | None = None
    qualified: bool = False

    def __repr__(self) -> str:
        """Return repr without passwords."""
        return (
            f"LoginPayloads(username={self.primary.get('username')!r}, "
            f"domain={self.primary.get('domain')!r}, "
            f"has_alternate={self.alternate is not None})"
        )


def _payload(username: str, password: str, domain: str) -> dict[str, Any]:
    return {"username": username, "password": password, "domain": domain}


def build_login_payloads(
    credential: UsernamePasswordCredential | ExplicitDomainCredential,
    *,
    default_domain: str = DEFAULT_LOGIN_DOMAIN,
) -> Result[LoginPayloads, UnsupportedUsernameFormatError]:
    """Prepare the primary (and optional alternate) login payload.

    Args:
        credential: Username/password credential, with or without explicit domain.
        default_domain: Domain asserted for unqualified usernames.

    Returns:
        Success(LoginPayloads), or Failure(UnsupportedUsernameFormatError) for
        DOMAIN\\user input.

    Example:
        >>> result = build_login_payloads(
        ...     UsernamePasswordCredential(username="jo@corp.local", password="pw")
        ... )
        >>> result.value.primary["username"], result.value.alternate["username"]
        ('jo', 'jo@corp.local')
    """
    username = credential.username
    password = credential.password

    if UNSUPPORTED_DOMAIN_SEPARATOR in username:
        return Failure(
            error=UnsupportedUsernameFormatError(
                code=ErrorCode.UNSUPPORTED_USERNAME_FORMAT,
                message=(
                    "The username format DOMAIN\\username is not supported. "
                    "Use username@domain instead."
                ),
                field="username",
            )
        )

    explicit_domain = (
        credential.domain if isinstance(credential, ExplicitDomainCredential) else None
    )

    if UPN_SEPARATOR in username:
        local_part, _, upn_domain = username.partition(UPN_SEPARATOR)
        domain = explicit_domain or upn_domain
        return Success(
            value=LoginPayloads(
                primary=_payload(local_part, password, domain),
                alternate=_payload(username, password, domain),
                qualified=True,
            )
        )

    return Success(
        value=LoginPayloads(
            primary=_payload(username, password, explicit_domain or default_domain),
        )
    )
