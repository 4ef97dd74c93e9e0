"""Authentication errors returned by session negotiation and lookup.

- UnsupportedUsernameFormatError: DOMAIN\\user input, rejected before any call
- AuthRejectedError: identity provider refused every prepared payload
- NotConnectedError: an authenticated call was attempted with no session
"""

from dataclasses import dataclass

from aria_automation.core.errors import AuthenticationError, ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedUsernameFormatError(ValidationError):
    """Username uses the backslash domain qualifier.

    Never retried: the identity API does not accept this format.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthRejectedError(AuthenticationError):
    """Credentials rejected by the remote API.

    Attributes:
        hint: Best-effort diagnosis of the likely cause.
        status_code: HTTP status of the final rejection.
        attempts: Number of login payloads tried (1 or 2).
    """

    hint: str
    status_code: int | None = None
    attempts: int = 1


@dataclass(frozen=True, slots=True, kw_only=True)
class NotConnectedError(AuthenticationError):
    """No session has been established."""

    pass
