"""Gateway (transport) error types.

Returned by the HttpGatewayProtocol contract for any HTTP round trip that
did not produce a usable JSON object. The negotiator and poller inspect the
error TYPE to decide what happens next, e.g. a GatewayRejectedError on the
identity login is the only condition that triggers the alternate payload.

Status mapping:
    400/401/403 → GatewayRejectedError (client-side rejection)
    404         → GatewayNotFoundError
    429         → GatewayRateLimitError
    5xx, timeout, connection failure → GatewayUnavailableError
    non-JSON / non-object body → GatewayInvalidResponseError
"""

from dataclasses import dataclass

from aria_automation.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayError(DomainError):
    """Base transport error.

    Attributes:
        status_code: HTTP status, None when no response was received.
        response_body: Truncated raw body for diagnostics.
    """

    status_code: int | None = None
    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayRejectedError(GatewayError):
    """Request rejected by the server (malformed or bad credentials)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayNotFoundError(GatewayError):
    """Requested path or resource does not exist."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayRateLimitError(GatewayError):
    """Server throttled the request.

    Attributes:
        retry_after: Seconds to wait before retrying (Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayUnavailableError(GatewayError):
    """Server unreachable, timed out or returned 5xx.

    Attributes:
        is_transient: Whether a later retry may succeed.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayInvalidResponseError(GatewayError):
    """Response could not be parsed or lacked a required field."""

    pass
