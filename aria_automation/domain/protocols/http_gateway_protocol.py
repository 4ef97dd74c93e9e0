"""HttpGatewayProtocol - narrow port to the control plane's HTTP API.

The core never builds requests itself: it calls post()/get() with a fixed
path and a JSON body, and receives either the decoded JSON object or a
GatewayError describing why there is none.

Every request carries ``Accept: application/json``; requests with a body
also carry ``Content-Type: application/json``. A session-bound gateway adds
the Bearer Authorization header. TLS trust and protocol pinning are the
implementation's concern.

Reference:
    - aria_automation/infrastructure/http/httpx_gateway.py (httpx adapter)
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from aria_automation.core.result import Result
    from aria_automation.domain.errors import GatewayError


@dataclass(frozen=True, kw_only=True)
class GatewayResponse:
    """Successful (2xx) HTTP response.

    Attributes:
        status_code: HTTP status code.
        body: Decoded JSON object ({} for an empty body).
    """

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


class HttpGatewayProtocol(Protocol):
    """Protocol for the authenticated HTTP client collaborator."""

    @property
    def base_url(self) -> str:
        """Server base URL ("https://host") all paths are joined to."""
        ...

    async def post(
        self,
        path: str,
        *,
        json_body: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> "Result[GatewayResponse, GatewayError]":
        """POST a JSON body.

        Args:
            path: Absolute path (may include a query string).
            json_body: JSON-serializable request body.
            headers: Extra headers merged over the defaults.

        Returns:
            Success(GatewayResponse) on 2xx with a JSON object body.
            Failure(GatewayError) otherwise.
        """
        ...

    async def get(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> "Result[GatewayResponse, GatewayError]":
        """GET a JSON resource.

        Args:
            path: Absolute path.
            params: Query parameters.
            headers: Extra headers merged over the defaults.

        Returns:
            Success(GatewayResponse) on 2xx with a JSON object body.
            Failure(GatewayError) otherwise.
        """
        ...
