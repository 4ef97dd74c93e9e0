"""httpx implementation of HttpGatewayProtocol.

Handles everything below the negotiator and poller:
- HTTP request execution with timeout/connection error handling
- TLS certificate trust and protocol pinning
- Response status code interpretation (400/401/403, 404, 429, 5xx)
- JSON parsing with type validation
- Structured logging with operation context

Architecture:
    - Infrastructure layer (adapter for the control plane HTTP API)
    - Uses httpx.AsyncClient per request (no shared connection state)
    - Returns Result types (no exceptions for transport errors)
"""

import ssl
from typing import Any

import httpx
import structlog

from aria_automation.core.constants import (
    BEARER_PREFIX,
    REQUEST_TIMEOUT_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
)
from aria_automation.core.enums import (
    CertificateTrustMode,
    ErrorCode,
    TransportProtocol,
)
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.session import Session
from aria_automation.domain.errors import (
    GatewayError,
    GatewayInvalidResponseError,
    GatewayNotFoundError,
    GatewayRateLimitError,
    GatewayRejectedError,
    GatewayUnavailableError,
)
from aria_automation.domain.protocols.http_gateway_protocol import GatewayResponse

logger = structlog.get_logger(__name__)

_REJECTED_STATUSES = frozenset({400, 401, 403})


def server_base_url(server_host: str) -> str:
    """Normalize "host", "host/" or "https://host" to "https://host"."""
    host = server_host.strip().rstrip("/")
    if host.startswith("https://"):
        return host
    if host.startswith("http://"):
        host = host[len("http://") :]
    return f"https://{host}"


def build_ssl_verify(
    certificate_trust_mode: CertificateTrustMode,
    transport_protocol: TransportProtocol | None = None,
) -> bool | ssl.SSLContext:
    """Translate trust mode and protocol override into httpx's verify argument.

    Args:
        certificate_trust_mode: STRICT verifies, PERMISSIVE does not.
        transport_protocol: Pin min/max TLS version when set.

    Returns:
        A bool when no protocol is pinned, otherwise a configured SSLContext.
    """
    if transport_protocol is None:
        return certificate_trust_mode.verifies

    context = ssl.create_default_context()
    if not certificate_trust_mode.verifies:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    context.minimum_version = transport_protocol.tls_version
    context.maximum_version = transport_protocol.tls_version
    return context


class HttpxGateway:
    """Gateway to a single control plane server.

    Attributes:
        base_url: "https://host" every path is joined to.
        access_token: Bearer token added to every request when set.

    Example:
        >>> gateway = HttpxGateway(base_url="https://vra.example.com")
        >>> result = await gateway.get("/iaas/api/about")
        >>> match result:
        ...     case Success(value=response):
        ...         print(response.body["latestApiVersion"])
        ...     case Failure(error=error):
        ...         print(error.message)
    """

    def __init__(
        self,
        *,
        base_url: str,
        access_token: str | None = None,
        certificate_trust_mode: CertificateTrustMode = CertificateTrustMode.STRICT,
        transport_protocol: TransportProtocol | None = None,
        timeout: float = REQUEST_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize gateway.

        Args:
            base_url: Server base URL (e.g., "https://vra.example.com").
            access_token: Optional bearer token for authenticated calls.
            certificate_trust_mode: Certificate handling.
            transport_protocol: Optional pinned TLS version.
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._verify = build_ssl_verify(certificate_trust_mode, transport_protocol)
        self._timeout = timeout

    @classmethod
    def for_session(
        cls, session: Session, *, timeout: float = REQUEST_TIMEOUT_DEFAULT
    ) -> "HttpxGateway":
        """Gateway authenticated with the session's access token."""
        return cls(
            base_url=session.server_base_url,
            access_token=session.access_token,
            certificate_trust_mode=session.certificate_trust_mode,
            transport_protocol=session.transport_protocol,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        """Server base URL."""
        return self._base_url

    async def post(
        self,
        path: str,
        *,
        json_body: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Result[GatewayResponse, GatewayError]:
        """POST a JSON body and parse the JSON object response."""
        return await self._execute(
            method="POST", path=path, json_body=json_body, headers=headers
        )

    async def get(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[GatewayResponse, GatewayError]:
        """GET a JSON object resource."""
        return await self._execute(
            method="GET", path=path, params=params, headers=headers
        )

    def _build_headers(
        self, extra: dict[str, str] | None, *, has_body: bool
    ) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self._access_token:
            headers["Authorization"] = f"{BEARER_PREFIX}{self._access_token}"
        if extra:
            headers.update(extra)
        return headers

    async def _execute(
        self,
        *,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[GatewayResponse, GatewayError]:
        """Execute HTTP request with error handling.

        Returns:
            Success(GatewayResponse): 2xx with a JSON object (or empty) body.
            Failure(GatewayError): Transport failure or error status.
        """
        url = f"{self._base_url}{path}"
        request_headers = self._build_headers(headers, has_body=json_body is not None)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, verify=self._verify
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=request_headers,
                    params=params,
                    json=json_body,
                )

        except httpx.TimeoutException as e:
            logger.warning(
                "gateway_timeout",
                method=method,
                path=path,
                error=str(e),
            )
            return Failure(
                error=GatewayUnavailableError(
                    code=ErrorCode.GATEWAY_UNAVAILABLE,
                    message=f"Request to {self._base_url} timed out",
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            logger.warning(
                "gateway_connection_error",
                method=method,
                path=path,
                error=str(e),
            )
            return Failure(
                error=GatewayUnavailableError(
                    code=ErrorCode.GATEWAY_UNAVAILABLE,
                    message=f"Failed to connect to {self._base_url}: {e}",
                    is_transient=True,
                )
            )

        return self._parse_response(response, method=method, path=path)

    def _check_error_response(
        self,
        response: httpx.Response,
        *,
        method: str,
        path: str,
    ) -> Failure[GatewayError] | None:
        """Map non-2xx statuses to GatewayError types.

        Returns:
            Failure(GatewayError) if error detected, None if response is OK.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]

        if status in _REJECTED_STATUSES:
            logger.warning(
                "gateway_request_rejected",
                method=method,
                path=path,
                status_code=status,
            )
            return Failure(
                error=GatewayRejectedError(
                    code=ErrorCode.GATEWAY_REQUEST_REJECTED,
                    message=f"Request rejected by server: {status}",
                    status_code=status,
                    response_body=body,
                )
            )

        if status == 404:
            logger.warning("gateway_not_found", method=method, path=path)
            return Failure(
                error=GatewayNotFoundError(
                    code=ErrorCode.GATEWAY_RESOURCE_NOT_FOUND,
                    message=f"Resource not found: {path}",
                    status_code=status,
                    response_body=body,
                )
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = (
                int(retry_after) if retry_after and retry_after.isdigit() else None
            )
            logger.warning(
                "gateway_rate_limited",
                method=method,
                path=path,
                retry_after=retry_seconds,
            )
            return Failure(
                error=GatewayRateLimitError(
                    code=ErrorCode.GATEWAY_RATE_LIMITED,
                    message="Server rate limit exceeded",
                    status_code=status,
                    response_body=body,
                    retry_after=retry_seconds,
                )
            )

        if status >= 500:
            logger.warning(
                "gateway_server_error",
                method=method,
                path=path,
                status_code=status,
            )
            return Failure(
                error=GatewayUnavailableError(
                    code=ErrorCode.GATEWAY_UNAVAILABLE,
                    message=f"Server error: {status}",
                    status_code=status,
                    response_body=body,
                    is_transient=True,
                )
            )

        logger.warning(
            "gateway_unexpected_status",
            method=method,
            path=path,
            status_code=status,
        )
        return Failure(
            error=GatewayInvalidResponseError(
                code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                message=f"Unexpected response status: {status}",
                status_code=status,
                response_body=body,
            )
        )

    def _parse_response(
        self,
        response: httpx.Response,
        *,
        method: str,
        path: str,
    ) -> Result[GatewayResponse, GatewayError]:
        error_result = self._check_error_response(response, method=method, path=path)
        if error_result is not None:
            return error_result

        if not response.content:
            return Success(value=GatewayResponse(status_code=response.status_code))

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                "gateway_invalid_json",
                method=method,
                path=path,
                error=str(e),
            )
            return Failure(
                error=GatewayInvalidResponseError(
                    code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                    message="Invalid JSON response",
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            logger.warning(
                "gateway_unexpected_format",
                method=method,
                path=path,
                data_type=type(data).__name__,
            )
            return Failure(
                error=GatewayInvalidResponseError(
                    code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                    message="Expected JSON object response",
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        logger.debug(
            "gateway_request_succeeded",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return Success(
            value=GatewayResponse(status_code=response.status_code, body=data)
        )
