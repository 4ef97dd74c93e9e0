"""Session entity for an authenticated control plane connection.

A Session is either fully valid (server URL and access token present) or
does not exist. It is created in one step by the negotiator once both login
stages succeeded; there is no partially authenticated state.

Business Rules:
    - server_base_url and access_token are required and non-empty
    - refresh_token may be None (identity provider omitted it)
    - api_version is attached after the about lookup via with_api_version()
    - Sessions are immutable; a new negotiation produces a new Session
"""

from dataclasses import dataclass, replace

from aria_automation.core.constants import BEARER_PREFIX
from aria_automation.core.enums import CertificateTrustMode, TransportProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Authenticated context for every subsequent API call.

    Attributes:
        server_base_url: "https://host" of the control plane.
        access_token: Bearer token for the IaaS API.
        refresh_token: Token the access token was minted from (may be None).
        api_version: Latest API version reported by the server.
        certificate_trust_mode: Certificate handling the session was made with.
        transport_protocol: Optional pinned TLS protocol version.
        username: Login name for display; None for API token sessions.

    Example:
        >>> session = Session(
        ...     server_base_url="https://vra.example.com",
        ...     access_token="eyJ...",
        ...     refresh_token="rt",
        ... )
        >>> session.authorization_headers()["Authorization"][:7]
        'Bearer '
    """

    server_base_url: str
    access_token: str
    refresh_token: str | None = None
    api_version: str | None = None
    certificate_trust_mode: CertificateTrustMode = CertificateTrustMode.STRICT
    transport_protocol: TransportProtocol | None = None
    username: str | None = None

    def __post_init__(self) -> None:
        """Validate required fields.

        Raises:
            ValueError: If server_base_url or access_token is empty.
        """
        if not self.server_base_url:
            raise ValueError("server_base_url cannot be empty")
        if not self.access_token:
            raise ValueError("access_token cannot be empty")

    def with_api_version(self, api_version: str | None) -> "Session":
        """Return a copy carrying the resolved API version."""
        return replace(self, api_version=api_version)

    def authorization_headers(self) -> dict[str, str]:
        """Bearer Authorization header for authenticated calls."""
        return {"Authorization": f"{BEARER_PREFIX}{self.access_token}"}

    def __repr__(self) -> str:
        """Return repr for debugging.

        Note: Does NOT include tokens.
        """
        return (
            f"Session(server_base_url={self.server_base_url!r}, "
            f"username={self.username!r}, "
            f"api_version={self.api_version!r}, "
            f"certificate_trust_mode={self.certificate_trust_mode.value}, "
            f"has_refresh_token={self.refresh_token is not None})"
        )
