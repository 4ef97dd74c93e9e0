"""Session commands (connect / disconnect).

Commands are immutable data containers; handlers execute the logic and
return Result types.
"""

from dataclasses import dataclass

from aria_automation.core.enums import CertificateTrustMode, TransportProtocol
from aria_automation.domain.value_objects import LoginCredential


@dataclass(frozen=True, kw_only=True)
class ConnectServer:
    """Negotiate a session with a control plane server and store it.

    Attributes:
        server: Host name or base URL (e.g. "vra.example.com").
        credential: Exactly one login credential variant.
        certificate_trust_mode: Overrides the configured trust mode.
        transport_protocol: Overrides the configured TLS pin.

    Example:
        >>> command = ConnectServer(
        ...     server="vra.example.com",
        ...     credential=ApiTokenCredential(token="T1"),
        ... )
        >>> result = await handler.handle(command)
    """

    server: str
    credential: LoginCredential
    certificate_trust_mode: CertificateTrustMode | None = None
    transport_protocol: TransportProtocol | None = None


@dataclass(frozen=True, kw_only=True)
class DisconnectServer:
    """Log out (best effort) and clear the stored session."""

    pass
