"""SessionNegotiatorProtocol - credentials in, Session out."""

from typing import TYPE_CHECKING, Protocol

from aria_automation.core.enums import CertificateTrustMode, TransportProtocol

if TYPE_CHECKING:
    from aria_automation.core.errors import DomainError
    from aria_automation.core.result import Result
    from aria_automation.domain.entities.session import Session
    from aria_automation.domain.value_objects import LoginCredential


class SessionNegotiatorProtocol(Protocol):
    """Protocol for the multi-scheme login negotiation."""

    async def negotiate(
        self,
        credential: "LoginCredential",
        server_host: str,
        *,
        certificate_trust_mode: CertificateTrustMode = CertificateTrustMode.STRICT,
        transport_protocol: TransportProtocol | None = None,
    ) -> "Result[Session, DomainError]":
        """Resolve credentials into a live Session.

        Returns:
            Success(Session): Both login stages and the version lookup succeeded.
            Failure(UnsupportedUsernameFormatError): DOMAIN\\user input.
            Failure(AuthRejectedError): Credentials rejected.
            Failure(GatewayError): Transport failure.
        """
        ...
