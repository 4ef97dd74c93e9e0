"""ConnectServer command handler.

Negotiates a session and publishes it to the session store, replacing any
previous session. A failed negotiation leaves the store untouched.

Architecture:
    - Application layer handler (orchestrates negotiation + storage)
    - Depends only on domain protocols
    - Returns Result types wrapping domain errors in ApplicationError
"""

from aria_automation.application.commands.session_commands import ConnectServer
from aria_automation.application.errors import ApplicationError
from aria_automation.core.config import Settings
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.session import Session
from aria_automation.domain.errors import AuthRejectedError
from aria_automation.domain.protocols import (
    LoggerProtocol,
    SessionNegotiatorProtocol,
    SessionStoreProtocol,
)


class ConnectServerHandler:
    """Handler for ConnectServer command.

    Dependencies (injected via constructor):
        - SessionNegotiatorProtocol: Multi-scheme login
        - SessionStoreProtocol: Caller-owned session slot
        - LoggerProtocol: Structured logging
        - Settings: Default trust mode and TLS pin
    """

    def __init__(
        self,
        negotiator: SessionNegotiatorProtocol,
        session_store: SessionStoreProtocol,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._negotiator = negotiator
        self._session_store = session_store
        self._logger = logger
        self._settings = settings

    async def handle(self, cmd: ConnectServer) -> Result[Session, ApplicationError]:
        """Handle ConnectServer command.

        Returns:
            Success(Session): Session negotiated and stored.
            Failure(ApplicationError): Wraps the negotiation failure; for a
                rejected login the hint is copied into details.
        """
        trust_mode = cmd.certificate_trust_mode or self._settings.certificate_trust_mode
        protocol = cmd.transport_protocol or self._settings.transport_protocol

        result = await self._negotiator.negotiate(
            cmd.credential,
            cmd.server,
            certificate_trust_mode=trust_mode,
            transport_protocol=protocol,
        )

        match result:
            case Failure(error=error):
                details = (
                    {"hint": error.hint} if isinstance(error, AuthRejectedError) else None
                )
                self._logger.warning(
                    "server_connect_failed",
                    server=cmd.server,
                    error_code=error.code.value,
                )
                return Failure(error=ApplicationError.from_domain(error, details=details))
            case Success(value=session):
                self._session_store.set(session)
                self._logger.info(
                    "server_connected",
                    server=session.server_base_url,
                    api_version=session.api_version,
                )
                return Success(value=session)
