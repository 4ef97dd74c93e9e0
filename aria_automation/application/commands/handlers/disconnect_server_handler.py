"""DisconnectServer command handler.

Logout is best effort: a failed logout is logged and the stored session is
cleared anyway.
"""

from aria_automation.application.commands.session_commands import DisconnectServer
from aria_automation.application.errors import ApplicationError
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.protocols import (
    LoggerProtocol,
    SessionClientFactoryProtocol,
    SessionStoreProtocol,
)


class DisconnectServerHandler:
    """Handler for DisconnectServer command."""

    def __init__(
        self,
        session_store: SessionStoreProtocol,
        client_factory: SessionClientFactoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._session_store = session_store
        self._client_factory = client_factory
        self._logger = logger

    async def handle(self, cmd: DisconnectServer) -> Result[None, ApplicationError]:
        """Handle DisconnectServer command.

        Returns:
            Success(None) always; disconnecting while not connected is a no-op.
        """
        current = self._session_store.get()
        if isinstance(current, Failure):
            self._logger.debug("server_disconnect_not_connected")
            return Success(value=None)

        session = current.value
        logout = await self._client_factory.logout(session)
        if isinstance(logout, Failure):
            self._logger.warning(
                "server_logout_failed",
                server=session.server_base_url,
                error_code=logout.error.code.value,
            )

        self._session_store.clear()
        self._logger.info("server_disconnected", server=session.server_base_url)
        return Success(value=None)
