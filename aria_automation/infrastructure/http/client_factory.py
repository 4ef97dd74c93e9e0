"""Session-bound client factory implementing SessionClientFactoryProtocol.

Every client built here talks through an HttpxGateway authenticated with
the session's access token and TLS settings.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from aria_automation.core.config import Settings, get_settings
from aria_automation.core.constants import LOGOUT_PATH
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.session import Session
from aria_automation.domain.errors import GatewayError
from aria_automation.infrastructure.http.httpx_gateway import HttpxGateway
from aria_automation.infrastructure.machines.machines_api import MachinesAPI
from aria_automation.infrastructure.operations.operation_poller import (
    OperationPoller,
)

logger = structlog.get_logger(__name__)


class HttpxClientFactory:
    """Builds MachinesAPI and OperationPoller instances for a Session.

    Attributes:
        settings: Supplies the per-request timeout.
        sleep: Optional sleep override passed to pollers (tests).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._sleep = sleep

    def _gateway(self, session: Session) -> HttpxGateway:
        return HttpxGateway.for_session(
            session, timeout=self._settings.request_timeout_seconds
        )

    def machines(self, session: Session) -> MachinesAPI:
        """Machine client authenticated with the session."""
        return MachinesAPI(self._gateway(session))

    def operations(self, session: Session) -> OperationPoller:
        """Operation poller authenticated with the session."""
        if self._sleep is None:
            return OperationPoller(self._gateway(session))
        return OperationPoller(self._gateway(session), sleep=self._sleep)

    async def logout(self, session: Session) -> Result[None, GatewayError]:
        """Invalidate the session's token at the identity provider."""
        result = await self._gateway(session).post(
            LOGOUT_PATH, json_body={"idToken": session.access_token}
        )
        if isinstance(result, Failure):
            return result
        logger.debug("session_logged_out", server=session.server_base_url)
        return Success(value=None)
