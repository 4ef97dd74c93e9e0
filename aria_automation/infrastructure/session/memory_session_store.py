"""In-memory implementation of SessionStoreProtocol.

Holds at most one Session for the lifetime of the owning object. Created
by the caller (or the app-scoped default in core.container) instead of a
module-level global, so independent callers can hold independent sessions.
"""

import structlog

from aria_automation.core.enums import ErrorCode
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.session import Session
from aria_automation.domain.errors import NotConnectedError

logger = structlog.get_logger(__name__)


class InMemorySessionStore:
    """Single-slot session holder.

    Example:
        >>> store = InMemorySessionStore()
        >>> store.set(session)
        >>> match store.get():
        ...     case Success(value=current):
        ...         print(current.server_base_url)
    """

    def __init__(self) -> None:
        self._session: Session | None = None

    def set(self, session: Session) -> None:
        """Replace the stored session (last writer wins)."""
        replaced = self._session is not None
        self._session = session
        logger.debug(
            "session_stored",
            server=session.server_base_url,
            replaced=replaced,
        )

    def get(self) -> Result[Session, NotConnectedError]:
        """Return the stored session or NotConnectedError."""
        if self._session is None:
            return Failure(
                error=NotConnectedError(
                    code=ErrorCode.NOT_CONNECTED,
                    message="Not connected to a server; connect first",
                )
            )
        return Success(value=self._session)

    def clear(self) -> None:
        """Drop the stored session."""
        if self._session is not None:
            logger.debug("session_cleared", server=self._session.server_base_url)
        self._session = None
