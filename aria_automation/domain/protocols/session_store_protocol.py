"""SessionStoreProtocol - single-slot holder of the active Session.

Last writer wins, no history, no field merging: set() replaces the whole
Session. Not safe for concurrent writers; negotiation is serialized by the
caller that owns the store.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from aria_automation.core.result import Result
    from aria_automation.domain.entities.session import Session
    from aria_automation.domain.errors import NotConnectedError


class SessionStoreProtocol(Protocol):
    """Protocol for the caller-owned session slot."""

    def set(self, session: "Session") -> None:
        """Replace the stored session (total, never fails)."""
        ...

    def get(self) -> "Result[Session, NotConnectedError]":
        """Return the stored session.

        Returns:
            Success(Session) when connected.
            Failure(NotConnectedError) when no session was stored.
        """
        ...

    def clear(self) -> None:
        """Drop the stored session (explicit disconnect)."""
        ...
