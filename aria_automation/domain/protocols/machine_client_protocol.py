"""Ports for machine actions and operation tracking.

MachineClientProtocol submits day-2 actions; OperationTrackerProtocol waits
for the resulting operation. SessionClientFactoryProtocol binds both to a
Session so application handlers never touch the transport.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from aria_automation.core.errors import DomainError
    from aria_automation.core.result import Result
    from aria_automation.domain.entities.operation import (
        OperationAccepted,
        OperationOutcome,
        OperationSnapshot,
    )
    from aria_automation.domain.entities.session import Session
    from aria_automation.domain.enums import MachineOperation
    from aria_automation.domain.errors import GatewayError


class MachineClientProtocol(Protocol):
    """Protocol for machine lookup and action submission."""

    async def find_machine_id(self, name: str) -> "Result[str, DomainError]":
        """Resolve an exact machine name to its id.

        Returns:
            Success(id), or Failure(MachineNotFoundError |
            AmbiguousMachineNameError | GatewayError).
        """
        ...

    async def submit_operation(
        self, machine_id: str, operation: "MachineOperation"
    ) -> "Result[OperationAccepted, GatewayError]":
        """Submit a fire-and-forget action and return the accepted response."""
        ...


class OperationTrackerProtocol(Protocol):
    """Protocol for operation status polling."""

    async def get_status(
        self, operation_id: str
    ) -> "Result[OperationSnapshot, GatewayError]":
        """Single status check (manual resume path)."""
        ...

    async def await_completion(
        self,
        operation_id: str,
        *,
        poll_interval: float,
        timeout: float,
        fail_fast: bool = False,
    ) -> "Result[OperationOutcome, GatewayError]":
        """Poll until finished or the soft deadline passes."""
        ...


class SessionClientFactoryProtocol(Protocol):
    """Protocol for building session-bound clients."""

    def machines(self, session: "Session") -> MachineClientProtocol:
        """Machine client authenticated with the session."""
        ...

    def operations(self, session: "Session") -> OperationTrackerProtocol:
        """Operation tracker authenticated with the session."""
        ...

    async def logout(self, session: "Session") -> "Result[None, GatewayError]":
        """Invalidate the session's token server-side."""
        ...
