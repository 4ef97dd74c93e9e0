"""Domain entities."""

from aria_automation.domain.entities.operation import (
    MachineRecord,
    OperationAccepted,
    OperationFailed,
    OperationFinished,
    OperationOutcome,
    OperationSnapshot,
    OperationTimedOut,
    OperationTimeoutReport,
)
from aria_automation.domain.entities.session import Session

__all__ = [
    "MachineRecord",
    "OperationAccepted",
    "OperationFailed",
    "OperationFinished",
    "OperationOutcome",
    "OperationSnapshot",
    "OperationTimedOut",
    "OperationTimeoutReport",
    "Session",
]
