"""Operation entities: submitted actions, status snapshots and outcomes.

Lifecycle:
    OperationAccepted (submission response)
        → OperationSnapshot* (one per status check)
        → OperationFinished | OperationTimedOut  (| OperationFailed, opt-in)

When the caller does not wait, the OperationAccepted is the final answer and
is returned unchanged.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from aria_automation.domain.enums.operation_status import OperationStatus


@dataclass(frozen=True, kw_only=True)
class OperationAccepted:
    """Fields of an "operation accepted" response, unchanged.

    Attributes:
        id: Server-assigned operation (request tracker) id.
        name: Operation display name (e.g. "Reset").
        progress: Percentage reported at submission.
        status: Status string at submission (usually INPROGRESS).
        message: Server message.
        resources: Resource links declared so far.
    """

    id: str
    name: str | None = None
    progress: int | None = None
    status: str | None = None
    message: str | None = None
    resources: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class OperationSnapshot:
    """One status check of a tracked operation.

    Attributes:
        id: Operation id.
        status: Raw status string from the request tracker.
        resources: Resource links, populated once FINISHED.
        elapsed_seconds: Accumulated wait before this check.
    """

    id: str
    status: str | None
    name: str | None = None
    progress: int | None = None
    message: str | None = None
    resources: list[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def is_finished(self) -> bool:
        """Terminal success: resources are resolvable."""
        return OperationStatus.parse(self.status) is OperationStatus.FINISHED

    @property
    def is_failed(self) -> bool:
        """Remote-reported failure."""
        return OperationStatus.parse(self.status) is OperationStatus.FAILED


@dataclass(frozen=True, kw_only=True)
class MachineRecord:
    """Normalized machine resource resolved from a finished operation."""

    id: str
    name: str | None
    power_state: str | None = None
    address: str | None = None
    region_id: str | None = None
    cloud_account_ids: list[str] = field(default_factory=list)
    external_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    organization_id: str | None = None
    custom_properties: dict[str, Any] = field(default_factory=dict)
    operation_id: str | None = None
    status: str | None = None


@dataclass(frozen=True, kw_only=True)
class OperationTimeoutReport:
    """Last known progress of an operation that outlived the wait.

    The operation may still complete server-side; resume_hint tells the
    caller how to keep checking.
    """

    operation_id: str
    status: str | None
    name: str | None = None
    progress: int | None = None
    message: str | None = None
    elapsed_seconds: float = 0.0
    resume_hint: str = ""


@dataclass(frozen=True, kw_only=True)
class OperationFinished:
    """Terminal success with resources in declared order."""

    operation_id: str
    resources: list[MachineRecord]


@dataclass(frozen=True, kw_only=True)
class OperationTimedOut:
    """Deadline reached before terminal success."""

    report: OperationTimeoutReport


@dataclass(frozen=True, kw_only=True)
class OperationFailed:
    """Remote-reported FAILED status (only produced with fail-fast)."""

    snapshot: OperationSnapshot


type OperationOutcome = OperationFinished | OperationTimedOut | OperationFailed
