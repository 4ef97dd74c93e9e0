"""Machine commands."""

from dataclasses import dataclass, field

from aria_automation.domain.enums import MachineOperation


@dataclass(frozen=True, kw_only=True)
class RunMachineOperation:
    """Run a day-2 action on one or more machines.

    Machines are addressed by id, by exact name, or both; ids are taken as
    given and names are resolved first-to-last. Submissions run in that
    order, one at a time.

    Attributes:
        operation: Action to submit.
        machine_ids: Machine ids, used as given.
        machine_names: Exact machine names, resolved to one id each.
        wait: Wait for each operation before submitting the next.
        poll_interval: Seconds between status checks (None = configured).
        timeout: Soft deadline per operation (None = configured).
        fail_fast: Stop waiting on FAILED (None = configured).

    Example:
        >>> command = RunMachineOperation(
        ...     operation=MachineOperation.RESET,
        ...     machine_names=["iaas01"],
        ...     wait=True,
        ... )
    """

    operation: MachineOperation
    machine_ids: list[str] = field(default_factory=list)
    machine_names: list[str] = field(default_factory=list)
    wait: bool = False
    poll_interval: float | None = None
    timeout: float | None = None
    fail_fast: bool | None = None
