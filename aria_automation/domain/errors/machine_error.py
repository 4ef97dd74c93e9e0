"""Machine lookup errors for name-to-id resolution."""

from dataclasses import dataclass

from aria_automation.core.errors import ConflictError, NotFoundError


@dataclass(frozen=True, slots=True, kw_only=True)
class MachineNotFoundError(NotFoundError):
    """Exact-name filter returned no machine."""

    resource_type: str = "Machine"


@dataclass(frozen=True, slots=True, kw_only=True)
class AmbiguousMachineNameError(ConflictError):
    """Exact-name filter returned more than one machine.

    Attributes:
        name: Name that was looked up.
        machine_ids: Ids of every match.
    """

    resource_type: str = "Machine"
    conflicting_field: str | None = "name"
    name: str = ""
    machine_ids: tuple[str, ...] = ()
