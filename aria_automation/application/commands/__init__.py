"""Commands (write operations against the control plane)."""

from aria_automation.application.commands.machine_commands import (
    RunMachineOperation,
)
from aria_automation.application.commands.session_commands import (
    ConnectServer,
    DisconnectServer,
)

__all__ = ["ConnectServer", "DisconnectServer", "RunMachineOperation"]
