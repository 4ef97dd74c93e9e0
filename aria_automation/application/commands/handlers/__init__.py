"""Command handlers."""

from aria_automation.application.commands.handlers.connect_server_handler import (
    ConnectServerHandler,
)
from aria_automation.application.commands.handlers.disconnect_server_handler import (
    DisconnectServerHandler,
)
from aria_automation.application.commands.handlers.run_machine_operation_handler import (
    MachineOperationResult,
    RunMachineOperationHandler,
)

__all__ = [
    "ConnectServerHandler",
    "DisconnectServerHandler",
    "MachineOperationResult",
    "RunMachineOperationHandler",
]
