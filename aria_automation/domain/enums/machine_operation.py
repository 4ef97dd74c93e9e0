"""Machine day-2 actions accepted by the operations endpoint."""

from enum import Enum


class MachineOperation(str, Enum):
    """Power actions submitted to /iaas/api/machines/{id}/operations/{action}.

    Values are the literal path segments.
    """

    POWER_ON = "power-on"
    POWER_OFF = "power-off"
    REBOOT = "reboot"
    RESET = "reset"
    RESTART = "restart"
    SHUTDOWN = "shutdown"
    SUSPEND = "suspend"
