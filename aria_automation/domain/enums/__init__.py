"""Domain enums.

Available Enums:
    - OperationStatus: Request tracker status values
    - MachineOperation: Day-2 power actions on a machine
"""

from aria_automation.domain.enums.machine_operation import MachineOperation
from aria_automation.domain.enums.operation_status import OperationStatus

__all__ = ["MachineOperation", "OperationStatus"]
