"""Operation tracking."""

from aria_automation.infrastructure.operations.operation_poller import (
    OperationPoller,
)

__all__ = ["OperationPoller"]
