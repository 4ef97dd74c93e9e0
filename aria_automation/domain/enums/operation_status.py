"""Request tracker status values.

State Machine:
    INPROGRESS → FINISHED
    INPROGRESS → FAILED

Only FINISHED is treated as terminal by default; FAILED keeps the poller
waiting until its deadline unless fail-fast is requested.
"""

from enum import Enum


class OperationStatus(str, Enum):
    """Status reported for a tracked operation."""

    INPROGRESS = "INPROGRESS"
    FINISHED = "FINISHED"
    FAILED = "FAILED"

    @classmethod
    def parse(cls, value: object) -> "OperationStatus | None":
        """Return the matching member, or None for unknown/missing values."""
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None
