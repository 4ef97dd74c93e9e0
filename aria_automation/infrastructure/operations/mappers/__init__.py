"""Mappers from IaaS API JSON to domain entities."""

from aria_automation.infrastructure.operations.mappers.machine_mapper import (
    MachineMapper,
)

__all__ = ["MachineMapper"]
