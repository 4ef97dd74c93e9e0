"""Machine lookup and action submission."""

from aria_automation.infrastructure.machines.machines_api import MachinesAPI

__all__ = ["MachinesAPI"]
