"""Logging adapters implementing LoggerProtocol."""

from aria_automation.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
