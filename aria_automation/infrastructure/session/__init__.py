"""Session storage implementations."""

from aria_automation.infrastructure.session.memory_session_store import (
    InMemorySessionStore,
)

__all__ = ["InMemorySessionStore"]
