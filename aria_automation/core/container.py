"""Dependency factories (composition root).

Application-scoped singletons:
- Logger (console, JSON outside development)
- Session store (one active session per process)
- Session negotiator
- Session-bound client factory

Handler factories build a fresh handler per call wired to those singletons.
Callers that need independent sessions construct their own
InMemorySessionStore and pass it to the handler factories.

Usage:
    from aria_automation.core.container import get_connect_server_handler

    handler = get_connect_server_handler()
    result = await handler.handle(ConnectServer(server=..., credential=...))
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from aria_automation.core.config import get_settings

if TYPE_CHECKING:
    from aria_automation.application.commands.handlers import (
        ConnectServerHandler,
        DisconnectServerHandler,
        RunMachineOperationHandler,
    )
    from aria_automation.domain.protocols import (
        LoggerProtocol,
        SessionClientFactoryProtocol,
        SessionNegotiatorProtocol,
        SessionStoreProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from aria_automation.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.uses_json_logs, level=settings.log_level)


@lru_cache()
def get_session_store() -> "SessionStoreProtocol":
    """Return the app-scoped session store ("one active session")."""
    from aria_automation.infrastructure.session import InMemorySessionStore

    return InMemorySessionStore()


@lru_cache()
def get_session_negotiator() -> "SessionNegotiatorProtocol":
    """Return the session negotiator singleton."""
    from aria_automation.infrastructure.auth import SessionNegotiator

    return SessionNegotiator(settings=get_settings())


@lru_cache()
def get_client_factory() -> "SessionClientFactoryProtocol":
    """Return the session-bound client factory singleton."""
    from aria_automation.infrastructure.http import HttpxClientFactory

    return HttpxClientFactory(get_settings())


# ============================================================================
# Handler Factories (new instance per call)
# ============================================================================


def get_connect_server_handler(
    session_store: "SessionStoreProtocol | None" = None,
) -> "ConnectServerHandler":
    """Build a ConnectServerHandler."""
    from aria_automation.application.commands.handlers import ConnectServerHandler

    return ConnectServerHandler(
        negotiator=get_session_negotiator(),
        session_store=session_store or get_session_store(),
        logger=get_logger(),
        settings=get_settings(),
    )


def get_disconnect_server_handler(
    session_store: "SessionStoreProtocol | None" = None,
) -> "DisconnectServerHandler":
    """Build a DisconnectServerHandler."""
    from aria_automation.application.commands.handlers import DisconnectServerHandler

    return DisconnectServerHandler(
        session_store=session_store or get_session_store(),
        client_factory=get_client_factory(),
        logger=get_logger(),
    )


def get_run_machine_operation_handler(
    session_store: "SessionStoreProtocol | None" = None,
) -> "RunMachineOperationHandler":
    """Build a RunMachineOperationHandler."""
    from aria_automation.application.commands.handlers import (
        RunMachineOperationHandler,
    )

    return RunMachineOperationHandler(
        session_store=session_store or get_session_store(),
        client_factory=get_client_factory(),
        logger=get_logger(),
        settings=get_settings(),
    )
