"""Unit tests for the dependency container."""

import pytest

from aria_automation.application.commands.handlers import (
    ConnectServerHandler,
    DisconnectServerHandler,
    RunMachineOperationHandler,
)
from aria_automation.core import container
from aria_automation.infrastructure.auth import SessionNegotiator
from aria_automation.infrastructure.http import HttpxClientFactory
from aria_automation.infrastructure.logging import ConsoleAdapter
from aria_automation.infrastructure.session import InMemorySessionStore


@pytest.fixture(autouse=True)
def _clear_container_caches():
    """Reset app-scoped singletons around each test."""
    factories = (
        container.get_logger,
        container.get_session_store,
        container.get_session_negotiator,
        container.get_client_factory,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


@pytest.mark.unit
class TestSingletons:
    """App-scoped dependencies."""

    def test_session_store_is_shared(self):
        store = container.get_session_store()

        assert isinstance(store, InMemorySessionStore)
        assert container.get_session_store() is store

    def test_infrastructure_types(self):
        assert isinstance(container.get_logger(), ConsoleAdapter)
        assert isinstance(container.get_session_negotiator(), SessionNegotiator)
        assert isinstance(container.get_client_factory(), HttpxClientFactory)


@pytest.mark.unit
class TestHandlerFactories:
    """Handlers are wired to the shared store unless one is passed."""

    def test_handlers_share_default_store(self):
        connect = container.get_connect_server_handler()
        disconnect = container.get_disconnect_server_handler()
        run = container.get_run_machine_operation_handler()

        assert isinstance(connect, ConnectServerHandler)
        assert isinstance(disconnect, DisconnectServerHandler)
        assert isinstance(run, RunMachineOperationHandler)
        store = container.get_session_store()
        assert connect._session_store is store
        assert disconnect._session_store is store
        assert run._session_store is store

    def test_caller_owned_store(self):
        store = InMemorySessionStore()

        handler = container.get_run_machine_operation_handler(session_store=store)

        assert handler._session_store is store
