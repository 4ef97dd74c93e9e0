"""Unit tests for ConnectServerHandler and DisconnectServerHandler.

Uses mocked negotiator, client factory and logger; real in-memory store.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from aria_automation.application.commands import ConnectServer, DisconnectServer
from aria_automation.application.commands.handlers import (
    ConnectServerHandler,
    DisconnectServerHandler,
)
from aria_automation.application.errors import ApplicationErrorCode
from aria_automation.core.config import Settings
from aria_automation.core.enums import CertificateTrustMode, ErrorCode
from aria_automation.core.result import Failure, Success
from aria_automation.domain.errors import AuthRejectedError, GatewayUnavailableError
from aria_automation.domain.protocols import (
    SessionClientFactoryProtocol,
    SessionNegotiatorProtocol,
)
from aria_automation.domain.value_objects import (
    ApiTokenCredential,
    UsernamePasswordCredential,
)
from aria_automation.infrastructure.session import InMemorySessionStore
from tests.conftest import TEST_SERVER, create_session


# =============================================================================
# Test Fixtures
# =============================================================================


def create_connect_handler(
    settings: Settings,
    negotiator: AsyncMock | None = None,
    store: InMemorySessionStore | None = None,
) -> tuple[ConnectServerHandler, AsyncMock, InMemorySessionStore]:
    """Create handler with mocked negotiator."""
    negotiator = negotiator or AsyncMock(spec=SessionNegotiatorProtocol)
    store = store or InMemorySessionStore()
    handler = ConnectServerHandler(
        negotiator=negotiator,
        session_store=store,
        logger=MagicMock(),
        settings=settings,
    )
    return handler, negotiator, store


def create_disconnect_handler(
    store: InMemorySessionStore,
) -> tuple[DisconnectServerHandler, AsyncMock]:
    """Create handler with mocked client factory."""
    factory = AsyncMock(spec=SessionClientFactoryProtocol)
    handler = DisconnectServerHandler(
        session_store=store,
        client_factory=factory,
        logger=MagicMock(),
    )
    return handler, factory


# =============================================================================
# Test: ConnectServerHandler
# =============================================================================


class TestConnectServerHandler:
    """Negotiate then publish."""

    @pytest.mark.asyncio
    async def test_success_stores_session(self, test_settings: Settings):
        """Negotiated session becomes the stored session."""
        session = create_session()
        handler, negotiator, store = create_connect_handler(test_settings)
        negotiator.negotiate.return_value = Success(value=session)

        result = await handler.handle(
            ConnectServer(server=TEST_SERVER, credential=ApiTokenCredential(token="T1"))
        )

        assert isinstance(result, Success)
        assert result.value is session
        stored = store.get()
        assert isinstance(stored, Success)
        assert stored.value is session

    @pytest.mark.asyncio
    async def test_replaces_previous_session(self, test_settings: Settings):
        """A second connect replaces the first session."""
        store = InMemorySessionStore()
        store.set(create_session(access_token="old"))
        handler, negotiator, _ = create_connect_handler(test_settings, store=store)
        negotiator.negotiate.return_value = Success(value=create_session(access_token="new"))

        await handler.handle(
            ConnectServer(server=TEST_SERVER, credential=ApiTokenCredential(token="T1"))
        )

        stored = store.get()
        assert isinstance(stored, Success)
        assert stored.value.access_token == "new"

    @pytest.mark.asyncio
    async def test_uses_configured_trust_mode_by_default(self, test_settings: Settings):
        """Command without overrides falls back to settings."""
        handler, negotiator, _ = create_connect_handler(test_settings)
        negotiator.negotiate.return_value = Success(value=create_session())
        credential = ApiTokenCredential(token="T1")

        await handler.handle(ConnectServer(server=TEST_SERVER, credential=credential))

        negotiator.negotiate.assert_awaited_once_with(
            credential,
            TEST_SERVER,
            certificate_trust_mode=CertificateTrustMode.STRICT,
            transport_protocol=None,
        )

    @pytest.mark.asyncio
    async def test_command_overrides_trust_mode(self, test_settings: Settings):
        """Explicit trust mode on the command wins."""
        handler, negotiator, _ = create_connect_handler(test_settings)
        negotiator.negotiate.return_value = Success(value=create_session())

        await handler.handle(
            ConnectServer(
                server=TEST_SERVER,
                credential=ApiTokenCredential(token="T1"),
                certificate_trust_mode=CertificateTrustMode.PERMISSIVE,
            )
        )

        kwargs = negotiator.negotiate.await_args.kwargs
        assert kwargs["certificate_trust_mode"] == CertificateTrustMode.PERMISSIVE

    @pytest.mark.asyncio
    async def test_rejection_keeps_store_and_exposes_hint(self, test_settings: Settings):
        """Failed negotiation never touches the store."""
        handler, negotiator, store = create_connect_handler(test_settings)
        negotiator.negotiate.return_value = Failure(
            error=AuthRejectedError(
                code=ErrorCode.AUTHENTICATION_REJECTED,
                message="Login rejected",
                hint="add @domain",
            )
        )

        result = await handler.handle(
            ConnectServer(
                server=TEST_SERVER,
                credential=UsernamePasswordCredential(username="jo", password="pw"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.details == {"hint": "add @domain"}
        assert isinstance(store.get(), Failure)


# =============================================================================
# Test: DisconnectServerHandler
# =============================================================================


class TestDisconnectServerHandler:
    """Best-effort logout, unconditional clear."""

    @pytest.mark.asyncio
    async def test_logs_out_and_clears(self):
        store = InMemorySessionStore()
        session = create_session()
        store.set(session)
        handler, factory = create_disconnect_handler(store)
        factory.logout.return_value = Success(value=None)

        result = await handler.handle(DisconnectServer())

        assert isinstance(result, Success)
        factory.logout.assert_awaited_once_with(session)
        assert isinstance(store.get(), Failure)

    @pytest.mark.asyncio
    async def test_clears_even_when_logout_fails(self):
        store = InMemorySessionStore()
        store.set(create_session())
        handler, factory = create_disconnect_handler(store)
        factory.logout.return_value = Failure(
            error=GatewayUnavailableError(
                code=ErrorCode.GATEWAY_UNAVAILABLE, message="down"
            )
        )

        result = await handler.handle(DisconnectServer())

        assert isinstance(result, Success)
        assert isinstance(store.get(), Failure)

    @pytest.mark.asyncio
    async def test_not_connected_is_noop(self):
        store = InMemorySessionStore()
        handler, factory = create_disconnect_handler(store)

        result = await handler.handle(DisconnectServer())

        assert isinstance(result, Success)
        factory.logout.assert_not_awaited()
