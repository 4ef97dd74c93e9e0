"""Pytest configuration shared by unit and integration tests.

Provides:
1. Test settings (no environment leakage)
2. Session and fake-sleep helpers
3. Marker registration and automatic asyncio marking
"""

import inspect

import pytest

from aria_automation.core.config import Settings, get_settings
from aria_automation.core.enums import CertificateTrustMode, Environment
from aria_automation.domain.entities.session import Session

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

TEST_SERVER = "vra.test"
TEST_BASE_URL = f"https://{TEST_SERVER}"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with explicit values, independent of ARIA_* variables."""
    return Settings(
        environment=Environment.TESTING,
        log_level="DEBUG",
        request_timeout_seconds=5.0,
        certificate_trust_mode=CertificateTrustMode.STRICT,
        default_domain="System Domain",
        poll_interval_seconds=5.0,
        wait_timeout_seconds=300.0,
        fail_fast_on_operation_failure=False,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def create_session(
    *,
    access_token: str = "access-token",
    refresh_token: str | None = "refresh-token",
    api_version: str | None = "2021-07-15",
) -> Session:
    """Helper to create a Session for testing."""
    return Session(
        server_base_url=TEST_BASE_URL,
        access_token=access_token,
        refresh_token=refresh_token,
        api_version=api_version,
    )


class FakeSleep:
    """Records requested sleeps instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    """Sleep replacement for poller tests."""
    return FakeSleep()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against a mocked HTTP transport"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
