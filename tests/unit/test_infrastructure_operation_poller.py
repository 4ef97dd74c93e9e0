"""Unit tests for OperationPoller.

Tests cover:
- Single status checks (get_status) and snapshot parsing
- watch() stop conditions and elapsed accounting
- await_completion(): finished, timed out, FAILED (default and fail-fast)
- Transport failures mid-poll and during resource resolution
- Cancellation of a running wait

Architecture:
- Scripted gateway (no HTTP) and injected fake sleep
- Integer intervals so elapsed arithmetic is exact
"""

import asyncio
from typing import Any

import pytest

from aria_automation.core.enums import ErrorCode
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.operation import (
    OperationFailed,
    OperationFinished,
    OperationTimedOut,
)
from aria_automation.domain.errors import (
    GatewayError,
    GatewayInvalidResponseError,
    GatewayUnavailableError,
)
from aria_automation.domain.protocols import GatewayResponse
from aria_automation.infrastructure.operations import OperationPoller
from tests.conftest import TEST_BASE_URL, FakeSleep

TRACKER = "/iaas/api/request-tracker/op-1"


# =============================================================================
# Test Fixtures
# =============================================================================


class ScriptedGateway:
    """Returns queued results per path and records every GET."""

    base_url = TEST_BASE_URL

    def __init__(self, script: dict[str, list[Result[GatewayResponse, GatewayError]]]):
        self._script = {path: list(results) for path, results in script.items()}
        self.requests: list[str] = []

    async def get(self, path: str, *, params=None, headers=None):
        self.requests.append(path)
        return self._script[path].pop(0)

    async def post(self, path: str, *, json_body, headers=None):
        raise AssertionError(f"unexpected POST {path}")


def _ok(body: dict[str, Any]) -> Success[GatewayResponse]:
    return Success(value=GatewayResponse(status_code=200, body=body))


def _status(status: str, **extra: Any) -> Success[GatewayResponse]:
    body = {"id": "op-1", "name": "Reset", "progress": 50, "status": status}
    body.update(extra)
    return _ok(body)


def _unavailable() -> Failure[GatewayError]:
    return Failure(
        error=GatewayUnavailableError(
            code=ErrorCode.GATEWAY_UNAVAILABLE,
            message="Server error: 503",
            status_code=503,
        )
    )


# =============================================================================
# Test: get_status / watch
# =============================================================================


class TestGetStatus:
    """Single status check."""

    @pytest.mark.asyncio
    async def test_parses_tracker_response(self, fake_sleep: FakeSleep):
        """Snapshot carries the tracker fields."""
        gateway = ScriptedGateway(
            {
                TRACKER: [
                    _status(
                        "INPROGRESS",
                        progress="40",
                        message="Resetting",
                        resources=["/iaas/api/machines/abc123"],
                    )
                ]
            }
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.get_status("op-1")

        assert isinstance(result, Success)
        snapshot = result.value
        assert snapshot.id == "op-1"
        assert snapshot.status == "INPROGRESS"
        assert snapshot.progress == 40
        assert snapshot.message == "Resetting"
        assert snapshot.resources == ["/iaas/api/machines/abc123"]
        assert snapshot.is_finished is False
        assert gateway.requests == [TRACKER]

    @pytest.mark.asyncio
    async def test_returns_transport_failure(self, fake_sleep: FakeSleep):
        """Gateway failure is returned unchanged."""
        poller = OperationPoller(
            ScriptedGateway({TRACKER: [_unavailable()]}), sleep=fake_sleep
        )

        result = await poller.get_status("op-1")

        assert isinstance(result, Failure)
        assert isinstance(result.error, GatewayUnavailableError)

    @pytest.mark.asyncio
    async def test_reads_capitalized_field_names(self, fake_sleep: FakeSleep):
        """Status and Resources keys are matched regardless of case."""
        gateway = ScriptedGateway(
            {
                TRACKER: [
                    _ok(
                        {
                            "Status": "FINISHED",
                            "Resources": ["/iaas/api/machines/m1"],
                        }
                    )
                ]
            }
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.get_status("op-1")

        assert isinstance(result, Success)
        assert result.value.id == "op-1"
        assert result.value.is_finished is True
        assert result.value.resources == ["/iaas/api/machines/m1"]


class TestWatch:
    """Lazy sequence of status checks."""

    @pytest.mark.asyncio
    async def test_yields_each_check_with_elapsed(self, fake_sleep: FakeSleep):
        """Elapsed grows by the interval per sleep; stops at FINISHED."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("INPROGRESS"), _status("INPROGRESS"), _status("FINISHED")]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        snapshots = [
            result.value
            async for result in poller.watch("op-1", poll_interval=5, timeout=300)
        ]

        assert [s.status for s in snapshots] == ["INPROGRESS", "INPROGRESS", "FINISHED"]
        assert [s.elapsed_seconds for s in snapshots] == [0, 5, 10]
        assert fake_sleep.calls == [5, 5]

    @pytest.mark.asyncio
    async def test_zero_timeout_checks_once(self, fake_sleep: FakeSleep):
        """timeout=0 → exactly one check, never sleeps."""
        gateway = ScriptedGateway({TRACKER: [_status("INPROGRESS")]})
        poller = OperationPoller(gateway, sleep=fake_sleep)

        results = [r async for r in poller.watch("op-1", poll_interval=5, timeout=0)]

        assert len(results) == 1
        assert fake_sleep.calls == []


# =============================================================================
# Test: await_completion
# =============================================================================


class TestAwaitCompletionFinished:
    """Terminal success and resource resolution."""

    @pytest.mark.asyncio
    async def test_finished_on_first_check_resolves_resources_in_order(
        self, fake_sleep: FakeSleep
    ):
        """FINISHED → one GET per resource link, in declared order."""
        links = ["/iaas/api/machines/m2", "/iaas/api/machines/m1"]
        gateway = ScriptedGateway(
            {
                TRACKER: [_status("FINISHED", resources=links)],
                links[0]: [_ok({"id": "m2", "name": "web02", "powerState": "ON"})],
                links[1]: [_ok({"id": "m1", "name": "web01", "powerState": "OFF"})],
            }
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=300)

        assert isinstance(result, Success)
        outcome = result.value
        assert isinstance(outcome, OperationFinished)
        assert outcome.operation_id == "op-1"
        assert [m.id for m in outcome.resources] == ["m2", "m1"]
        assert outcome.resources[0].power_state == "ON"
        assert outcome.resources[0].operation_id == "op-1"
        assert outcome.resources[0].status == "FINISHED"
        assert gateway.requests == [TRACKER, *links]
        assert fake_sleep.calls == []

    @pytest.mark.asyncio
    async def test_finished_after_polling(self, fake_sleep: FakeSleep):
        """INPROGRESS twice, then FINISHED without resources."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("INPROGRESS"), _status("INPROGRESS"), _status("FINISHED")]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=2, timeout=60)

        assert isinstance(result, Success)
        assert isinstance(result.value, OperationFinished)
        assert result.value.resources == []
        assert fake_sleep.calls == [2, 2]

    @pytest.mark.asyncio
    async def test_resource_fetch_failure_aborts(self, fake_sleep: FakeSleep):
        """A failed resource GET is returned as Failure."""
        link = "/iaas/api/machines/m1"
        gateway = ScriptedGateway(
            {TRACKER: [_status("FINISHED", resources=[link])], link: [_unavailable()]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=300)

        assert isinstance(result, Failure)
        assert isinstance(result.error, GatewayUnavailableError)

    @pytest.mark.asyncio
    async def test_unmappable_resource_fails_instead_of_dropping(
        self, fake_sleep: FakeSleep
    ):
        """Second resource body has no id → Failure naming the link."""
        gateway = ScriptedGateway(
            {
                TRACKER: [_status("FINISHED", resources=["/a", "/b"])],
                "/a": [_ok({"id": "m1", "name": "web01"})],
                "/b": [_ok({"name": "no-id"})],
            }
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=300)

        assert isinstance(result, Failure)
        assert isinstance(result.error, GatewayInvalidResponseError)
        assert result.error.code == ErrorCode.GATEWAY_INVALID_RESPONSE
        assert "/b" in result.error.message
        assert gateway.requests == [TRACKER, "/a", "/b"]

    @pytest.mark.asyncio
    async def test_capitalized_tracker_shape_finishes(self, fake_sleep: FakeSleep):
        """{Status, Resources} response is recognised as finished."""
        link = "/iaas/api/machines/m1"
        gateway = ScriptedGateway(
            {
                TRACKER: [_ok({"Status": "FINISHED", "Resources": [link]})],
                link: [_ok({"id": "m1", "name": "web01"})],
            }
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=0)

        assert isinstance(result, Success)
        assert isinstance(result.value, OperationFinished)
        assert [m.id for m in result.value.resources] == ["m1"]


class TestAwaitCompletionTimeout:
    """Soft deadline handling."""

    @pytest.mark.asyncio
    async def test_zero_timeout_reports_after_single_check(self, fake_sleep: FakeSleep):
        """timeout=0 and not finished → timeout report, no sleep."""
        gateway = ScriptedGateway({TRACKER: [_status("INPROGRESS")]})
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=0)

        assert isinstance(result, Success)
        outcome = result.value
        assert isinstance(outcome, OperationTimedOut)
        assert outcome.report.operation_id == "op-1"
        assert outcome.report.status == "INPROGRESS"
        assert outcome.report.progress == 50
        assert outcome.report.elapsed_seconds == 0
        assert "op-1" in outcome.report.resume_hint
        assert gateway.requests == [TRACKER]
        assert fake_sleep.calls == []

    @pytest.mark.asyncio
    async def test_deadline_overrun_is_at_most_one_interval(
        self, fake_sleep: FakeSleep
    ):
        """timeout=10, interval=5 → checks at 0, 5 and 10."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("INPROGRESS") for _ in range(3)]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=10)

        assert isinstance(result, Success)
        assert isinstance(result.value, OperationTimedOut)
        assert result.value.report.elapsed_seconds == 10
        assert len(gateway.requests) == 3
        assert fake_sleep.calls == [5, 5]

    @pytest.mark.asyncio
    async def test_uneven_interval_overruns_timeout(self, fake_sleep: FakeSleep):
        """timeout=7, interval=5 → last check at elapsed 10."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("INPROGRESS") for _ in range(3)]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=7)

        assert isinstance(result, Success)
        assert isinstance(result.value, OperationTimedOut)
        assert result.value.report.elapsed_seconds == 10


class TestAwaitCompletionFailedStatus:
    """Remote FAILED status."""

    @pytest.mark.asyncio
    async def test_failed_keeps_polling_by_default(self, fake_sleep: FakeSleep):
        """FAILED is not terminal unless fail_fast is set."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("FAILED"), _status("FAILED"), _status("FAILED")]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=10)

        assert isinstance(result, Success)
        assert isinstance(result.value, OperationTimedOut)
        assert result.value.report.status == "FAILED"
        assert len(gateway.requests) == 3

    @pytest.mark.asyncio
    async def test_fail_fast_stops_on_failed(self, fake_sleep: FakeSleep):
        """fail_fast=True → OperationFailed after the first FAILED check."""
        gateway = ScriptedGateway(
            {TRACKER: [_status("INPROGRESS"), _status("FAILED", message="boom")]}
        )
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion(
            "op-1", poll_interval=5, timeout=300, fail_fast=True
        )

        assert isinstance(result, Success)
        outcome = result.value
        assert isinstance(outcome, OperationFailed)
        assert outcome.snapshot.message == "boom"
        assert outcome.snapshot.elapsed_seconds == 5
        assert fake_sleep.calls == [5]


class TestAwaitCompletionTransportFailure:
    """Transport failures abort the wait."""

    @pytest.mark.asyncio
    async def test_mid_poll_failure_is_returned(self, fake_sleep: FakeSleep):
        """Failure on the second check stops polling immediately."""
        gateway = ScriptedGateway({TRACKER: [_status("INPROGRESS"), _unavailable()]})
        poller = OperationPoller(gateway, sleep=fake_sleep)

        result = await poller.await_completion("op-1", poll_interval=5, timeout=300)

        assert isinstance(result, Failure)
        assert isinstance(result.error, GatewayUnavailableError)
        assert len(gateway.requests) == 2
        assert fake_sleep.calls == [5]


class TestCancellation:
    """Cancelling a running wait."""

    @pytest.mark.asyncio
    async def test_cancel_during_sleep_raises_cancelled(self):
        """Task cancellation propagates out of the sleep."""
        sleeping = asyncio.Event()

        async def blocking_sleep(seconds: float) -> None:
            sleeping.set()
            await asyncio.Event().wait()

        gateway = ScriptedGateway({TRACKER: [_status("INPROGRESS")]})
        poller = OperationPoller(gateway, sleep=blocking_sleep)

        task = asyncio.create_task(
            poller.await_completion("op-1", poll_interval=5, timeout=300)
        )
        await sleeping.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert gateway.requests == [TRACKER]


class TestAwaitCompletionWithoutChecks:
    """watch() producing nothing is an error, not a timeout."""

    @pytest.mark.asyncio
    async def test_raises_when_no_check_was_made(self, fake_sleep: FakeSleep):
        class SilentPoller(OperationPoller):
            async def watch(self, operation_id, *, poll_interval, timeout):
                return
                yield

        poller = SilentPoller(ScriptedGateway({}), sleep=fake_sleep)

        with pytest.raises(RuntimeError, match="op-1"):
            await poller.await_completion("op-1", poll_interval=5, timeout=0)
