"""Operation poller implementing OperationTrackerProtocol.

Watches a submitted operation through the request tracker until it reaches
FINISHED or the soft deadline passes.

Loop:
    check status (elapsed = 0)
    FINISHED        → stop
    elapsed >= timeout → stop (timed out)
    sleep(poll_interval); elapsed += poll_interval; check again

Elapsed time is accumulated from the poll interval, not read from a clock,
so the wait may overrun the timeout by at most one interval. A timeout of 0
means exactly one status check and no sleep.

Cancellation:
    Run await_completion() in an asyncio task and cancel it; CancelledError
    is raised at the next await (sleep or HTTP call).
"""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from typing import Any

import structlog

from aria_automation.core.constants import REQUEST_TRACKER_PATH
from aria_automation.core.enums import ErrorCode
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.operation import (
    MachineRecord,
    OperationFailed,
    OperationFinished,
    OperationOutcome,
    OperationSnapshot,
    OperationTimedOut,
    OperationTimeoutReport,
)
from aria_automation.domain.errors import GatewayError, GatewayInvalidResponseError
from aria_automation.domain.protocols.http_gateway_protocol import (
    HttpGatewayProtocol,
)
from aria_automation.infrastructure.operations.mappers import MachineMapper

logger = structlog.get_logger(__name__)

SleepFunc = Callable[[float], Awaitable[Any]]


def _as_int(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _field(body: dict[str, Any], name: str) -> Any:
    """Look up a tracker field by name, ignoring key case."""
    if name in body:
        return body[name]
    lowered = name.lower()
    for key, value in body.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


class OperationPoller:
    """Request tracker poller bound to an authenticated gateway.

    Attributes:
        gateway: Session-bound HTTP gateway.
        mapper: Projects resource JSON to MachineRecord.
        sleep: Awaitable sleep (injectable for tests).

    Example:
        >>> poller = OperationPoller(HttpxGateway.for_session(session))
        >>> result = await poller.await_completion(
        ...     "op-1", poll_interval=5, timeout=300
        ... )
        >>> match result:
        ...     case Success(value=OperationFinished(resources=machines)):
        ...         print([m.name for m in machines])
        ...     case Success(value=OperationTimedOut(report=report)):
        ...         print(report.resume_hint)
    """

    def __init__(
        self,
        gateway: HttpGatewayProtocol,
        *,
        mapper: MachineMapper | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._gateway = gateway
        self._mapper = mapper or MachineMapper()
        self._sleep = sleep

    async def get_status(
        self, operation_id: str
    ) -> Result[OperationSnapshot, GatewayError]:
        """Single status check.

        Also the manual resume path after a timed-out wait.
        """
        return await self._check(operation_id, elapsed=0.0)

    async def watch(
        self,
        operation_id: str,
        *,
        poll_interval: float,
        timeout: float,
    ) -> AsyncIterator[Result[OperationSnapshot, GatewayError]]:
        """Yield one Result per status check.

        Stops after a FINISHED snapshot, after a Failure, or once the
        accumulated elapsed time reaches the timeout.

        Args:
            operation_id: Operation to watch.
            poll_interval: Seconds between checks.
            timeout: Soft deadline in seconds (0 = single check).
        """
        elapsed = 0.0
        while True:
            result = await self._check(operation_id, elapsed=elapsed)
            yield result

            if isinstance(result, Failure) or result.value.is_finished:
                return
            if elapsed >= timeout:
                return

            await self._sleep(poll_interval)
            elapsed += poll_interval

    async def await_completion(
        self,
        operation_id: str,
        *,
        poll_interval: float,
        timeout: float,
        fail_fast: bool = False,
    ) -> Result[OperationOutcome, GatewayError]:
        """Poll until FINISHED or the deadline, then resolve resources.

        Args:
            operation_id: Operation to wait for.
            poll_interval: Seconds between checks.
            timeout: Soft deadline in seconds.
            fail_fast: Stop on a FAILED status instead of waiting it out.

        Returns:
            Success(OperationFinished): Resources in declared order.
            Success(OperationTimedOut): Deadline passed; report has a resume hint.
            Success(OperationFailed): FAILED status with fail_fast=True.
            Failure(GatewayError): Transport failure (aborts the wait).
        """
        log = logger.bind(operation_id=operation_id)
        last: OperationSnapshot | None = None

        async with aclosing(
            self.watch(operation_id, poll_interval=poll_interval, timeout=timeout)
        ) as checks:
            async for result in checks:
                if isinstance(result, Failure):
                    log.warning(
                        "operation_poll_aborted",
                        error=result.error.message,
                        error_code=result.error.code.value,
                    )
                    return result

                last = result.value
                log.debug(
                    "operation_poll_status",
                    status=last.status,
                    progress=last.progress,
                    elapsed_seconds=last.elapsed_seconds,
                )

                if last.is_finished:
                    return await self._resolve_resources(last)

                if last.is_failed and fail_fast:
                    log.warning("operation_failed", message=last.message)
                    return Success(value=OperationFailed(snapshot=last))

        if last is None:
            raise RuntimeError(f"No status check was made for operation {operation_id}")
        log.info(
            "operation_wait_timed_out",
            status=last.status,
            elapsed_seconds=last.elapsed_seconds,
        )
        return Success(value=OperationTimedOut(report=self._timeout_report(last)))

    async def _check(
        self, operation_id: str, *, elapsed: float
    ) -> Result[OperationSnapshot, GatewayError]:
        path = REQUEST_TRACKER_PATH.format(operation_id=operation_id)
        result = await self._gateway.get(path)
        if isinstance(result, Failure):
            return result

        body = result.value.body
        return Success(
            value=OperationSnapshot(
                id=_field(body, "id") or operation_id,
                status=_field(body, "status"),
                name=_field(body, "name"),
                progress=_as_int(_field(body, "progress")),
                message=_field(body, "message"),
                resources=list(_field(body, "resources") or []),
                elapsed_seconds=elapsed,
            )
        )

    async def _resolve_resources(
        self, snapshot: OperationSnapshot
    ) -> Result[OperationOutcome, GatewayError]:
        """Fetch every resource link in order and project it."""
        records: list[MachineRecord] = []
        for link in snapshot.resources:
            result = await self._gateway.get(link)
            if isinstance(result, Failure):
                logger.warning(
                    "operation_resource_fetch_failed",
                    operation_id=snapshot.id,
                    link=link,
                    error=result.error.message,
                )
                return result

            record = self._mapper.map_machine(
                result.value.body,
                operation_id=snapshot.id,
                status=snapshot.status,
            )
            if record is None:
                logger.warning(
                    "operation_resource_unmappable",
                    operation_id=snapshot.id,
                    link=link,
                )
                return Failure(
                    error=GatewayInvalidResponseError(
                        code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                        message=f"Resource {link} could not be mapped to a machine",
                        status_code=result.value.status_code,
                    )
                )
            records.append(record)

        logger.info(
            "operation_finished",
            operation_id=snapshot.id,
            resource_count=len(records),
        )
        return Success(
            value=OperationFinished(operation_id=snapshot.id, resources=records)
        )

    def _timeout_report(self, snapshot: OperationSnapshot) -> OperationTimeoutReport:
        return OperationTimeoutReport(
            operation_id=snapshot.id,
            status=snapshot.status,
            name=snapshot.name,
            progress=snapshot.progress,
            message=snapshot.message,
            elapsed_seconds=snapshot.elapsed_seconds,
            resume_hint=(
                f"The operation may still complete. Check it again with "
                f"get_status('{snapshot.id}') or GET "
                f"{REQUEST_TRACKER_PATH.format(operation_id=snapshot.id)}."
            ),
        )
