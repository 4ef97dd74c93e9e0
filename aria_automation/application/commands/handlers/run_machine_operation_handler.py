"""RunMachineOperation command handler.

Flow:
    1. Read the session from the store (NotConnectedError if absent)
    2. Resolve machine names to ids, first to last
    3. Submit the action to each machine in order
    4. With wait=True, wait for each operation before the next submission

Each entry in the returned list is either the OperationAccepted response
(wait=False) or the wait outcome (wait=True), in submission order. A timed
out wait is an outcome, not an error.

Reference:
    - aria_automation/infrastructure/operations/operation_poller.py
"""

from aria_automation.application.commands.machine_commands import (
    RunMachineOperation,
)
from aria_automation.application.errors import ApplicationError, ApplicationErrorCode
from aria_automation.core.config import Settings
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.operation import (
    OperationAccepted,
    OperationOutcome,
)
from aria_automation.domain.protocols import (
    LoggerProtocol,
    MachineClientProtocol,
    SessionClientFactoryProtocol,
    SessionStoreProtocol,
)

type MachineOperationResult = OperationAccepted | OperationOutcome


class RunMachineOperationHandler:
    """Handler for RunMachineOperation command.

    Dependencies (injected via constructor):
        - SessionStoreProtocol: Source of the active session
        - SessionClientFactoryProtocol: Session-bound machine client and poller
        - LoggerProtocol: Structured logging
        - Settings: Default poll interval, timeout and fail-fast
    """

    def __init__(
        self,
        session_store: SessionStoreProtocol,
        client_factory: SessionClientFactoryProtocol,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._session_store = session_store
        self._client_factory = client_factory
        self._logger = logger
        self._settings = settings

    async def handle(
        self, cmd: RunMachineOperation
    ) -> Result[list[MachineOperationResult], ApplicationError]:
        """Handle RunMachineOperation command.

        Returns:
            Success(list): One entry per machine, in submission order.
            Failure(ApplicationError): Not connected, invalid command, name
                resolution failure, or transport failure. Submissions made
                before a failure are not rolled back.
        """
        validation = self._validate(cmd)
        if validation is not None:
            return Failure(error=validation)

        current = self._session_store.get()
        if isinstance(current, Failure):
            return Failure(error=ApplicationError.from_domain(current.error))
        session = current.value

        machines = self._client_factory.machines(session)
        ids_result = await self._resolve_ids(machines, cmd)
        if isinstance(ids_result, Failure):
            return ids_result
        machine_ids = ids_result.value

        poll_interval = cmd.poll_interval or self._settings.poll_interval_seconds
        timeout = (
            cmd.timeout if cmd.timeout is not None else self._settings.wait_timeout_seconds
        )
        fail_fast = (
            cmd.fail_fast
            if cmd.fail_fast is not None
            else self._settings.fail_fast_on_operation_failure
        )
        tracker = self._client_factory.operations(session) if cmd.wait else None

        results: list[MachineOperationResult] = []
        for machine_id in machine_ids:
            log = self._logger.bind(machine_id=machine_id, operation=cmd.operation.value)

            submitted = await machines.submit_operation(machine_id, cmd.operation)
            if isinstance(submitted, Failure):
                log.warning(
                    "machine_operation_submit_failed",
                    error_code=submitted.error.code.value,
                    submitted_count=len(results),
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        submitted.error,
                        details={"machine_id": machine_id, "submitted": len(results)},
                    )
                )
            accepted = submitted.value

            if tracker is None:
                results.append(accepted)
                continue

            outcome = await tracker.await_completion(
                accepted.id,
                poll_interval=poll_interval,
                timeout=timeout,
                fail_fast=fail_fast,
            )
            if isinstance(outcome, Failure):
                log.warning(
                    "machine_operation_wait_failed",
                    operation_id=accepted.id,
                    error_code=outcome.error.code.value,
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        outcome.error,
                        details={"machine_id": machine_id, "operation_id": accepted.id},
                    )
                )
            results.append(outcome.value)

        self._logger.info(
            "machine_operation_completed",
            operation=cmd.operation.value,
            machine_count=len(results),
            waited=cmd.wait,
        )
        return Success(value=results)

    def _validate(self, cmd: RunMachineOperation) -> ApplicationError | None:
        if not cmd.machine_ids and not cmd.machine_names:
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message="At least one machine id or name is required",
            )
        if cmd.poll_interval is not None and cmd.poll_interval <= 0:
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message="poll_interval must be greater than 0",
                details={"poll_interval": cmd.poll_interval},
            )
        if cmd.timeout is not None and cmd.timeout < 0:
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message="timeout must be >= 0",
                details={"timeout": cmd.timeout},
            )
        return None

    async def _resolve_ids(
        self, machines: MachineClientProtocol, cmd: RunMachineOperation
    ) -> Result[list[str], ApplicationError]:
        """Given ids first, then one id per name in order."""
        machine_ids = list(cmd.machine_ids)
        for name in cmd.machine_names:
            resolved = await machines.find_machine_id(name)
            if isinstance(resolved, Failure):
                self._logger.warning(
                    "machine_name_resolution_failed",
                    machine_name=name,
                    error_code=resolved.error.code.value,
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        resolved.error, details={"machine_name": name}
                    )
                )
            machine_ids.append(resolved.value)
        return Success(value=machine_ids)
