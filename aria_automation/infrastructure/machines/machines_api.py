"""Machines API client implementing MachineClientProtocol.

Endpoints:
    GET  /iaas/api/machines?$filter=name eq '<name>'&$select=id
    POST /iaas/api/machines/{id}/operations/{operation}

Submission is fire-and-forget: the accepted response carries the request
tracker id that OperationPoller waits on.
"""

from typing import Any

import structlog

from aria_automation.core.constants import MACHINE_OPERATION_PATH, MACHINES_PATH
from aria_automation.core.enums import ErrorCode
from aria_automation.core.errors import DomainError
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.operation import OperationAccepted
from aria_automation.domain.enums import MachineOperation
from aria_automation.domain.errors import (
    AmbiguousMachineNameError,
    GatewayError,
    GatewayInvalidResponseError,
    MachineNotFoundError,
)
from aria_automation.domain.protocols.http_gateway_protocol import (
    HttpGatewayProtocol,
)

logger = structlog.get_logger(__name__)


def name_filter(name: str) -> str:
    """OData exact-name filter; single quotes are doubled."""
    escaped = name.replace("'", "''")
    return f"name eq '{escaped}'"


class MachinesAPI:
    """Machine lookup and day-2 action submission.

    Example:
        >>> api = MachinesAPI(HttpxGateway.for_session(session))
        >>> match await api.find_machine_id("iaas01"):
        ...     case Success(value=machine_id):
        ...         accepted = await api.submit_operation(
        ...             machine_id, MachineOperation.RESET
        ...         )
    """

    def __init__(self, gateway: HttpGatewayProtocol) -> None:
        self._gateway = gateway

    async def find_machine_id(self, name: str) -> Result[str, DomainError]:
        """Resolve an exact machine name to its id.

        Returns:
            Success(id): Exactly one machine matched.
            Failure(MachineNotFoundError): No machine matched.
            Failure(AmbiguousMachineNameError): More than one machine matched.
            Failure(GatewayError): Transport failure.
        """
        result = await self._gateway.get(
            MACHINES_PATH,
            params={"$filter": name_filter(name), "$select": "id"},
        )
        if isinstance(result, Failure):
            return result

        content = result.value.body.get("content") or []
        machine_ids = tuple(
            item["id"] for item in content if isinstance(item, dict) and item.get("id")
        )

        if not machine_ids:
            logger.info("machine_not_found", machine_name=name)
            return Failure(
                error=MachineNotFoundError(
                    code=ErrorCode.MACHINE_NOT_FOUND,
                    message=f"No machine named '{name}'",
                    resource_id=name,
                )
            )

        if len(machine_ids) > 1:
            logger.warning(
                "machine_name_ambiguous",
                machine_name=name,
                match_count=len(machine_ids),
            )
            return Failure(
                error=AmbiguousMachineNameError(
                    code=ErrorCode.MACHINE_NAME_AMBIGUOUS,
                    message=f"{len(machine_ids)} machines are named '{name}'",
                    name=name,
                    machine_ids=machine_ids,
                )
            )

        logger.debug("machine_resolved", machine_name=name, machine_id=machine_ids[0])
        return Success(value=machine_ids[0])

    async def submit_operation(
        self, machine_id: str, operation: MachineOperation
    ) -> Result[OperationAccepted, GatewayError]:
        """Submit a day-2 action and return the accepted response unchanged."""
        path = MACHINE_OPERATION_PATH.format(
            machine_id=machine_id, operation=operation.value
        )
        result = await self._gateway.post(path, json_body={})
        if isinstance(result, Failure):
            return result

        body = result.value.body
        operation_id = body.get("id")
        if not operation_id:
            logger.error(
                "machine_operation_missing_id",
                machine_id=machine_id,
                operation=operation.value,
            )
            return Failure(
                error=GatewayInvalidResponseError(
                    code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                    message="Missing required field in operation response: id",
                    status_code=result.value.status_code,
                )
            )

        logger.info(
            "machine_operation_submitted",
            machine_id=machine_id,
            operation=operation.value,
            operation_id=operation_id,
        )
        return Success(value=self._to_accepted(body))

    async def get_resource(self, link: str) -> Result[dict[str, Any], GatewayError]:
        """GET a resource link (e.g. "/iaas/api/machines/abc123") as raw JSON."""
        result = await self._gateway.get(link)
        if isinstance(result, Failure):
            return result
        return Success(value=result.value.body)

    def _to_accepted(self, body: dict[str, Any]) -> OperationAccepted:
        progress = body.get("progress")
        return OperationAccepted(
            id=body["id"],
            name=body.get("name"),
            progress=progress if isinstance(progress, int) else None,
            status=body.get("status"),
            message=body.get("message"),
            resources=list(body.get("resources") or []),
        )
