"""Machine resource mapper.

Converts IaaS machine JSON (fetched from a finished operation's resource
links) to MachineRecord.

Machine Response Structure:
    {
        "id": "abc123",
        "name": "iaas01",
        "powerState": "ON",
        "address": "10.0.0.12",
        "externalRegionId": "Datacenter:datacenter-2",
        "externalId": "50123456-...",
        "cloudAccountIds": ["ca-1"],
        "orgId": "org-1",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T11:30:00.000Z",
        "customProperties": {"osType": "LINUX"}
    }
"""

from datetime import datetime
from typing import Any

import structlog

from aria_automation.domain.entities.operation import MachineRecord

logger = structlog.get_logger(__name__)


class MachineMapper:
    """Mapper for converting machine JSON to MachineRecord.

    Thread-safe: No mutable state, can be shared across pollers.

    Example:
        >>> mapper = MachineMapper()
        >>> record = mapper.map_machine(
        ...     {"id": "abc123", "name": "iaas01", "powerState": "ON"},
        ...     operation_id="op-1",
        ...     status="FINISHED",
        ... )
        >>> record.power_state
        'ON'
    """

    def map_machine(
        self,
        data: dict[str, Any],
        *,
        operation_id: str | None = None,
        status: str | None = None,
    ) -> MachineRecord | None:
        """Map single machine JSON to MachineRecord.

        Args:
            data: Machine object from the IaaS API.
            operation_id: Operation that produced the resource.
            status: Final operation status.

        Returns:
            MachineRecord if mapping succeeds, None if data is invalid or the
            id is missing.
        """
        try:
            return self._map_machine_internal(
                data, operation_id=operation_id, status=status
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "machine_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_machine_internal(
        self,
        data: dict[str, Any],
        *,
        operation_id: str | None,
        status: str | None,
    ) -> MachineRecord | None:
        machine_id = data.get("id")
        if not machine_id:
            logger.debug(
                "machine_missing_id",
                keys=list(data.keys()) if isinstance(data, dict) else None,
            )
            return None

        return MachineRecord(
            id=machine_id,
            name=data.get("name"),
            power_state=data.get("powerState"),
            address=data.get("address"),
            region_id=data.get("externalRegionId") or data.get("regionId"),
            cloud_account_ids=list(data.get("cloudAccountIds") or []),
            external_id=data.get("externalId"),
            created_at=self._parse_datetime(data.get("createdAt")),
            updated_at=self._parse_datetime(data.get("updatedAt")),
            organization_id=data.get("orgId") or data.get("organizationId"),
            custom_properties=dict(data.get("customProperties") or {}),
            operation_id=operation_id,
            status=status,
        )

    def _parse_datetime(self, value: Any) -> datetime | None:
        """Parse ISO 8601 timestamps ("Z" suffix included)."""
        if not value:
            return None
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            logger.debug("machine_unparseable_timestamp", value=str(value))
            return None
