"""Domain layer - Pure data and contracts.

Structure:
- entities/: Session and operation records
- value_objects/: Login credential variants (immutable)
- enums/: Operation statuses and machine actions
- errors/: Authentication, gateway and machine errors (Result payloads)
- protocols/: Ports implemented by the infrastructure layer

The domain layer has NO dependencies on httpx, structlog or pydantic.
"""
