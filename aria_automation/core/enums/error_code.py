"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances carried by Failure results.

Categories:
- Validation errors (INVALID_*, UNSUPPORTED_*)
- Authentication errors (AUTHENTICATION_*, NOT_CONNECTED)
- Resource errors (*_NOT_FOUND, *_AMBIGUOUS)
- Gateway errors (GATEWAY_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    UNSUPPORTED_USERNAME_FORMAT = "unsupported_username_format"

    # Authentication errors
    AUTHENTICATION_REJECTED = "authentication_rejected"
    NOT_CONNECTED = "not_connected"

    # Resource errors
    MACHINE_NOT_FOUND = "machine_not_found"
    MACHINE_NAME_AMBIGUOUS = "machine_name_ambiguous"

    # Gateway (transport) errors
    GATEWAY_REQUEST_REJECTED = "gateway_request_rejected"
    GATEWAY_RESOURCE_NOT_FOUND = "gateway_resource_not_found"
    GATEWAY_RATE_LIMITED = "gateway_rate_limited"
    GATEWAY_UNAVAILABLE = "gateway_unavailable"
    GATEWAY_INVALID_RESPONSE = "gateway_invalid_response"
