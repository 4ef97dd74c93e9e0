"""Domain errors package.

Usage:
    from aria_automation.domain.errors import AuthRejectedError, GatewayError
"""

from aria_automation.domain.errors.authentication_error import (
    AuthRejectedError,
    NotConnectedError,
    UnsupportedUsernameFormatError,
)
from aria_automation.domain.errors.gateway_error import (
    GatewayError,
    GatewayInvalidResponseError,
    GatewayNotFoundError,
    GatewayRateLimitError,
    GatewayRejectedError,
    GatewayUnavailableError,
)
from aria_automation.domain.errors.machine_error import (
    AmbiguousMachineNameError,
    MachineNotFoundError,
)

__all__ = [
    # Authentication
    "AuthRejectedError",
    "NotConnectedError",
    "UnsupportedUsernameFormatError",
    # Gateway (transport)
    "GatewayError",
    "GatewayInvalidResponseError",
    "GatewayNotFoundError",
    "GatewayRateLimitError",
    "GatewayRejectedError",
    "GatewayUnavailableError",
    # Machines
    "AmbiguousMachineNameError",
    "MachineNotFoundError",
]
