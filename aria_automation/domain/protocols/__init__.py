"""Domain protocols (ports).

Implemented by the infrastructure layer; consumed by application handlers.
"""

from aria_automation.domain.protocols.http_gateway_protocol import (
    GatewayResponse,
    HttpGatewayProtocol,
)
from aria_automation.domain.protocols.logger_protocol import LoggerProtocol
from aria_automation.domain.protocols.machine_client_protocol import (
    MachineClientProtocol,
    OperationTrackerProtocol,
    SessionClientFactoryProtocol,
)
from aria_automation.domain.protocols.session_negotiator_protocol import (
    SessionNegotiatorProtocol,
)
from aria_automation.domain.protocols.session_store_protocol import (
    SessionStoreProtocol,
)

__all__ = [
    "GatewayResponse",
    "HttpGatewayProtocol",
    "LoggerProtocol",
    "MachineClientProtocol",
    "OperationTrackerProtocol",
    "SessionClientFactoryProtocol",
    "SessionNegotiatorProtocol",
    "SessionStoreProtocol",
]
