"""HTTP transport to the control plane."""

from aria_automation.infrastructure.http.client_factory import HttpxClientFactory
from aria_automation.infrastructure.http.httpx_gateway import (
    HttpxGateway,
    build_ssl_verify,
    server_base_url,
)

__all__ = [
    "HttpxClientFactory",
    "HttpxGateway",
    "build_ssl_verify",
    "server_base_url",
]
