"""Login negotiation against the control plane identity endpoints."""

from aria_automation.infrastructure.auth.login_payloads import (
    LoginPayloads,
    build_login_payloads,
)
from aria_automation.infrastructure.auth.session_negotiator import (
    SessionNegotiator,
    rejection_hint,
)

__all__ = [
    "LoginPayloads",
    "SessionNegotiator",
    "build_login_payloads",
    "rejection_hint",
]
