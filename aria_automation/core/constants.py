"""Centralized constants for fixed remote contracts and internal limits.

These values are NOT environment-specific configuration. Endpoint paths are
contracts with the remote control plane and are never configurable. For
environment-specific settings, use `aria_automation.core.config` instead.

Categories:
- Endpoints: Identity, IaaS login, about, machines, request tracker
- Login defaults: Domain asserted for unqualified usernames
- Timeouts and limits
"""

# =============================================================================
# Endpoints
# =============================================================================

API_TOKEN_LOGIN_PATH: str = "/iaas/login"
"""Pre-issued API token exchange."""

IDENTITY_LOGIN_PATH: str = "/csp/gateway/am/idp/auth/login?access_token"
"""Identity provider username/password login (returns refresh_token)."""

IAAS_LOGIN_PATH: str = "/iaas/api/login"
"""Mandatory second-stage refresh token → access token exchange."""

LOGOUT_PATH: str = "/csp/gateway/am/api/auth/logout"
"""Identity provider logout."""

ABOUT_PATH: str = "/iaas/api/about"
"""API version lookup."""

MACHINES_PATH: str = "/iaas/api/machines"
"""Machine collection."""

MACHINE_OPERATION_PATH: str = "/iaas/api/machines/{machine_id}/operations/{operation}"
"""Machine day-2 action submission."""

REQUEST_TRACKER_PATH: str = "/iaas/api/request-tracker/{operation_id}"
"""Operation status resource."""


# =============================================================================
# Login Defaults
# =============================================================================

DEFAULT_LOGIN_DOMAIN: str = "System Domain"
"""Domain asserted for usernames without an @ qualifier."""

UNSUPPORTED_DOMAIN_SEPARATOR: str = "\\"
"""DOMAIN\\user style qualifier, never accepted by the identity API."""

UPN_SEPARATOR: str = "@"


# =============================================================================
# Timeouts and Intervals
# =============================================================================

REQUEST_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for a single HTTP round trip in seconds."""

POLL_INTERVAL_DEFAULT: float = 5.0
"""Default seconds between operation status checks."""

WAIT_TIMEOUT_DEFAULT: float = 300.0
"""Default seconds to wait for an operation before reporting a timeout."""


# =============================================================================
# Prefixes and Limits
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body characters kept on errors and logs."""
