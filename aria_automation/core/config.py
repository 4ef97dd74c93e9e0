"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables with the
``ARIA_`` prefix (e.g. ``ARIA_POLL_INTERVAL_SECONDS=10``).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Fixed remote contracts live in core/constants.py, not here

Usage:
    from aria_automation.core.config import get_settings

    settings = get_settings()
    timeout = settings.wait_timeout_seconds
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aria_automation.core.constants import (
    DEFAULT_LOGIN_DOMAIN,
    POLL_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
    WAIT_TIMEOUT_DEFAULT,
)
from aria_automation.core.enums import (
    CertificateTrustMode,
    Environment,
    TransportProtocol,
)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (ARIA_*)
        3. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Transport
    request_timeout_seconds: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        description="Timeout for a single HTTP round trip in seconds",
    )
    certificate_trust_mode: CertificateTrustMode = Field(
        default=CertificateTrustMode.STRICT,
        description="Server certificate handling (strict or permissive)",
    )
    transport_protocol: TransportProtocol | None = Field(
        default=None,
        description="Pin TLS to one protocol version (e.g. tls1_2)",
    )

    # Login
    default_domain: str = Field(
        default=DEFAULT_LOGIN_DOMAIN,
        description="Domain asserted for usernames without an @ qualifier",
    )

    # Operation tracking
    poll_interval_seconds: float = Field(
        default=POLL_INTERVAL_DEFAULT,
        description="Seconds between operation status checks",
    )
    wait_timeout_seconds: float = Field(
        default=WAIT_TIMEOUT_DEFAULT,
        description="Seconds to wait for an operation before reporting a timeout",
    )
    fail_fast_on_operation_failure: bool = Field(
        default=False,
        description="Stop waiting when the request tracker reports FAILED",
    )

    model_config = SettingsConfigDict(
        env_prefix="ARIA_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("request_timeout_seconds", "poll_interval_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Reject zero or negative intervals."""
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator("wait_timeout_seconds")
    @classmethod
    def validate_wait_timeout(cls, v: float) -> float:
        """Zero is allowed (check once, never sleep); negatives are not."""
        if v < 0:
            raise ValueError("wait_timeout_seconds must be >= 0")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def uses_json_logs(self) -> bool:
        """Machine-readable logs outside development."""
        return self.environment != Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
