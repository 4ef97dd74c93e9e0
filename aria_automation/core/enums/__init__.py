"""Core enums package.

Usage:
    from aria_automation.core.enums import ErrorCode, CertificateTrustMode
"""

from aria_automation.core.enums.certificate_trust_mode import CertificateTrustMode
from aria_automation.core.enums.environment import Environment
from aria_automation.core.enums.error_code import ErrorCode
from aria_automation.core.enums.transport_protocol import TransportProtocol

__all__ = ["CertificateTrustMode", "Environment", "ErrorCode", "TransportProtocol"]
