"""Server certificate trust modes."""

from enum import Enum


class CertificateTrustMode(str, Enum):
    """How the gateway treats the server's TLS certificate.

    STRICT verifies the chain and hostname. PERMISSIVE accepts self-signed
    or otherwise unverifiable certificates (lab appliances).
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @property
    def verifies(self) -> bool:
        """Whether certificate verification is enforced."""
        return self is CertificateTrustMode.STRICT
