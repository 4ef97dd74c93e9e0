"""TLS protocol versions a session can be pinned to."""

import ssl
from enum import Enum


class TransportProtocol(str, Enum):
    """Explicit TLS protocol version override.

    When set on a session, the gateway builds an SSL context whose minimum
    and maximum versions are both this protocol.
    """

    TLS1_0 = "tls1_0"
    TLS1_1 = "tls1_1"
    TLS1_2 = "tls1_2"
    TLS1_3 = "tls1_3"

    @property
    def tls_version(self) -> ssl.TLSVersion:
        """Matching ssl.TLSVersion member."""
        return _TLS_VERSIONS[self]


_TLS_VERSIONS: dict[TransportProtocol, ssl.TLSVersion] = {
    TransportProtocol.TLS1_0: ssl.TLSVersion.TLSv1,
    TransportProtocol.TLS1_1: ssl.TLSVersion.TLSv1_1,
    TransportProtocol.TLS1_2: ssl.TLSVersion.TLSv1_2,
    TransportProtocol.TLS1_3: ssl.TLSVersion.TLSv1_3,
}
