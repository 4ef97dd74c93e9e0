"""Login credential variants.

Exactly one variant is supplied per negotiation:

- UsernamePasswordCredential: "user", "user@domain" (or DOMAIN\\user, which
  is rejected by the negotiator before any network call)
- ExplicitDomainCredential: username plus a separately supplied domain
- ApiTokenCredential: pre-issued API/refresh token

Usage:
    from aria_automation.domain.value_objects import UsernamePasswordCredential

    credential = UsernamePasswordCredential(username="admin", password="s3cret")
"""

from dataclasses import dataclass


def _require(value: str, name: str) -> None:
    if not value:
        raise ValueError(f"{name} cannot be empty")
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")


@dataclass(frozen=True)
class UsernamePasswordCredential:
    """Username and password.

    Attributes:
        username: Plain or @-qualified username.
        password: Clear-text password (never logged or repr'd).
    """

    username: str
    password: str

    def __post_init__(self) -> None:
        """Validate fields.

        Raises:
            ValueError: If username or password is empty.
        """
        _require(self.username, "username")
        _require(self.password, "password")

    @classmethod
    def from_pair(cls, pair: tuple[str, str]) -> "UsernamePasswordCredential":
        """Build from a (username, password) credential object."""
        username, password = pair
        return cls(username=username, password=password)

    def __repr__(self) -> str:
        """Return repr without the password."""
        return f"UsernamePasswordCredential(username={self.username!r})"


@dataclass(frozen=True)
class ExplicitDomainCredential:
    """Username and password with an explicitly supplied domain.

    Attributes:
        username: Username (may itself carry an @ qualifier).
        password: Clear-text password (never logged or repr'd).
        domain: Identity domain sent in the login payload.
    """

    username: str
    password: str
    domain: str

    def __post_init__(self) -> None:
        """Validate fields.

        Raises:
            ValueError: If any field is empty.
        """
        _require(self.username, "username")
        _require(self.password, "password")
        _require(self.domain, "domain")

    def __repr__(self) -> str:
        """Return repr without the password."""
        return (
            f"ExplicitDomainCredential(username={self.username!r}, "
            f"domain={self.domain!r})"
        )


@dataclass(frozen=True)
class ApiTokenCredential:
    """Pre-issued API token.

    Attributes:
        token: Refresh/API token issued by the control plane.
    """

    token: str

    def __post_init__(self) -> None:
        """Validate token.

        Raises:
            ValueError: If token is empty.
        """
        _require(self.token, "token")

    def __repr__(self) -> str:
        """Return repr without the token."""
        return f"ApiTokenCredential(token=<{len(self.token)} chars>)"


type LoginCredential = (
    UsernamePasswordCredential | ExplicitDomainCredential | ApiTokenCredential
)
