"""Session negotiator implementing SessionNegotiatorProtocol.

Resolves a login credential into a live Session against the control plane.

Flows:
    API token:
        POST /iaas/login {refreshToken}                → validates the token
        POST /iaas/api/login {refreshToken}            → access token
    Username/password (with or without domain):
        POST /csp/gateway/am/idp/auth/login?access_token {username, password, domain}
            (rejected + alternate prepared → one retry with the alternate)
        POST /iaas/api/login {refreshToken}            → access token
    Then, for every flow:
        GET /iaas/api/about                            → latestApiVersion

The second-stage IaaS login is mandatory for every variant; a single login
response is never enough to build a Session.

Architecture:
    - Infrastructure layer (talks to the HTTP gateway)
    - Returns Result types; retry branches on the error TYPE
    - Publishing the Session is the caller's job (ConnectServerHandler)
"""

from collections.abc import Callable
from typing import Any

import structlog

from aria_automation.core.config import Settings, get_settings
from aria_automation.core.constants import (
    ABOUT_PATH,
    API_TOKEN_LOGIN_PATH,
    IAAS_LOGIN_PATH,
    IDENTITY_LOGIN_PATH,
)
from aria_automation.core.enums import (
    CertificateTrustMode,
    ErrorCode,
    TransportProtocol,
)
from aria_automation.core.errors import DomainError
from aria_automation.core.result import Failure, Result, Success
from aria_automation.domain.entities.session import Session
from aria_automation.domain.errors import (
    AuthRejectedError,
    GatewayError,
    GatewayInvalidResponseError,
    GatewayRejectedError,
)
from aria_automation.domain.protocols.http_gateway_protocol import (
    HttpGatewayProtocol,
)
from aria_automation.domain.value_objects import (
    ApiTokenCredential,
    ExplicitDomainCredential,
    LoginCredential,
    UsernamePasswordCredential,
)
from aria_automation.infrastructure.auth.login_payloads import build_login_payloads
from aria_automation.infrastructure.http.httpx_gateway import (
    HttpxGateway,
    server_base_url,
)

logger = structlog.get_logger(__name__)

GatewayFactory = Callable[..., HttpGatewayProtocol]


def rejection_hint(*, qualified: bool, default_domain: str) -> str:
    """Best-effort diagnosis for a rejected username/password login.

    Args:
        qualified: Whether the supplied username carried an @ qualifier.
        default_domain: Domain asserted for unqualified usernames.

    Returns:
        Human-readable hint naming the most likely cause.
    """
    if qualified:
        return (
            "Both the short and the fully qualified username were rejected. "
            "The identity source's username attribute may not match the "
            "user@domain style supplied; check the directory configuration "
            "(e.g. switch the username attribute to userPrincipalName) or "
            "verify the password."
        )
    return (
        f"The username has no @domain qualifier and was sent with the "
        f"'{default_domain}' domain. Directory accounts must be supplied as "
        f"username@domain; local accounts should verify the password."
    )


class SessionNegotiator:
    """Multi-scheme login negotiation.

    Attributes:
        settings: Supplies the default domain and request timeout.
        gateway_factory: Builds an HttpGatewayProtocol from keyword arguments
            (base_url, access_token, certificate_trust_mode, transport_protocol,
            timeout). Defaults to HttpxGateway.

    Example:
        >>> negotiator = SessionNegotiator()
        >>> result = await negotiator.negotiate(
        ...     UsernamePasswordCredential(username="jo@corp.local", password="pw"),
        ...     "vra.example.com",
        ... )
        >>> match result:
        ...     case Success(value=session):
        ...         store.set(session)
        ...     case Failure(error=AuthRejectedError() as error):
        ...         print(error.hint)
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        gateway_factory: GatewayFactory = HttpxGateway,
    ) -> None:
        """Initialize negotiator.

        Args:
            settings: Client settings (defaults to the cached settings).
            gateway_factory: Gateway constructor.
        """
        self._settings = settings or get_settings()
        self._gateway_factory = gateway_factory

    async def negotiate(
        self,
        credential: LoginCredential,
        server_host: str,
        *,
        certificate_trust_mode: CertificateTrustMode = CertificateTrustMode.STRICT,
        transport_protocol: TransportProtocol | None = None,
    ) -> Result[Session, DomainError]:
        """Resolve credentials into a live Session.

        Args:
            credential: Exactly one login credential variant.
            server_host: Control plane host name or base URL.
            certificate_trust_mode: Certificate handling for every call.
            transport_protocol: Optional pinned TLS version.

        Returns:
            Success(Session): Fully valid session with API version attached.
            Failure(UnsupportedUsernameFormatError): DOMAIN\\user input.
            Failure(AuthRejectedError): Credentials or token rejected.
            Failure(GatewayError): Transport failure at any stage.
        """
        base_url = server_base_url(server_host)
        gateway = self._gateway_factory(
            base_url=base_url,
            certificate_trust_mode=certificate_trust_mode,
            transport_protocol=transport_protocol,
            timeout=self._settings.request_timeout_seconds,
        )

        logger.info(
            "negotiation_started",
            server=base_url,
            scheme=type(credential).__name__,
        )

        # Stage 1: obtain a refresh token
        match credential:
            case ApiTokenCredential():
                refresh_result = await self._exchange_api_token(
                    gateway, credential.token
                )
                username = None
            case UsernamePasswordCredential() | ExplicitDomainCredential():
                refresh_result = await self._identity_login(gateway, credential)
                username = credential.username
            case _:
                raise TypeError(
                    f"Unsupported credential type: {type(credential).__name__}"
                )

        if isinstance(refresh_result, Failure):
            return refresh_result
        refresh_token = refresh_result.value

        # Stage 2: mandatory IaaS token exchange
        access_result = await self._iaas_login(gateway, refresh_token)
        if isinstance(access_result, Failure):
            return access_result

        session = Session(
            server_base_url=base_url,
            access_token=access_result.value,
            refresh_token=refresh_token,
            certificate_trust_mode=certificate_trust_mode,
            transport_protocol=transport_protocol,
            username=username,
        )

        # Stage 3: API version lookup
        version_result = await self._lookup_api_version(session)
        if isinstance(version_result, Failure):
            return version_result
        session = session.with_api_version(version_result.value)

        logger.info(
            "negotiation_succeeded",
            server=base_url,
            api_version=session.api_version,
            has_refresh_token=session.refresh_token is not None,
        )
        return Success(value=session)

    async def _exchange_api_token(
        self,
        gateway: HttpGatewayProtocol,
        token: str,
    ) -> Result[str | None, DomainError]:
        """Validate a pre-issued token at the API token login endpoint.

        The pre-issued token is used as the refresh token for stage 2 unless
        the server hands back a different one.
        """
        result = await gateway.post(API_TOKEN_LOGIN_PATH, json_body={"refreshToken": token})

        match result:
            case Failure(error=GatewayRejectedError() as error):
                logger.warning(
                    "api_token_rejected",
                    status_code=error.status_code,
                )
                return Failure(
                    error=AuthRejectedError(
                        code=ErrorCode.AUTHENTICATION_REJECTED,
                        message="API token was rejected",
                        hint="The API token may be expired, revoked or issued "
                        "for a different organization; request a new token.",
                        status_code=error.status_code,
                    )
                )
            case Failure():
                return result
            case Success(value=response):
                body = response.body
                return Success(
                    value=body.get("refreshToken") or body.get("refresh_token") or token
                )

    async def _identity_login(
        self,
        gateway: HttpGatewayProtocol,
        credential: UsernamePasswordCredential | ExplicitDomainCredential,
    ) -> Result[str | None, DomainError]:
        """Username/password login with the one-shot alternate payload retry.

        Returns:
            Success(refresh token or None when the response omitted it).
        """
        payloads_result = build_login_payloads(
            credential, default_domain=self._settings.default_domain
        )
        if isinstance(payloads_result, Failure):
            logger.warning("negotiation_unsupported_username_format")
            return payloads_result
        payloads = payloads_result.value

        result = await gateway.post(IDENTITY_LOGIN_PATH, json_body=payloads.primary)
        attempts = 1

        if (
            isinstance(result, Failure)
            and isinstance(result.error, GatewayRejectedError)
            and payloads.alternate is not None
        ):
            logger.info(
                "identity_login_retrying_with_alternate",
                status_code=result.error.status_code,
                domain=payloads.primary.get("domain"),
            )
            result = await gateway.post(
                IDENTITY_LOGIN_PATH, json_body=payloads.alternate
            )
            attempts = 2

        match result:
            case Failure(error=GatewayRejectedError() as error):
                logger.warning(
                    "identity_login_rejected",
                    status_code=error.status_code,
                    attempts=attempts,
                    username_qualified=payloads.qualified,
                )
                return Failure(
                    error=AuthRejectedError(
                        code=ErrorCode.AUTHENTICATION_REJECTED,
                        message=f"Login rejected by {gateway.base_url}",
                        hint=rejection_hint(
                            qualified=payloads.qualified,
                            default_domain=self._settings.default_domain,
                        ),
                        status_code=error.status_code,
                        attempts=attempts,
                    )
                )
            case Failure():
                return result
            case Success(value=response):
                refresh_token = response.body.get("refresh_token")
                logger.debug(
                    "identity_login_succeeded",
                    attempts=attempts,
                    has_refresh_token=refresh_token is not None,
                )
                return Success(value=refresh_token)

    async def _iaas_login(
        self,
        gateway: HttpGatewayProtocol,
        refresh_token: str | None,
    ) -> Result[str, DomainError]:
        """Exchange the refresh token for an IaaS API access token."""
        body: dict[str, Any] = {"refreshToken": refresh_token}
        result = await gateway.post(IAAS_LOGIN_PATH, json_body=body)

        match result:
            case Failure(error=GatewayRejectedError() as error):
                logger.warning("iaas_login_rejected", status_code=error.status_code)
                return Failure(
                    error=AuthRejectedError(
                        code=ErrorCode.AUTHENTICATION_REJECTED,
                        message="Refresh token was not accepted by the IaaS API",
                        hint="The identity login did not return a usable refresh "
                        "token; reconnect, or use an API token instead.",
                        status_code=error.status_code,
                    )
                )
            case Failure():
                return result
            case Success(value=response):
                token = response.body.get("token")
                if not token:
                    logger.error("iaas_login_missing_token")
                    return Failure(
                        error=GatewayInvalidResponseError(
                            code=ErrorCode.GATEWAY_INVALID_RESPONSE,
                            message="Missing required field in IaaS login response: token",
                            status_code=response.status_code,
                        )
                    )
                return Success(value=token)

    async def _lookup_api_version(
        self, session: Session
    ) -> Result[str | None, GatewayError]:
        """Read latestApiVersion with the freshly minted access token.

        A transport failure fails the negotiation; a body without the field
        leaves the version unset.
        """
        gateway = self._gateway_factory(
            base_url=session.server_base_url,
            access_token=session.access_token,
            certificate_trust_mode=session.certificate_trust_mode,
            transport_protocol=session.transport_protocol,
            timeout=self._settings.request_timeout_seconds,
        )
        result = await gateway.get(ABOUT_PATH)
        if isinstance(result, Failure):
            logger.warning(
                "api_version_lookup_failed",
                server=session.server_base_url,
                error=result.error.message,
            )
            return result
        return Success(value=result.value.body.get("latestApiVersion"))
