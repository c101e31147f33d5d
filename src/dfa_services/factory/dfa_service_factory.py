"""Factory for all DFA API services.

Builds service clients bound to ``{server}{version}/api/dfa-api/{endpoint}``,
logging in through LoginRemoteService on demand and attaching the resulting
token, plus a RequestHeader for protocol versions above v1.11.

The cached token is plain instance state. A factory shared between threads
needs a lock around :meth:`DfaServiceFactory.create_service`.
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from ..clients.base import DfaServiceClient, SupportsAuthHeader
from ..config import DfaSettings, get_settings
from ..errors import AuthenticationError, InvalidArgumentError, SignatureTypeError
from ..models.auth import AuthToken, RequestHeader
from ..models.signature import DfaServiceSignature, ServiceSignature
from ..services.registry import DfaService
from .base import ServiceFactory

logger = logging.getLogger(__name__)

LOGIN_SERVICE_NAME = "LoginRemoteService"

# Versions above this one take a RequestHeader
REQUEST_HEADER_MIN_EXCLUSIVE_VERSION = Decimal("1.11")


class DfaServiceFactory(ServiceFactory):
    """Creates authenticated DFA service clients.

    Usage:
        factory = DfaServiceFactory()
        factory.set_headers(factory.read_headers_from_config(factory.config))
        service = factory.create_service(DfaService.v1_12.SpotlightRemoteService, user)
    """

    def __init__(self, settings: Optional[DfaSettings] = None):
        """Initialize the factory.

        Args:
            settings: Settings to read defaults from (defaults to get_settings())
        """
        self._config = settings or get_settings()
        self._headers: dict[str, str] = {}
        self._auth_token: Optional[AuthToken] = None

    @property
    def config(self) -> DfaSettings:
        return self._config

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def auth_token(self) -> Optional[AuthToken]:
        """The cached token, None until the first non-login service is created."""
        return self._auth_token

    def set_headers(self, headers: dict[str, str]) -> None:
        """Replace the headers and drop the cached token."""
        self._headers = dict(headers)
        self._auth_token = None

    def read_headers_from_config(self, config: DfaSettings) -> dict[str, str]:
        headers: dict[str, str] = {}
        if config.auth_token:
            headers["authToken"] = config.auth_token

        headers["userName"] = config.user_name
        headers["password"] = config.password
        headers["applicationName"] = config.application_name
        return headers

    def create_service(
        self,
        signature: Optional[ServiceSignature],
        user: Optional[Any],
        server_url: Optional[str] = None,
    ) -> DfaServiceClient:
        """Create a service client.

        Args:
            signature: Signature of the service being created
            user: The user for which the service is being created
            server_url: Server the calls go to (defaults to settings)

        Returns:
            A client of ``signature.service_type``, authenticated unless it
            is the login service

        Raises:
            InvalidArgumentError: if user or signature is missing
            SignatureTypeError: if signature is not a DfaServiceSignature
            AuthenticationError: if a token is needed and login fails
        """
        if server_url is None:
            server_url = self._config.dfa_api_server

        if user is None:
            raise InvalidArgumentError("user is required")

        if signature is None:
            raise InvalidArgumentError("signature is required")

        if not isinstance(signature, DfaServiceSignature):
            raise SignatureTypeError(
                f"Signature provided is of the wrong type. Expected {DfaServiceSignature.__name__}, "
                f"got {type(signature).__name__}."
            )

        service = self._create_service_without_auth_headers(signature, user, server_url)

        if signature.service_name == LOGIN_SERVICE_NAME:
            return service

        if not isinstance(service, SupportsAuthHeader):
            raise SignatureTypeError(
                f"{signature.service_type.__name__} does not accept authentication headers"
            )

        if self._auth_token is None:
            self._auth_token = self.get_authentication_token(signature, user, server_url)

        service.set_token(self._auth_token)
        if signature.version_number > REQUEST_HEADER_MIN_EXCLUSIVE_VERSION:
            service.set_request_header(self.get_request_header())
            self.set_request_header_namespace(signature, service)

        return service

    def get_request_header(self) -> RequestHeader:
        header = RequestHeader()
        if "applicationName" in self._headers:
            header.application_name = (
                f"{self._config.library_signature}|{self._headers['applicationName']}"
            )
        return header

    def get_authentication_token(
        self,
        signature: ServiceSignature,
        user: Any,
        server_url: str,
    ) -> AuthToken:
        """Get a token for the user, logging in unless headers already carry one.

        Raises:
            AuthenticationError: wrapping whatever made the login fail
        """
        if self._headers.get("authToken"):
            logger.debug("Using the auth token supplied in headers")
            return AuthToken(
                user_name=self._headers.get("userName", ""),
                token=self._headers["authToken"],
            )

        try:
            login_signature = DfaService.get_signature(signature.version, LOGIN_SERVICE_NAME)
            login_service = self._create_service_without_auth_headers(
                login_signature, user, server_url
            )

            user_name = self._headers["userName"]
            logger.info(f"Logging in to DFA API {signature.version} as {user_name}")
            profile = login_service.authenticate(user_name, self._headers["password"])
            return AuthToken(user_name=str(profile.name), token=str(profile.token))
        except Exception as e:
            raise AuthenticationError(
                "Failed to authenticate user. See inner exception for details.", e
            ) from e

    @staticmethod
    def set_request_header_namespace(
        signature: DfaServiceSignature, service: DfaServiceClient
    ) -> None:
        """Qualify the service's RequestHeader with its binding namespace.

        Services disagree on whether header members carry a namespace, so the
        header follows whatever the service's binding declares.
        """
        namespace = signature.service_type.BINDING_NAMESPACE
        if namespace is None or not isinstance(service, SupportsAuthHeader):
            return
        if service.request_header is not None:
            service.request_header.target_namespace = namespace

    def _create_service_without_auth_headers(
        self,
        signature: DfaServiceSignature,
        user: Any,
        server_url: str,
    ) -> DfaServiceClient:
        service = signature.service_type()

        if self._config.proxy:
            service.proxy = self._config.proxy
        service.timeout = self._config.request_timeout

        server = server_url.rstrip("/") + "/"
        service.url = (
            f"{server}{signature.version}/api/dfa-api/{signature.service_endpoint}"
        )
        service.user = user

        logger.debug(f"Created {signature.service_name} for {service.url}")
        return service
