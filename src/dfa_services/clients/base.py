"""Base SOAP service clients for the DFA API.

Every generated service type derives from :class:`DfaServiceClient`. Services
that accept authentication headers derive from
:class:`AuthenticatedServiceClient`, which implements the
:class:`SupportsAuthHeader` capability the service factory attaches tokens
through. The login service does not.
"""

import logging
from typing import Any, Callable, ClassVar, Optional, Protocol, runtime_checkable

from requests import RequestException, Session
from zeep import Client, xsd
from zeep.exceptions import Error as ZeepError
from zeep.transports import Transport
from zeep.wsse.username import UsernameToken

from ..errors import RemoteCallError
from ..models.auth import AuthToken, RequestHeader

logger = logging.getLogger(__name__)

# zeep's own default for loading WSDL documents
DEFAULT_TRANSPORT_TIMEOUT = 300


@runtime_checkable
class SupportsAuthHeader(Protocol):
    """Capability of clients that send a user token and a request header."""

    token: Optional[AuthToken]
    request_header: Optional[RequestHeader]

    def set_token(self, token: AuthToken) -> None:
        ...

    def set_request_header(self, header: RequestHeader) -> None:
        ...


class DfaServiceClient:
    """SOAP client bound to one DFA service endpoint.

    Instances are created empty by the service factory, which then sets
    ``url``, ``user`` and ``proxy``. The underlying zeep client is built on
    the first call, from the WSDL published at ``{url}?wsdl``.

    Remote operations can be called by name::

        client.call("getSpotlightActivityTypes")
        client.service.getSpotlightActivityTypes()
    """

    # Namespace declared by the service's SOAP binding
    BINDING_NAMESPACE: ClassVar[Optional[str]] = None

    def __init__(self) -> None:
        self.url: Optional[str] = None
        self.user: Optional[Any] = None
        self.proxy: Optional[str] = None
        self.timeout: Optional[int] = None

        self._soap_client: Optional[Client] = None

    @property
    def service(self) -> "OperationProxy":
        """Remote operations as attributes, mirroring ``zeep.Client.service``."""
        return OperationProxy(self)

    def call(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a remote operation.

        Raises:
            RemoteCallError: on SOAP faults, transport errors or responses
                that do not match the WSDL
        """
        logger.debug(f"Calling {type(self).__name__}.{operation} at {self.url}")
        try:
            soap_client = self._get_soap_client()
            method = getattr(soap_client.service, operation)
            return method(*args, **self._call_options(), **kwargs)
        except (ZeepError, RequestException) as e:
            raise RemoteCallError(operation, e) from e

    def _get_soap_client(self) -> Client:
        if self._soap_client is None:
            if not self.url:
                raise RuntimeError(
                    f"{type(self).__name__} has no URL. Create it through the service factory."
                )
            self._soap_client = self._build_soap_client()
        return self._soap_client

    def _build_soap_client(self) -> Client:
        session = Session()
        if self.proxy:
            session.proxies = {"http": self.proxy, "https": self.proxy}

        transport = Transport(
            session=session,
            timeout=self.timeout or DEFAULT_TRANSPORT_TIMEOUT,
            operation_timeout=self.timeout,
        )
        return Client(f"{self.url}?wsdl", transport=transport, wsse=self._wsse())

    def _wsse(self) -> Optional[UsernameToken]:
        return None

    def _call_options(self) -> dict[str, Any]:
        return {}


class OperationProxy:
    """Forwards attribute calls to :meth:`DfaServiceClient.call`."""

    def __init__(self, client: DfaServiceClient):
        self._client = client

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        def operation(*args: Any, **kwargs: Any) -> Any:
            return self._client.call(name, *args, **kwargs)

        operation.__name__ = name
        return operation


class LoginServiceClient(DfaServiceClient):
    """Client for LoginRemoteService. Never carries a token itself."""

    def authenticate(self, user_name: str, password: str) -> Any:
        """Log in and return the user profile (with ``name`` and ``token``)."""
        return self.call("authenticate", user_name, password)


class AuthenticatedServiceClient(DfaServiceClient):
    """Client that sends a user token and, optionally, a RequestHeader."""

    def __init__(self) -> None:
        super().__init__()
        self.token: Optional[AuthToken] = None
        self.request_header: Optional[RequestHeader] = None

    def set_token(self, token: AuthToken) -> None:
        self.token = token
        # WS-Security is fixed when the zeep client is built
        self._soap_client = None

    def set_request_header(self, header: RequestHeader) -> None:
        self.request_header = header

    def _wsse(self) -> Optional[UsernameToken]:
        if self.token is None:
            return None
        return UsernameToken(self.token.user_name, self.token.token)

    def _call_options(self) -> dict[str, Any]:
        if self.request_header is None:
            return {}
        return {"_soapheaders": [self._request_header_element()]}

    def _request_header_element(self) -> Any:
        """Build the RequestHeader SOAP element.

        Members are qualified with ``target_namespace`` when set and left
        unqualified otherwise.
        """
        header = self.request_header
        namespace = header.target_namespace or self.BINDING_NAMESPACE

        def qualified(name: str, member_ns: Optional[str]) -> str:
            return f"{{{member_ns}}}{name}" if member_ns else name

        element = xsd.Element(
            qualified("RequestHeader", namespace),
            xsd.ComplexType([
                xsd.Element(
                    qualified("applicationName", header.target_namespace),
                    xsd.String(),
                ),
            ]),
        )
        return element(applicationName=header.application_name)
