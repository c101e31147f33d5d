"""The DFA user: the identity every service client is created for."""

from typing import Optional

from .clients.base import DfaServiceClient
from .config import DfaSettings
from .factory import DfaServiceFactory
from .models.signature import ServiceSignature


class DfaUser:
    """A DFA API user.

    Owns one :class:`DfaServiceFactory`, so all services obtained from the
    same user share a single login token.

    Usage:
        user = DfaUser()
        service = user.get_service(DfaService.v1_12.SpotlightRemoteService)
        activity_types = service.service.getSpotlightActivityTypes()
    """

    def __init__(
        self,
        headers: Optional[dict[str, str]] = None,
        settings: Optional[DfaSettings] = None,
    ):
        """Initialize the user.

        Args:
            headers: Credentials and application name (defaults to settings)
            settings: Settings for the factory (defaults to get_settings())
        """
        self.factory = DfaServiceFactory(settings=settings)
        if headers is None:
            headers = self.factory.read_headers_from_config(self.factory.config)
        self.factory.set_headers(headers)

    @property
    def config(self) -> DfaSettings:
        return self.factory.config

    def set_headers(self, headers: dict[str, str]) -> None:
        """Switch credentials. The next service created logs in again."""
        self.factory.set_headers(headers)

    def get_service(
        self,
        signature: ServiceSignature,
        server_url: Optional[str] = None,
    ) -> DfaServiceClient:
        return self.factory.create_service(signature, self, server_url)
