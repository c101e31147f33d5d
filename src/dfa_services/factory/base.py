"""Base service factory interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic_settings import BaseSettings

from ..clients.base import DfaServiceClient
from ..models.signature import ServiceSignature


class ServiceFactory(ABC):
    """Abstract base class for factories that build service clients."""

    @property
    @abstractmethod
    def config(self) -> BaseSettings:
        """Settings this factory reads its defaults from."""
        pass

    @abstractmethod
    def set_headers(self, headers: dict[str, str]) -> None:
        """Replace the headers (credentials, application name) used by new services."""
        pass

    @abstractmethod
    def read_headers_from_config(self, config: BaseSettings) -> dict[str, str]:
        """Derive the header map from settings."""
        pass

    @abstractmethod
    def create_service(
        self,
        signature: Optional[ServiceSignature],
        user: Optional[Any],
        server_url: Optional[str] = None,
    ) -> DfaServiceClient:
        """Create a ready-to-call service client."""
        pass
