"""Service factories."""

from .base import ServiceFactory
from .dfa_service_factory import LOGIN_SERVICE_NAME, DfaServiceFactory

__all__ = ["LOGIN_SERVICE_NAME", "DfaServiceFactory", "ServiceFactory"]
