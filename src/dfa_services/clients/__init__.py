"""SOAP service clients for the DFA API."""

from .base import (
    AuthenticatedServiceClient,
    DfaServiceClient,
    LoginServiceClient,
    OperationProxy,
    SupportsAuthHeader,
)

__all__ = [
    "AuthenticatedServiceClient",
    "DfaServiceClient",
    "LoginServiceClient",
    "OperationProxy",
    "SupportsAuthHeader",
]
