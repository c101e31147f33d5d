"""Exceptions raised by the DFA service factory and service clients."""

from typing import Optional


class DfaError(Exception):
    """Base error for the DFA client library."""


class InvalidArgumentError(DfaError, ValueError):
    """A required argument was missing or unknown."""


class SignatureTypeError(DfaError, TypeError):
    """A service signature was not of the kind the factory expects."""


class AuthenticationError(DfaError):
    """Login failed or the credentials were rejected.

    The original exception is chained as ``__cause__`` and kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteCallError(DfaError):
    """A downstream SOAP call failed (transport, fault, malformed response)."""

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"Call to '{operation}' failed: {cause}")
        self.operation = operation
        self.cause = cause
