"""Authentication data models sent alongside DFA SOAP requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthToken(BaseModel):
    """User token returned by LoginRemoteService.authenticate.

    Sent as the WS-Security UsernameToken of every non-login request.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_name: str = Field(alias="userName")
    token: str = Field(repr=False)


class RequestHeader(BaseModel):
    """SOAP RequestHeader for protocol versions that accept one."""

    model_config = ConfigDict(populate_by_name=True)

    application_name: Optional[str] = Field(default=None, alias="applicationName")
    # Namespace the header members are qualified with, patched per service
    target_namespace: Optional[str] = Field(default=None, alias="targetNamespace")
