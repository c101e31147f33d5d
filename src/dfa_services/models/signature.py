"""Service signatures identifying a DFA remote service and protocol version."""

import re
from decimal import Decimal
from typing import Any, Type

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..clients.base import DfaServiceClient

_VERSION_PATTERN = re.compile(r"^v\d+(\.\d+)?$")


class ServiceSignature(BaseModel):
    """Identifies a remote service by name and protocol version."""

    model_config = ConfigDict(frozen=True)

    service_name: str
    version: str

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if not _VERSION_PATTERN.match(value):
            raise ValueError(f"Version must look like 'v1.12', got {value!r}")
        return value

    @property
    def version_number(self) -> Decimal:
        """The version without its leading 'v', e.g. Decimal('1.12')."""
        return Decimal(self.version[1:])


class DfaServiceSignature(ServiceSignature):
    """Signature of a DFA API service.

    Besides name and version it carries the URL path segment of the
    endpoint and the client class the factory instantiates.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service_endpoint: str
    service_type: Type[DfaServiceClient]

    @model_validator(mode="before")
    @classmethod
    def _default_endpoint(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("service_endpoint"):
            data = {**data, "service_endpoint": data.get("service_name")}
        return data
