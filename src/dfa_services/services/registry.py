"""Registry of DFA service signatures by protocol version.

Usage:
    user = DfaUser()
    service = user.get_service(DfaService.v1_12.SpotlightRemoteService)
"""

from types import ModuleType

from ..errors import InvalidArgumentError
from ..models.signature import DfaServiceSignature
from . import v1_11 as _v1_11
from . import v1_12 as _v1_12

# Service name -> URL path segment of its endpoint
SERVICE_ENDPOINTS = {
    "LoginRemoteService": "login",
    "AdRemoteService": "ad",
    "AdvertiserRemoteService": "advertiser",
    "AdvertiserGroupRemoteService": "advertisergroup",
    "CampaignRemoteService": "campaign",
    "ChangeLogRemoteService": "changelog",
    "ContentCategoryRemoteService": "contentcategory",
    "CreativeRemoteService": "creative",
    "CreativeFieldRemoteService": "creativefield",
    "CreativeGroupRemoteService": "creativegroup",
    "NetworkRemoteService": "network",
    "PlacementRemoteService": "placement",
    "ReportRemoteService": "report",
    "SiteRemoteService": "site",
    "SizeRemoteService": "size",
    "SpotlightRemoteService": "spotlight",
    "SubnetworkRemoteService": "subnetwork",
    "UserRemoteService": "user",
    "UserRoleRemoteService": "userrole",
}


def _signature(module: ModuleType, service_name: str) -> DfaServiceSignature:
    return DfaServiceSignature(
        service_name=service_name,
        version=module.VERSION,
        service_endpoint=SERVICE_ENDPOINTS[service_name],
        service_type=getattr(module, service_name),
    )


class _VersionServices:
    """All service signatures of one protocol version."""

    def __init__(self, module: ModuleType):
        self.version = module.VERSION
        self._signatures = {
            name: _signature(module, name) for name in SERVICE_ENDPOINTS
        }

    def __getattr__(self, name: str) -> DfaServiceSignature:
        try:
            return self.__dict__["_signatures"][name]
        except KeyError:
            raise AttributeError(
                f"DFA {self.__dict__.get('version')} has no service {name!r}"
            ) from None

    def __iter__(self):
        return iter(self._signatures.values())

    def __dir__(self):
        return [*super().__dir__(), *self._signatures]


class DfaService:
    """Signatures of every DFA service, grouped by version."""

    v1_11 = _VersionServices(_v1_11)
    v1_12 = _VersionServices(_v1_12)

    @classmethod
    def versions(cls) -> list[_VersionServices]:
        return [cls.v1_11, cls.v1_12]

    @classmethod
    def get_signature(cls, version: str, service_name: str) -> DfaServiceSignature:
        """Look up a signature by version string ('v1.12') and service name.

        Raises:
            InvalidArgumentError: if the version or the service is unknown
        """
        for services in cls.versions():
            if services.version == version:
                try:
                    return services._signatures[service_name]
                except KeyError:
                    raise InvalidArgumentError(
                        f"DFA {version} has no service {service_name!r}"
                    ) from None
        known = ", ".join(s.version for s in cls.versions())
        raise InvalidArgumentError(
            f"Unknown DFA API version: {version}. Supported versions: {known}"
        )
