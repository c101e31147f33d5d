"""Service types for DFA API v1.12."""

from ..clients.base import AuthenticatedServiceClient, LoginServiceClient

VERSION = "v1.12"
NAMESPACE = "http://www.doubleclick.net/dfa-api/v1.12"


class LoginRemoteService(LoginServiceClient):
    """Authenticates users and issues tokens."""

    BINDING_NAMESPACE = NAMESPACE


class _Service(AuthenticatedServiceClient):
    BINDING_NAMESPACE = NAMESPACE


class AdRemoteService(_Service):
    """Ads and ad types."""


class AdvertiserRemoteService(_Service):
    """Advertisers."""


class AdvertiserGroupRemoteService(_Service):
    """Advertiser groups."""


class CampaignRemoteService(_Service):
    """Campaigns and landing pages."""


class ChangeLogRemoteService(_Service):
    """Change log records."""


class ContentCategoryRemoteService(_Service):
    """Content categories."""


class CreativeRemoteService(_Service):
    """Creatives and creative assets."""


class CreativeFieldRemoteService(_Service):
    """Creative fields and field values."""


class CreativeGroupRemoteService(_Service):
    """Creative groups."""


class NetworkRemoteService(_Service):
    """Networks."""


class PlacementRemoteService(_Service):
    """Placements, placement groups and pricing schedules."""


class ReportRemoteService(_Service):
    """Report queries and report downloads."""


class SiteRemoteService(_Service):
    """Sites and site directories."""


class SizeRemoteService(_Service):
    """Ad sizes."""


class SpotlightRemoteService(_Service):
    """Spotlight activities and activity types."""


class SubnetworkRemoteService(_Service):
    """Subnetworks."""


class UserRemoteService(_Service):
    """Users and user filters."""


class UserRoleRemoteService(_Service):
    """User roles and permissions."""
