"""Typed interfaces for configuration consumed by definition rendering."""

from typing import Protocol


class ApiPlatformConfigPort(Protocol):
    """Configuration values published to the API platform.

    Attributes:
        api_platform_status: Optional version lifecycle status, passed through unchanged.
        api_platform_endpoints_enabled: Optional flag for live version endpoints.
    """

    api_platform_status: str | None
    api_platform_endpoints_enabled: bool | None
