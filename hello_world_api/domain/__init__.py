"""Domain models and API definition rendering shared across runtime layers."""

from .definition import domain_build_api_definition, domain_render_api_definition
from .interfaces import ApiPlatformConfigPort
from .models import ApiDefinition, ApiVersionDefinition, HealthStatus

__all__ = [
    "ApiDefinition",
    "ApiPlatformConfigPort",
    "ApiVersionDefinition",
    "HealthStatus",
    "domain_build_api_definition",
    "domain_render_api_definition",
]
