"""API definition document construction and JSON rendering."""

from __future__ import annotations

import json
from typing import Final

from .interfaces import ApiPlatformConfigPort
from .models import ApiDefinition, ApiVersionDefinition

API_NAME: Final[str] = "Hello World"
API_DESCRIPTION: Final[str] = "A 'hello world' example of an API on the HMRC API Developer Hub."
API_CONTEXT: Final[str] = "discuss-with-the-api-platform-team"
API_CATEGORIES: Final[tuple[str, ...]] = ("OTHER",)
API_VERSION: Final[str] = "1.0"
DEFAULT_STATUS: Final[str] = "ALPHA"
DEFAULT_ENDPOINTS_ENABLED: Final[bool] = False


def domain_build_api_definition(config: ApiPlatformConfigPort) -> ApiDefinition:
    """Build the API definition document from platform configuration values.

    Args:
        config: Configuration exposing optional status and endpoints flag.

    Returns:
        ApiDefinition: Immutable definition with defaults applied to absent values.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    status = config.api_platform_status
    if status is None:
        status = DEFAULT_STATUS

    endpoints_enabled = config.api_platform_endpoints_enabled
    if endpoints_enabled is None:
        endpoints_enabled = DEFAULT_ENDPOINTS_ENABLED

    return ApiDefinition(
        name=API_NAME,
        description=API_DESCRIPTION,
        context=API_CONTEXT,
        categories=API_CATEGORIES,
        versions=(
            ApiVersionDefinition(
                version=API_VERSION,
                status=status,
                endpoints_enabled=endpoints_enabled,
            ),
        ),
    )


def domain_render_api_definition(config: ApiPlatformConfigPort) -> str:
    """Render the API definition document as JSON text.

    Equal configuration values always render to identical text.

    Args:
        config: Configuration exposing optional status and endpoints flag.

    Returns:
        str: Serialized definition document.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return json.dumps(domain_build_api_definition(config).to_payload(), indent=2)
