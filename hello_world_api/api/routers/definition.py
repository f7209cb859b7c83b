"""API definition router composition for API platform registration."""

import logging

from fastapi import APIRouter, Response

from hello_world_api.domain import ApiPlatformConfigPort, domain_render_api_definition

logger = logging.getLogger(__name__)


def api_create_definition_router(platform_config: ApiPlatformConfigPort) -> APIRouter:
    """Create router exposing the API definition document.

    Args:
        platform_config: Configuration exposing optional status and endpoints flag.

    Returns:
        APIRouter: Router exposing `/api/definition` endpoint.

    Raises:
        ValueError: Raised when platform_config is invalid.
    """

    if platform_config is None:
        raise ValueError("platform_config must not be None")

    router = APIRouter(prefix="/api", tags=["definition"])

    @router.get("/definition")
    def api_definition_document() -> Response:
        """Return the rendered API definition document.

        Returns:
            Response: JSON document body with `application/json` content type.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        rendered_definition = domain_render_api_definition(platform_config)
        logger.debug("serving api definition document bytes=%d", len(rendered_definition))
        return Response(content=rendered_definition, media_type="application/json")

    return router
