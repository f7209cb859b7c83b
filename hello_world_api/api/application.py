"""FastAPI application factory for the API definition service."""

from fastapi import FastAPI

from hello_world_api.config import AppSettings

from .routers import api_create_definition_router, api_create_health_router


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata and definition values.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Hello World API")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification response.

        Returns:
            dict[str, str]: Service name and runtime environment.
        """

        return {
            "service": "hello-world-api",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router())
    application.include_router(api_create_definition_router(platform_config=settings))

    return application
