"""API router package for endpoint composition."""

from .definition import api_create_definition_router
from .health import api_create_health_router

__all__ = ["api_create_definition_router", "api_create_health_router"]
