"""Health endpoint router composition for application liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from hello_world_api.domain import HealthStatus


def api_create_health_router() -> APIRouter:
    """Create health-check router with application liveness status.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        health = HealthStatus(status="ok", detail="application running")
        payload = {
            "status": health.status,
            "app": "up",
            "detail": health.detail,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
