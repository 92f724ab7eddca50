"""Health endpoint router for process liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from traefik_status.config import AppSettings


def api_create_health_router(settings: AppSettings) -> APIRouter:
    """Create health-check router.

    Upstream reachability is reported on `/status`, not here, so a Traefik
    outage never marks this process unhealthy.

    Args:
        settings: Validated application settings.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when settings are missing.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        payload = {
            "status": "ok",
            "app": "up",
            "environment": settings.environment_name,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
