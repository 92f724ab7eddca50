"""FastAPI application factory for the status service."""

from typing import Callable

from fastapi import FastAPI

from traefik_status import __version__
from traefik_status.config import AppSettings
from traefik_status.status import StatusQueryPort

from .routers import api_create_health_router, api_create_status_router


def create_api_application(
    settings: AppSettings,
    status_service: StatusQueryPort,
    clock: Callable[[], int] | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        status_service: Snapshot query surface.
        clock: Optional epoch-milliseconds clock.

    Returns:
        FastAPI: Framework application instance.
    """
    application = FastAPI(title="Traefik Service Status", version=__version__)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        return {
            "service": "traefik-status",
            "version": __version__,
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(settings=settings))
    application.include_router(api_create_status_router(status_service=status_service, clock=clock))

    return application
