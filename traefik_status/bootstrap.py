"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from traefik_status.adapters import TraefikApiAdapter, TraefikCredentials
from traefik_status.api import create_api_application
from traefik_status.config import AppSettings, config_load_settings
from traefik_status.domain import MonitoredService, domain_build_registry
from traefik_status.logging_config import logging_configure
from traefik_status.status import RefreshController, RefreshControllerConfig, SnapshotCache


def bootstrap_create_refresh_controller(settings: AppSettings) -> RefreshController:
    """Build the refresh controller and its cache from validated settings.

    Args:
        settings: Validated application settings.

    Returns:
        RefreshController: Controller owning a fresh snapshot cache.
    """

    registry = domain_build_registry(
        MonitoredService(
            service_key=service.service_key,
            display_name=service.display_name,
            url=service.url,
        )
        for service in settings.monitored_services
    )
    return RefreshController(
        registry=registry,
        cache=SnapshotCache(registry=registry),
        fetcher=TraefikApiAdapter(request_timeout_seconds=settings.traefik_request_timeout_seconds),
        config=RefreshControllerConfig(
            endpoint=settings.traefik_api_url,
            credentials=TraefikCredentials(
                username=settings.traefik_username,
                password=settings.traefik_password,
            ),
        ),
    )


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    logging_configure(log_level=settings.log_level, json_output=settings.log_json)
    return create_api_application(
        settings=settings,
        status_service=bootstrap_create_refresh_controller(settings),
    )
