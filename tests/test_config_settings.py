"""Tests for runtime settings loading and registry validation."""

import pytest
from pydantic import ValidationError

from traefik_status.bootstrap import bootstrap_create_refresh_controller
from traefik_status.config import AppSettings, SettingsLoadError, config_load_settings


def test_config_defaults_include_preconfigured_services(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load the two preconfigured services and blank Traefik values by default.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate default settings.
    """

    for variable_name in ("TRAEFIK_API_URL", "TRAEFIK_USERNAME", "TRAEFIK_PASSWORD", "MONITORED_SERVICES"):
        monkeypatch.delenv(variable_name, raising=False)

    settings = AppSettings(_env_file=None)

    assert [service.service_key for service in settings.monitored_services] == [
        "discoveries@docker",
        "portainer@docker",
    ]
    assert settings.traefik_api_url == ""
    assert settings.traefik_request_timeout_seconds == 10.0


def test_config_reads_traefik_values_and_registry_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read connection values and a JSON registry from the environment.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate environment mapping.
    """

    monkeypatch.setenv("TRAEFIK_API_URL", " https://traefik.example/api/http/services ")
    monkeypatch.setenv("TRAEFIK_USERNAME", "admin")
    monkeypatch.setenv("TRAEFIK_PASSWORD", "s3cret")
    monkeypatch.setenv(
        "MONITORED_SERVICES",
        '[{"service_key": "a@docker", "display_name": "A", "url": "a.example"}]',
    )

    settings = AppSettings(_env_file=None)

    assert settings.traefik_api_url == "https://traefik.example/api/http/services"
    assert settings.traefik_username == "admin"
    assert [service.display_name for service in settings.monitored_services] == ["A"]


def test_config_rejects_duplicate_service_keys() -> None:
    """Reject registries that repeat a service key.

    Returns:
        None: Assertions validate registry validation.
    """

    duplicate_entry = {"service_key": "a@docker", "display_name": "A", "url": "a.example"}

    with pytest.raises(ValidationError, match="unique"):
        AppSettings(_env_file=None, monitored_services=[duplicate_entry, duplicate_entry])


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Wrap validation failures in SettingsLoadError.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate error wrapping.
    """

    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_blank_traefik_values_degrade_to_snapshot_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start without Traefik values and report them as missing on read.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate config-missing degradation.
    """

    for variable_name in ("TRAEFIK_API_URL", "TRAEFIK_USERNAME", "TRAEFIK_PASSWORD", "MONITORED_SERVICES"):
        monkeypatch.delenv(variable_name, raising=False)

    controller = bootstrap_create_refresh_controller(AppSettings(_env_file=None))
    snapshot = controller.status_get_current_snapshot(now_ms=1_700_000_000_000)

    assert snapshot.error_kind == "config_missing"
    assert [entry.name for entry in snapshot.services] == ["Discoveries", "Portainer"]
