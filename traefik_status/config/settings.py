"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class MonitoredServiceSettings(BaseModel):
    """One configured registry entry.

    Attributes:
        service_key: Upstream Traefik service identifier, for example `whoami@docker`.
        display_name: Human-readable service name.
        url: Public URL shown next to the service.
    """

    service_key: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    url: str = Field(min_length=1)

    @field_validator("service_key", "display_name", "url")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value


def _default_monitored_services() -> list[MonitoredServiceSettings]:
    return [
        MonitoredServiceSettings(
            service_key="discoveries@docker",
            display_name="Discoveries",
            url="discoveriesguild.com",
        ),
        MonitoredServiceSettings(
            service_key="portainer@docker",
            display_name="Portainer",
            url="portainer.deloop.se",
        ),
    ]


class AppSettings(BaseSettings):
    """Application settings for the status API and Traefik polling.

    Environment variable names map directly to field names in uppercase.
    Example: `traefik_api_url` reads from `TRAEFIK_API_URL`.

    Traefik connection values default to blank on purpose: a missing value is
    reported as a fetch failure on the status snapshot instead of preventing
    startup.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Minimum log level name.
        log_json: Render log lines as JSON when true, console format otherwise.
        traefik_api_url: Traefik `/api/http/services` endpoint URL.
        traefik_username: Basic auth username for the Traefik API.
        traefik_password: Basic auth password for the Traefik API.
        traefik_request_timeout_seconds: Upper bound for one upstream request.
        monitored_services: Ordered registry of monitored services.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    traefik_api_url: str = Field(default="")
    traefik_username: str = Field(default="")
    traefik_password: str = Field(default="")
    traefik_request_timeout_seconds: float = Field(default=10.0, gt=0)
    monitored_services: list[MonitoredServiceSettings] = Field(default_factory=_default_monitored_services)

    @field_validator("traefik_api_url", "traefik_username", "traefik_password")
    @classmethod
    def _strip_connection_value(cls, value: str) -> str:
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if normalized_level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(f"unsupported log_level={value}")
        return normalized_level

    @field_validator("monitored_services")
    @classmethod
    def _validate_registry(cls, value: list[MonitoredServiceSettings]) -> list[MonitoredServiceSettings]:
        if not value:
            raise ValueError("monitored_services must contain at least one entry")
        service_keys = [service.service_key for service in value]
        if len(set(service_keys)) != len(service_keys):
            raise ValueError("monitored_services service_key values must be unique")
        return value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
