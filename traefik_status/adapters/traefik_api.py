"""Traefik API adapter implementation for service health retrieval."""

from __future__ import annotations

import time
from typing import Any, Final
from urllib.parse import urlsplit, urlunsplit

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from traefik_status.domain import RawBackendRecord

from .interfaces import HealthFetcherPort, TraefikCredentials
from .traefik_errors import (
    TraefikConfigMissingError,
    TraefikFetchError,
    TraefikNetworkError,
    TraefikParseError,
    TraefikTimeoutError,
    TraefikUpstreamRejectedError,
)

logger = structlog.get_logger(__name__)


def adapter_redact_url(url: str) -> str:
    """Return `url` with any embedded userinfo replaced by `***`.

    Args:
        url: Endpoint URL, possibly carrying `user:password@`.

    Returns:
        str: URL safe for logs and error messages.
    """

    try:
        url_parts = urlsplit(url)
    except ValueError:
        return "<unparseable url>"
    if "@" not in url_parts.netloc:
        return url
    host_part = url_parts.netloc.rsplit("@", 1)[1]
    return urlunsplit(url_parts._replace(netloc=f"***"))


class TraefikServicePayload(BaseModel):
    """Validated shape of one entry from `/api/http/services`.

    Only `name` is required. `serverStatus` may be absent, `loadBalancer` is
    kept opaque, and any other field is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    server_status: dict[str, str] | None = Field(default=None, alias="serverStatus")
    load_balancer: Any | None = Field(default=None, alias="loadBalancer")


_SERVICE_LIST_ADAPTER: Final[TypeAdapter[list[TraefikServicePayload]]] = TypeAdapter(list[TraefikServicePayload])


class TraefikApiAdapter(HealthFetcherPort):
    """Adapter performing one authenticated GET against the Traefik API."""

    _USER_AGENT: Final[str] = "traefik-status/0.1 (Python/httpx)"

    def __init__(
        self,
        request_timeout_seconds: float = 10.0,
        http_transport: httpx.BaseTransport | None = None,
    ):
        """Initialize Traefik API adapter.

        Args:
            request_timeout_seconds: Upper bound for one upstream request.
            http_transport: Optional httpx transport override.

        Raises:
            ValueError: Raised when the timeout is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._request_timeout_seconds = request_timeout_seconds
        self._http_transport = http_transport

    def adapter_source_name(self) -> str:
        """Return stable adapter source label."""

        return "traefik_api"

    def adapter_fetch_services(
        self,
        endpoint: str,
        credentials: TraefikCredentials,
    ) -> tuple[RawBackendRecord, ...]:
        """Fetch and parse the upstream service list.

        Args:
            endpoint: Traefik services endpoint URL.
            credentials: Basic auth credentials.

        Returns:
            tuple[RawBackendRecord, ...]: Parsed records in upstream order.

        Raises:
            TraefikConfigMissingError: Raised when endpoint or credentials are blank.
            TraefikUpstreamRejectedError: Raised for non-2xx responses.
            TraefikParseError: Raised for malformed or unexpected bodies.
            TraefikNetworkError: Raised for transport failures and timeouts.
        """

        normalized_endpoint = (endpoint or "").strip()
        if not normalized_endpoint:
            raise TraefikConfigMissingError("Traefik API URL is not configured")
        if credentials is None or not credentials.username or not credentials.password:
            raise TraefikConfigMissingError("Traefik API credentials are not configured")

        redacted_endpoint = adapter_redact_url(normalized_endpoint)
        started_at = time.perf_counter()
        logger.info("traefik_fetch_started", endpoint=redacted_endpoint)
        try:
            payload = self._adapter_http_get(url=normalized_endpoint, credentials=credentials)
            records = self._adapter_parse_services(payload=payload)
        except TraefikFetchError as error:
            logger.warning(
                "traefik_fetch_failed",
                endpoint=redacted_endpoint,
                error_kind=error.kind,
                status_code=error.status_code,
                error_message=str(error),
            )
            raise

        logger.info(
            "traefik_fetch_completed",
            endpoint=redacted_endpoint,
            record_count=len(records),
            duration_ms=round((time.perf_counter() - started_at) * 1000, 1),
        )
        return records

    def _adapter_http_get(self, url: str, credentials: TraefikCredentials) -> bytes:
        """Execute one HTTP GET with basic auth and return the body.

        Args:
            url: Endpoint URL.
            credentials: Basic auth credentials.

        Returns:
            bytes: Response body of a 2xx response.

        Raises:
            TraefikUpstreamRejectedError: Raised for non-2xx status.
            TraefikNetworkError: Raised for transport failures.
            TraefikConfigMissingError: Raised when the URL cannot be used.
        """

        try:
            with httpx.Client(
                timeout=self._request_timeout_seconds,
                transport=self._http_transport,
                headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            ) as client:
                response = client.get(url, auth=httpx.BasicAuth(credentials.username, credentials.password))
        except httpx.TimeoutException as error:
            raise TraefikTimeoutError("Traefik API request timed out") from error
        except (httpx.UnsupportedProtocol, httpx.InvalidURL) as error:
            raise TraefikConfigMissingError(f"Traefik API URL is invalid: {adapter_redact_url(url)}") from error
        except UnicodeError as error:
            # IDNA encoding of the host fails inside name resolution
            raise TraefikConfigMissingError(f"Traefik API URL is invalid: {adapter_redact_url(url)}") from error
        except httpx.HTTPError as error:
            raise TraefikNetworkError(f"Traefik API request failed: {error}") from error

        if not response.is_success:
            raise TraefikUpstreamRejectedError(status_code=response.status_code)
        return response.content

    def _adapter_parse_services(self, payload: bytes) -> tuple[RawBackendRecord, ...]:
        """Validate the service list body and map it to domain records.

        Args:
            payload: Raw JSON body.

        Returns:
            tuple[RawBackendRecord, ...]: Parsed records.

        Raises:
            TraefikParseError: Raised when the body is not a JSON list of service objects.
        """

        try:
            services = _SERVICE_LIST_ADAPTER.validate_json(payload)
        except ValidationError as error:
            raise TraefikParseError(
                f"Traefik API response could not be parsed ({error.error_count()} validation errors)"
            ) from error

        return tuple(
            RawBackendRecord(name=service.name, server_statuses=service.server_status)
            for service in services
        )
