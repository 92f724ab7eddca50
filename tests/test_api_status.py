"""Tests for status, refresh and health endpoint behavior."""

from __future__ import annotations

import httpx
from fastapi.testclient import TestClient

from traefik_status.adapters import TraefikApiAdapter, TraefikCredentials
from traefik_status.api.application import create_api_application
from traefik_status.config import AppSettings
from traefik_status.domain import MonitoredService
from traefik_status.status import RefreshController, RefreshControllerConfig, SnapshotCache

_NOW_MS = 1_700_000_000_000
_REGISTRY = (MonitoredService(service_key="a@docker", display_name="A", url="a.example"),)


class _UpstreamStub:
    """Mock Traefik upstream returning a configurable response."""

    def __init__(self) -> None:
        self.request_count = 0
        self.response = httpx.Response(200, json=[{"name": "a@docker", "serverStatus": {"s1": "UP"}}])

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Count the request and return the configured response.

        Args:
            request: Incoming upstream request.

        Returns:
            httpx.Response: Configured response.
        """

        _ = request
        self.request_count += 1
        return self.response


def _build_client(upstream: _UpstreamStub) -> TestClient:
    """Create a test client wired to a mocked upstream and fixed clock.

    Args:
        upstream: Mock upstream.

    Returns:
        TestClient: Client for the status application.
    """

    controller = RefreshController(
        registry=_REGISTRY,
        cache=SnapshotCache(registry=_REGISTRY),
        fetcher=TraefikApiAdapter(http_transport=httpx.MockTransport(upstream.handle)),
        config=RefreshControllerConfig(
            endpoint="https://traefik.example/api/http/services",
            credentials=TraefikCredentials(username="admin", password="s3cret"),
        ),
        clock=lambda: _NOW_MS,
    )
    settings = AppSettings(_env_file=None, environment_name="test")
    return TestClient(create_api_application(settings, controller, clock=lambda: _NOW_MS))


def test_api_status_returns_classified_snapshot() -> None:
    """Return classified statuses and fetch metadata.

    Returns:
        None: Assertions validate response payload.
    """

    upstream = _UpstreamStub()
    client = _build_client(upstream)

    response = client.get("/status")

    assert response.status_code == 200
    assert response.json() == {
        "services": [{"name": "A", "url": "a.example", "status": "UP"}],
        "last_fetched_ms": _NOW_MS,
        "last_updated": "Just now",
        "error": None,
        "error_kind": None,
    }
    assert upstream.request_count == 1


def test_api_status_serves_cache_on_repeated_reads() -> None:
    """Serve repeated reads within the TTL from cache.

    Returns:
        None: Assertions validate caching through the API.
    """

    upstream = _UpstreamStub()
    client = _build_client(upstream)

    client.get("/status")
    client.get("/status")

    assert upstream.request_count == 1


def test_api_status_reports_upstream_error_with_http_200() -> None:
    """Render upstream failures as snapshot errors, not HTTP errors.

    Returns:
        None: Assertions validate error payload.
    """

    upstream = _UpstreamStub()
    upstream.response = httpx.Response(500)
    client = _build_client(upstream)

    response = client.get("/status")

    assert response.status_code == 200
    assert response.json()["error"] == "Traefik API returned 500"
    assert response.json()["error_kind"] == "upstream_rejected"
    assert response.json()["services"] == [{"name": "A", "url": "a.example", "status": "UNKNOWN"}]


def test_api_status_refresh_bypasses_cache() -> None:
    """Fetch again when the refresh action is posted.

    Returns:
        None: Assertions validate manual refresh through the API.
    """

    upstream = _UpstreamStub()
    client = _build_client(upstream)
    client.get("/status")
    upstream.response = httpx.Response(200, json=[])

    response = client.post("/status/refresh")

    assert response.status_code == 200
    assert upstream.request_count == 2
    assert response.json()["services"] == [{"name": "A", "url": "a.example", "status": "DOWN"}]


def test_api_health_reports_app_up() -> None:
    """Return HTTP 200 health payload independent of upstream state.

    Returns:
        None: Assertions validate health payload.
    """

    upstream = _UpstreamStub()
    upstream.response = httpx.Response(503)
    client = _build_client(upstream)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "up", "environment": "test"}
    assert upstream.request_count == 0
