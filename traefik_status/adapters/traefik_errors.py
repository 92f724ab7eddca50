"""Project-native typed exceptions for Traefik API fetch failures."""

from __future__ import annotations

from typing import Final

FETCH_ERROR_CONFIG_MISSING: Final[str] = "config_missing"
FETCH_ERROR_UPSTREAM_REJECTED: Final[str] = "upstream_rejected"
FETCH_ERROR_PARSE_FAILURE: Final[str] = "parse_failure"
FETCH_ERROR_NETWORK_FAILURE: Final[str] = "network_failure"


class TraefikFetchError(Exception):
    """Base exception for one failed Traefik fetch.

    Attributes:
        kind: Failure category.
        status_code: Upstream HTTP status when the proxy answered.
    """

    kind: str = FETCH_ERROR_NETWORK_FAILURE

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TraefikConfigMissingError(TraefikFetchError, ValueError):
    """Endpoint or credentials are absent or unusable."""

    kind = FETCH_ERROR_CONFIG_MISSING


class TraefikUpstreamRejectedError(TraefikFetchError, ConnectionError):
    """Upstream answered with a non-success HTTP status."""

    kind = FETCH_ERROR_UPSTREAM_REJECTED

    def __init__(self, status_code: int):
        super().__init__(f"Traefik API returned {status_code}", status_code=status_code)


class TraefikParseError(TraefikFetchError, ValueError):
    """Response body is not JSON or does not match the service list shape."""

    kind = FETCH_ERROR_PARSE_FAILURE


class TraefikNetworkError(TraefikFetchError, ConnectionError):
    """Transport-level failure such as DNS or refused connection."""

    kind = FETCH_ERROR_NETWORK_FAILURE


class TraefikTimeoutError(TraefikNetworkError, TimeoutError):
    """Request exceeded the configured timeout."""
