"""Adapter layer package for the Traefik API boundary."""

from .interfaces import HealthFetcherPort, TraefikCredentials
from .traefik_api import TraefikApiAdapter
from .traefik_errors import (
    TraefikConfigMissingError,
    TraefikFetchError,
    TraefikNetworkError,
    TraefikParseError,
    TraefikTimeoutError,
    TraefikUpstreamRejectedError,
)

__all__ = [
    "HealthFetcherPort",
    "TraefikApiAdapter",
    "TraefikConfigMissingError",
    "TraefikCredentials",
    "TraefikFetchError",
    "TraefikNetworkError",
    "TraefikParseError",
    "TraefikTimeoutError",
    "TraefikUpstreamRejectedError",
]
