"""Typed domain models shared across runtime layers.

All models are frozen so a snapshot handed to a caller can never be mutated
behind the cache's back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping


class ServiceStatus(str, Enum):
    """Tri-state status of one monitored service."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class MonitoredService:
    """Static registry entry for one monitored service.

    Attributes:
        service_key: Upstream service identifier used as the join key.
        display_name: Human-readable service name.
        url: Public URL of the service.
    """

    service_key: str
    display_name: str
    url: str


@dataclass(frozen=True)
class RawBackendRecord:
    """Upstream health record for one Traefik service.

    Attributes:
        name: Upstream service identifier.
        server_statuses: Replica URL to state string mapping, None when upstream omitted it.
    """

    name: str
    server_statuses: Mapping[str, str] | None = None


@dataclass(frozen=True)
class ServiceStatusEntry:
    """Classified status row for one registry entry.

    Attributes:
        name: Display name copied from the registry.
        url: Public URL copied from the registry.
        status: Classified status.
    """

    name: str
    url: str
    status: ServiceStatus


@dataclass(frozen=True)
class StatusSnapshot:
    """Complete view of all monitored services at one point in time.

    Attributes:
        services: Status rows in registry order.
        last_fetched_ms: Epoch milliseconds of the last fetch attempt, 0 when never fetched.
        error: Human-readable message of the last failed fetch attempt.
        error_kind: Machine-readable failure category of the last failed fetch attempt.
    """

    services: tuple[ServiceStatusEntry, ...]
    last_fetched_ms: int = 0
    error: str | None = None
    error_kind: str | None = None

    def snapshot_with_failure(self, attempted_at_ms: int, error: str, error_kind: str) -> StatusSnapshot:
        """Return a copy that keeps service rows and records a failed attempt.

        Args:
            attempted_at_ms: Fetch attempt time in epoch milliseconds.
            error: Human-readable failure message.
            error_kind: Failure category.

        Returns:
            StatusSnapshot: Stale-on-error snapshot copy.
        """

        return replace(self, last_fetched_ms=attempted_at_ms, error=error, error_kind=error_kind)

    def snapshot_invalidated(self) -> StatusSnapshot:
        """Return a copy with the fetch timestamp reset so the next read refreshes."""

        return replace(self, last_fetched_ms=0)
