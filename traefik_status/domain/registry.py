"""Registry construction helpers for the monitored service list."""

from __future__ import annotations

from typing import Iterable

from .models import MonitoredService, ServiceStatus, ServiceStatusEntry, StatusSnapshot


def domain_build_registry(entries: Iterable[MonitoredService]) -> tuple[MonitoredService, ...]:
    """Freeze registry entries into an ordered, immutable tuple.

    Args:
        entries: Registry entries in display order.

    Returns:
        tuple[MonitoredService, ...]: Immutable registry.

    Raises:
        ValueError: Raised when the registry is empty or has duplicate service keys.
    """

    registry = tuple(entries)
    if not registry:
        raise ValueError("registry must contain at least one monitored service")

    seen_keys: set[str] = set()
    for service in registry:
        if service.service_key in seen_keys:
            raise ValueError(f"duplicate service_key={service.service_key}")
        seen_keys.add(service.service_key)
    return registry


def domain_initial_snapshot(registry: tuple[MonitoredService, ...]) -> StatusSnapshot:
    """Build the pre-fetch snapshot with every service marked UNKNOWN.

    Args:
        registry: Ordered registry.

    Returns:
        StatusSnapshot: Snapshot with `last_fetched_ms` set to 0.
    """

    return StatusSnapshot(
        services=tuple(
            ServiceStatusEntry(name=service.display_name, url=service.url, status=ServiceStatus.UNKNOWN)
            for service in registry
        ),
        last_fetched_ms=0,
    )
