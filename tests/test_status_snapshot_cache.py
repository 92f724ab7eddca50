"""Tests for snapshot cache staleness, replacement and invalidation."""

import pytest

from traefik_status.domain import MonitoredService, ServiceStatus, ServiceStatusEntry, StatusSnapshot
from traefik_status.status import CACHE_TTL_MS, SnapshotCache

_REGISTRY = (
    MonitoredService(service_key="a@docker", display_name="A", url="a.example"),
    MonitoredService(service_key="b@docker", display_name="B", url="b.example"),
)
_NOW_MS = 1_700_000_000_000


def _up_snapshot(last_fetched_ms: int) -> StatusSnapshot:
    """Build a snapshot with both services UP.

    Args:
        last_fetched_ms: Fetch timestamp.

    Returns:
        StatusSnapshot: Snapshot fixture.
    """

    return StatusSnapshot(
        services=(
            ServiceStatusEntry(name="A", url="a.example", status=ServiceStatus.UP),
            ServiceStatusEntry(name="B", url="b.example", status=ServiceStatus.UP),
        ),
        last_fetched_ms=last_fetched_ms,
    )


def test_status_cache_ttl_is_thirty_seconds() -> None:
    """Use a fixed 30 second TTL by default.

    Returns:
        None: Assertions validate TTL constant.
    """

    assert CACHE_TTL_MS == 30_000


def test_status_cache_starts_stale_with_unknown_services() -> None:
    """Start stale so the first read fetches.

    Returns:
        None: Assertions validate initial cache state.
    """

    cache = SnapshotCache(registry=_REGISTRY)

    assert cache.cache_is_stale(_NOW_MS)
    assert cache.cache_get().last_fetched_ms == 0
    assert {entry.status for entry in cache.cache_get().services} == {ServiceStatus.UNKNOWN}


def test_status_cache_staleness_boundary_is_exclusive() -> None:
    """Stay fresh at exactly TTL age and go stale one millisecond later.

    Returns:
        None: Assertions validate boundary behavior.
    """

    cache = SnapshotCache(registry=_REGISTRY)
    cache.cache_replace(_up_snapshot(last_fetched_ms=_NOW_MS))

    assert not cache.cache_is_stale(_NOW_MS + CACHE_TTL_MS)
    assert cache.cache_is_stale(_NOW_MS + CACHE_TTL_MS + 1)


def test_status_cache_invalidate_keeps_services() -> None:
    """Reset the fetch timestamp without resetting displayed statuses.

    Returns:
        None: Assertions validate invalidation.
    """

    cache = SnapshotCache(registry=_REGISTRY)
    cache.cache_replace(_up_snapshot(last_fetched_ms=_NOW_MS))

    cache.cache_invalidate()

    assert cache.cache_is_stale(_NOW_MS + 1)
    assert cache.cache_get().last_fetched_ms == 0
    assert cache.cache_get().services == _up_snapshot(last_fetched_ms=_NOW_MS).services


def test_status_cache_replace_rejects_registry_size_mismatch() -> None:
    """Reject snapshots that do not cover every registry entry.

    Returns:
        None: Assertions validate replacement guard.
    """

    cache = SnapshotCache(registry=_REGISTRY)
    partial_snapshot = StatusSnapshot(
        services=(ServiceStatusEntry(name="A", url="a.example", status=ServiceStatus.UP),),
        last_fetched_ms=_NOW_MS,
    )

    with pytest.raises(ValueError, match="registry has 2"):
        cache.cache_replace(partial_snapshot)


def test_status_cache_returned_snapshot_is_immutable() -> None:
    """Hand out frozen snapshots callers cannot mutate.

    Returns:
        None: Assertions validate immutability.
    """

    snapshot = SnapshotCache(registry=_REGISTRY).cache_get()

    with pytest.raises(AttributeError):
        snapshot.last_fetched_ms = 5  # type: ignore[misc]
