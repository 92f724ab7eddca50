"""Single-slot snapshot cache with fixed time-to-live."""

from __future__ import annotations

import threading
from typing import Final

import structlog

from traefik_status.domain import MonitoredService, StatusSnapshot, domain_initial_snapshot

logger = structlog.get_logger(__name__)

CACHE_TTL_MS: Final[int] = 30_000


class SnapshotCache:
    """Own the one status snapshot of a process and decide its staleness.

    Snapshots are frozen, so `cache_get` hands out the stored instance itself.
    """

    def __init__(self, registry: tuple[MonitoredService, ...]):
        """Initialize the cache with every registry entry marked UNKNOWN.

        Args:
            registry: Ordered registry.

        Raises:
            ValueError: Raised when registry is empty.
        """

        if not registry:
            raise ValueError("registry must not be empty")

        self._registry_size = len(registry)
        self._slot_lock = threading.Lock()
        self._snapshot = domain_initial_snapshot(registry)

    def cache_is_stale(self, now_ms: int) -> bool:
        """Return whether the snapshot is older than the TTL at `now_ms`."""

        with self._slot_lock:
            return now_ms - self._snapshot.last_fetched_ms > CACHE_TTL_MS

    def cache_get(self) -> StatusSnapshot:
        """Return the current snapshot."""

        with self._slot_lock:
            return self._snapshot

    def cache_replace(self, snapshot: StatusSnapshot) -> None:
        """Swap the cached snapshot.

        Args:
            snapshot: Replacement snapshot.

        Raises:
            ValueError: Raised when the snapshot does not cover the whole registry.
        """

        if len(snapshot.services) != self._registry_size:
            raise ValueError(
                f"snapshot has {len(snapshot.services)} services, registry has {self._registry_size}"
            )
        with self._slot_lock:
            self._snapshot = snapshot

    def cache_invalidate(self) -> None:
        """Reset the fetch timestamp while keeping the displayed statuses."""

        with self._slot_lock:
            self._snapshot = self._snapshot.snapshot_invalidated()
        logger.info("status_cache_invalidated")
