"""Status cache and demand-driven refresh orchestration."""

from .interfaces import StatusQueryPort
from .refresh_controller import RefreshController, RefreshControllerConfig, status_clock_epoch_ms
from .snapshot_cache import CACHE_TTL_MS, SnapshotCache

__all__ = [
    "CACHE_TTL_MS",
    "RefreshController",
    "RefreshControllerConfig",
    "SnapshotCache",
    "StatusQueryPort",
    "status_clock_epoch_ms",
]
