"""Demand-driven refresh of the status snapshot with single-flight fetching."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

import structlog

from traefik_status.adapters import HealthFetcherPort, TraefikCredentials, TraefikFetchError
from traefik_status.adapters.traefik_errors import (
    FETCH_ERROR_NETWORK_FAILURE,
    FETCH_ERROR_PARSE_FAILURE,
)
from traefik_status.domain import MonitoredService, StatusSnapshot, domain_classify_services

from .interfaces import StatusQueryPort
from .snapshot_cache import SnapshotCache

logger = structlog.get_logger(__name__)

_FALLBACK_ERROR_MESSAGE = "Failed to fetch status"


def status_clock_epoch_ms() -> int:
    """Return wall-clock time in epoch milliseconds."""

    return int(time.time() * 1000)


@dataclass(frozen=True)
class RefreshControllerConfig:
    """Upstream connection values used on every refresh.

    Blank values are allowed here; they surface as a `config_missing` error on
    the snapshot at fetch time.

    Attributes:
        endpoint: Traefik services endpoint URL.
        credentials: Basic auth credentials.
    """

    endpoint: str
    credentials: TraefikCredentials


class RefreshController(StatusQueryPort):
    """Serve snapshots from the cache and refresh them when stale."""

    def __init__(
        self,
        registry: tuple[MonitoredService, ...],
        cache: SnapshotCache,
        fetcher: HealthFetcherPort,
        config: RefreshControllerConfig,
        clock: Callable[[], int] | None = None,
    ):
        """Initialize refresh controller dependencies.

        Args:
            registry: Ordered registry used for classification.
            cache: Snapshot cache owned by this controller.
            fetcher: Adapter used to fetch upstream health.
            config: Upstream connection values.
            clock: Optional epoch-milliseconds clock, wall clock by default.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if not registry:
            raise ValueError("registry must not be empty")
        if cache is None:
            raise ValueError("cache must not be None")
        if fetcher is None:
            raise ValueError("fetcher must not be None")
        if config is None:
            raise ValueError("config must not be None")

        self._registry = registry
        self._cache = cache
        self._fetcher = fetcher
        self._config = config
        self._clock = clock or status_clock_epoch_ms
        self._refresh_lock = threading.Lock()

    def status_get_current_snapshot(self, now_ms: int | None = None) -> StatusSnapshot:
        """Return the cached snapshot, refreshing it first when stale.

        Staleness is checked again once the refresh lock is held, so callers
        that queued behind an in-flight refresh get its result without a
        second fetch. Fetch failures never propagate: they are recorded on the
        returned snapshot.

        Args:
            now_ms: Optional current time in epoch milliseconds.

        Returns:
            StatusSnapshot: Current snapshot.
        """

        resolved_now_ms = self._clock() if now_ms is None else now_ms
        if not self._cache.cache_is_stale(resolved_now_ms):
            logger.debug("status_cache_hit", now_ms=resolved_now_ms)
            return self._cache.cache_get()

        with self._refresh_lock:
            if not self._cache.cache_is_stale(resolved_now_ms):
                logger.debug("status_refresh_coalesced", now_ms=resolved_now_ms)
                return self._cache.cache_get()
            return self._status_refresh(now_ms=resolved_now_ms)

    def status_force_refresh(self) -> None:
        """Invalidate the cache so the next read fetches."""

        self._cache.cache_invalidate()

    def _status_refresh(self, now_ms: int) -> StatusSnapshot:
        """Fetch, classify and store one new snapshot. Caller holds the refresh lock."""

        try:
            records = self._fetcher.adapter_fetch_services(
                endpoint=self._config.endpoint,
                credentials=self._config.credentials,
            )
        except (TraefikFetchError, OSError, ValueError, RuntimeError) as error:
            error_kind = self._status_error_kind_for_exception(error)
            failed_snapshot = self._cache.cache_get().snapshot_with_failure(
                attempted_at_ms=now_ms,
                error=str(error) or _FALLBACK_ERROR_MESSAGE,
                error_kind=error_kind,
            )
            self._cache.cache_replace(failed_snapshot)
            logger.warning(
                "status_refresh_failed",
                error_kind=error_kind,
                error_message=failed_snapshot.error,
                source=self._fetcher.adapter_source_name(),
            )
            return failed_snapshot

        refreshed_snapshot = StatusSnapshot(
            services=domain_classify_services(self._registry, records),
            last_fetched_ms=now_ms,
        )
        self._cache.cache_replace(refreshed_snapshot)
        logger.info(
            "status_refresh_completed",
            statuses={entry.name: entry.status.value for entry in refreshed_snapshot.services},
        )
        return refreshed_snapshot

    def _status_error_kind_for_exception(self, error: Exception) -> str:
        """Map a caught fetch exception to a failure category.

        Args:
            error: Caught fetch exception.

        Returns:
            str: Failure category.
        """

        if isinstance(error, TraefikFetchError):
            return error.kind
        if isinstance(error, OSError):
            return FETCH_ERROR_NETWORK_FAILURE
        if isinstance(error, ValueError):
            return FETCH_ERROR_PARSE_FAILURE
        return "unexpected"
