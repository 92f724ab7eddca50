"""Status router exposing the snapshot query and manual refresh action."""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from traefik_status.domain import StatusSnapshot, domain_format_relative_time
from traefik_status.status import StatusQueryPort, status_clock_epoch_ms


def api_create_status_router(
    status_service: StatusQueryPort,
    clock: Callable[[], int] | None = None,
) -> APIRouter:
    """Create status router backed by the refresh controller.

    Args:
        status_service: Snapshot query surface.
        clock: Optional epoch-milliseconds clock used for both refresh and labels.

    Returns:
        APIRouter: Router exposing `/status` endpoints.

    Raises:
        ValueError: Raised when status_service is missing.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    resolved_clock = clock or status_clock_epoch_ms
    router = APIRouter(prefix="/status", tags=["status"])

    @router.get("")
    def api_status_snapshot() -> JSONResponse:
        """Return the current service status snapshot.

        Returns:
            JSONResponse: Serialized snapshot. Upstream failures are reported
            in the `error` field with HTTP 200.
        """

        now_ms = resolved_clock()
        snapshot = status_service.status_get_current_snapshot(now_ms=now_ms)
        return JSONResponse(
            content=api_serialize_status_snapshot(snapshot, now_ms=now_ms),
            status_code=status.HTTP_200_OK,
        )

    @router.post("/refresh")
    def api_status_refresh() -> JSONResponse:
        """Bypass the cache age and return a freshly fetched snapshot."""

        status_service.status_force_refresh()
        now_ms = resolved_clock()
        snapshot = status_service.status_get_current_snapshot(now_ms=now_ms)
        return JSONResponse(
            content=api_serialize_status_snapshot(snapshot, now_ms=now_ms),
            status_code=status.HTTP_200_OK,
        )

    return router


def api_serialize_status_snapshot(snapshot: StatusSnapshot, now_ms: int) -> dict[str, object]:
    """Serialize one snapshot to a JSON payload.

    Args:
        snapshot: Snapshot to serialize.
        now_ms: Current time used for the relative `last_updated` label.

    Returns:
        dict[str, object]: JSON-serializable snapshot payload.
    """

    return {
        "services": [
            {"name": entry.name, "url": entry.url, "status": entry.status.value}
            for entry in snapshot.services
        ],
        "last_fetched_ms": snapshot.last_fetched_ms,
        "last_updated": domain_format_relative_time(snapshot.last_fetched_ms, now_ms),
        "error": snapshot.error,
        "error_kind": snapshot.error_kind,
    }


__all__ = ["api_create_status_router", "api_serialize_status_snapshot"]
