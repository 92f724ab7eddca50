"""Typed interfaces for the status query surface."""

from typing import Protocol

from traefik_status.domain import StatusSnapshot


class StatusQueryPort(Protocol):
    """Port definition consumed by display surfaces."""

    def status_get_current_snapshot(self, now_ms: int | None = None) -> StatusSnapshot:
        """Return the current snapshot, refreshing it first when stale.

        Args:
            now_ms: Optional current time in epoch milliseconds.

        Returns:
            StatusSnapshot: Current, possibly stale or error-flagged, snapshot.
        """

    def status_force_refresh(self) -> None:
        """Make the next snapshot read refresh regardless of snapshot age."""
