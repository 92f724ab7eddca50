"""Human-readable timestamp labels for status displays."""

from __future__ import annotations


def domain_format_relative_time(last_fetched_ms: int, now_ms: int) -> str:
    """Render the age of a fetch timestamp as a short label.

    Args:
        last_fetched_ms: Fetch timestamp in epoch milliseconds, 0 when never fetched.
        now_ms: Current time in epoch milliseconds.

    Returns:
        str: `Never`, `Just now`, `<n> minutes ago` or `<n> hours ago`.
    """

    if last_fetched_ms == 0:
        return "Never"

    elapsed_seconds = max(now_ms - last_fetched_ms, 0) // 1000
    if elapsed_seconds < 60:
        return "Just now"
    if elapsed_seconds < 3600:
        return f"{elapsed_seconds // 60} minutes ago"
    return f"{elapsed_seconds // 3600} hours ago"
