"""Pure mapping from upstream health records to per-service status."""

from __future__ import annotations

from typing import Sequence

from .models import MonitoredService, RawBackendRecord, ServiceStatus, ServiceStatusEntry

_UP_STATE = "UP"


def domain_classify_services(
    registry: Sequence[MonitoredService],
    raw_records: Sequence[RawBackendRecord],
) -> tuple[ServiceStatusEntry, ...]:
    """Classify every registry entry against one set of upstream records.

    A service without a matching record is DOWN, so a backend that disappears
    from the proxy alerts instead of going silent. When upstream reports the
    same name more than once the first record wins.

    Args:
        registry: Ordered registry entries.
        raw_records: Upstream records in upstream order.

    Returns:
        tuple[ServiceStatusEntry, ...]: Status rows in registry order.
    """

    records_by_name: dict[str, RawBackendRecord] = {}
    for record in raw_records:
        records_by_name.setdefault(record.name, record)

    return tuple(
        ServiceStatusEntry(
            name=service.display_name,
            url=service.url,
            status=domain_classify_record(records_by_name.get(service.service_key)),
        )
        for service in registry
    )


def domain_classify_record(record: RawBackendRecord | None) -> ServiceStatus:
    """Classify one upstream record, or its absence.

    Args:
        record: Matching upstream record, None when absent.

    Returns:
        ServiceStatus: UP when any replica reports UP, DOWN otherwise.
    """

    if record is None or not record.server_statuses:
        return ServiceStatus.DOWN
    if any(state == _UP_STATE for state in record.server_statuses.values()):
        return ServiceStatus.UP
    return ServiceStatus.DOWN
