"""Domain models and pure status rules shared across layers."""

from .classifier import domain_classify_services
from .models import (
    MonitoredService,
    RawBackendRecord,
    ServiceStatus,
    ServiceStatusEntry,
    StatusSnapshot,
)
from .registry import domain_build_registry, domain_initial_snapshot
from .timeline import domain_format_relative_time

__all__ = [
    "MonitoredService",
    "RawBackendRecord",
    "ServiceStatus",
    "ServiceStatusEntry",
    "StatusSnapshot",
    "domain_build_registry",
    "domain_classify_services",
    "domain_format_relative_time",
    "domain_initial_snapshot",
]
