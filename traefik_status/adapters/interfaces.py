"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass, field
from typing import Protocol

from traefik_status.domain import RawBackendRecord


@dataclass(frozen=True)
class TraefikCredentials:
    """Basic auth credentials for the Traefik API.

    Attributes:
        username: Basic auth username.
        password: Basic auth password, excluded from repr.
    """

    username: str
    password: str = field(repr=False)


class HealthFetcherPort(Protocol):
    """Port definition for fetching raw service health from the proxy."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable upstream source identifier.
        """

    def adapter_fetch_services(
        self,
        endpoint: str,
        credentials: TraefikCredentials,
    ) -> tuple[RawBackendRecord, ...]:
        """Fetch the upstream service list with one request.

        Args:
            endpoint: Upstream API URL.
            credentials: Basic auth credentials.

        Returns:
            tuple[RawBackendRecord, ...]: Parsed records in upstream order.

        Raises:
            TraefikFetchError: Raised for any precondition, transport, status or parse failure.
        """
