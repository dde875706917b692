"""Typed domain models shared across runtime layers.

Response contracts are built fresh per request from settings, host identity
and the current time; nothing here is stored between requests.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

HEALTHY_STATUS = "healthy"
INFO_MESSAGE = "Hello from Go E2E Test App!"


@dataclass(frozen=True)
class HealthReport:
    """Health response contract served by the health endpoint.

    Attributes:
        status: Fixed service status marker.
        timestamp: Request time in UTC.
        version: Resolved application version label.
    """

    timestamp: datetime
    version: str
    status: str = HEALTHY_STATUS

    def domain_to_payload(self) -> dict[str, str]:
        """Render the report as a JSON-ready mapping.

        Returns:
            dict[str, str]: Health payload with ISO-8601 timestamp.
        """

        return {
            "status": self.status,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
        }


@dataclass(frozen=True)
class ServiceInfo:
    """Descriptive response contract served by the info endpoint.

    Attributes:
        hostname: Host identity of the serving process, empty when unknown.
        env: Resolved configuration values exposed to callers.
        message: Fixed greeting message.
    """

    hostname: str
    env: dict[str, str] = field(default_factory=dict)
    message: str = INFO_MESSAGE

    def domain_to_payload(self) -> dict[str, object]:
        """Render the info document as a JSON-ready mapping.

        Returns:
            dict[str, object]: Info payload.
        """

        return {
            "message": self.message,
            "hostname": self.hostname,
            "env": dict(self.env),
        }


def domain_utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""

    return datetime.now(timezone.utc)


def domain_resolve_hostname(hostname_provider: Callable[[], str] | None = None) -> str:
    """Resolve the process host name on a best-effort basis.

    Args:
        hostname_provider: Optional lookup function; defaults to `socket.gethostname`.

    Returns:
        str: Host name, or an empty string when the lookup fails.
    """

    provider = hostname_provider or socket.gethostname
    try:
        return provider()
    except OSError:
        return ""
