"""Domain models used across application layer boundaries."""

from .models import (
    HEALTHY_STATUS,
    INFO_MESSAGE,
    HealthReport,
    ServiceInfo,
    domain_resolve_hostname,
    domain_utc_now,
)
from .timeline import domain_build_attempt_event

__all__ = [
    "HEALTHY_STATUS",
    "INFO_MESSAGE",
    "HealthReport",
    "ServiceInfo",
    "domain_build_attempt_event",
    "domain_resolve_hostname",
    "domain_utc_now",
]
