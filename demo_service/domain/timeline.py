"""Timeline event helpers for verifier diagnostics."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .models import domain_utc_now


def domain_build_attempt_event(
    attempt: int,
    status: str,
    details: dict[str, Any] | None = None,
    occurred_at: datetime | None = None,
) -> dict[str, object]:
    """Build one structured event describing a single health-check attempt.

    Args:
        attempt: One-based attempt number.
        status: Attempt status marker such as `passed`, `retrying` or `failed`.
        details: Optional diagnostic details (status code, error text).
        occurred_at: Optional event time; defaults to now in UTC.

    Returns:
        dict[str, object]: Structured timeline event.
    """

    event_payload: dict[str, object] = {
        "attempt": attempt,
        "status": status,
        "at_utc": (occurred_at or domain_utc_now()).isoformat(),
    }
    if details:
        event_payload["details"] = details
    return event_payload
