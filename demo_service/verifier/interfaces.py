"""Typed interfaces for verifier-layer responsibilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class VerifierState(str, Enum):
    """Lifecycle state of one verifier run."""

    POLLING = "polling"
    DONE = "done"


class VerificationOutcome(str, Enum):
    """Terminal verdict of one verifier run."""

    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class HealthCheckResponse:
    """Completed health-check response as seen by the verifier.

    Attributes:
        status_code: HTTP status code returned by the target.
    """

    status_code: int


@dataclass(frozen=True)
class VerificationResult:
    """Result contract for one verifier run.

    Attributes:
        outcome: PASS or FAIL verdict.
        attempts: Number of health-check attempts issued.
        target_url: Requested URL.
        status_code: Last observed HTTP status, or None when no response completed.
        error_detail: Diagnostic text for failures, None on success.
        total_sleep_seconds: Sum of delays slept between attempts.
        timeline: One structured event per attempt.
    """

    outcome: VerificationOutcome
    attempts: int
    target_url: str
    status_code: int | None = None
    error_detail: str | None = None
    total_sleep_seconds: float = 0.0
    timeline: list[dict[str, object]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Return whether the run ended in PASS."""

        return self.outcome is VerificationOutcome.PASS


class HealthCheckTransportPort(Protocol):
    """Port definition for issuing one health-check request."""

    def verifier_fetch_status(self, url: str, timeout_seconds: float) -> HealthCheckResponse:
        """Issue one GET request and return its completed response.

        Args:
            url: Absolute URL to request.
            timeout_seconds: Per-request timeout.

        Returns:
            HealthCheckResponse: Completed response, whatever its status code.

        Raises:
            ConnectionError: Raised when the request cannot be delivered.
            TimeoutError: Raised when the request exceeds the timeout.
        """
