"""Bounded health-endpoint polling verifier.

The verifier moves through two states. While POLLING it issues one GET per
attempt; it reaches DONE with PASS on HTTP 200, with FAIL on any other
status, and with FAIL once transport errors have used up the attempt budget.
Only transport errors and timeouts are retried.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from demo_service.domain import domain_build_attempt_event

from .interfaces import (
    HealthCheckTransportPort,
    VerificationOutcome,
    VerificationResult,
    VerifierState,
)

logger = logging.getLogger(__name__)

_HTTP_OK = 200


class HealthEndpointVerifier:
    """Poll a service health endpoint until it answers or the budget is spent."""

    def __init__(
        self,
        transport: HealthCheckTransportPort,
        base_url: str,
        health_path: str = "/health",
        request_timeout_seconds: float = 10.0,
        max_attempts: int = 10,
        retry_delay_seconds: float = 2.0,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize verifier.

        Args:
            transport: Health-check transport issuing the HTTP requests.
            base_url: Base URL of the target service.
            health_path: Path suffix appended to the base URL.
            request_timeout_seconds: Timeout passed to every request.
            max_attempts: Total number of health-check attempts.
            retry_delay_seconds: Fixed delay slept after each failed attempt that is retried.
            sleep: Optional sleep function; defaults to `time.sleep`.

        Raises:
            ValueError: Raised when configuration values are invalid.
        """

        normalized_base_url = base_url.strip()
        if transport is None:
            raise ValueError("transport must not be None")
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if not health_path.startswith("/"):
            raise ValueError("health_path must start with '/'")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if retry_delay_seconds < 0:
            raise ValueError("retry_delay_seconds must be >= 0")

        self._transport = transport
        self._target_url = normalized_base_url.rstrip("/") + health_path
        self._request_timeout_seconds = request_timeout_seconds
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds
        self._sleep = sleep or time.sleep

    @property
    def target_url(self) -> str:
        """Return the fully composed URL requested on every attempt."""

        return self._target_url

    def verifier_run(self) -> VerificationResult:
        """Poll the target until a terminal state is reached.

        Returns:
            VerificationResult: Terminal verdict with attempt diagnostics.
        """

        logger.info("Testing application health at: %s", self._target_url)

        state = VerifierState.POLLING
        outcome = VerificationOutcome.FAIL
        attempt = 0
        status_code: int | None = None
        error_detail: str | None = None
        total_sleep_seconds = 0.0
        timeline: list[dict[str, object]] = []

        while state is VerifierState.POLLING:
            attempt += 1
            try:
                response = self._transport.verifier_fetch_status(
                    url=self._target_url,
                    timeout_seconds=self._request_timeout_seconds,
                )
            except (ConnectionError, TimeoutError) as error:
                logger.warning("Health check attempt %d failed: %s", attempt, error)
                if attempt < self._max_attempts:
                    timeline.append(
                        domain_build_attempt_event(
                            attempt=attempt,
                            status="retrying",
                            details={"error": str(error), "retry_after_seconds": self._retry_delay_seconds},
                        )
                    )
                    self._sleep(self._retry_delay_seconds)
                    total_sleep_seconds += self._retry_delay_seconds
                    continue

                error_detail = f"Health endpoint failed after {attempt} attempts: {error}"
                timeline.append(
                    domain_build_attempt_event(attempt=attempt, status="failed", details={"error": str(error)})
                )
                state = VerifierState.DONE
                continue

            status_code = response.status_code
            state = VerifierState.DONE
            if status_code == _HTTP_OK:
                outcome = VerificationOutcome.PASS
                timeline.append(
                    domain_build_attempt_event(attempt=attempt, status="passed", details={"status_code": status_code})
                )
                logger.info("Health check passed on attempt %d", attempt)
            else:
                error_detail = f"Expected status {_HTTP_OK}, got {status_code} on attempt {attempt}"
                timeline.append(
                    domain_build_attempt_event(attempt=attempt, status="failed", details={"status_code": status_code})
                )

        if outcome is VerificationOutcome.FAIL:
            logger.error("Health verification failed: %s", error_detail)

        return VerificationResult(
            outcome=outcome,
            attempts=attempt,
            target_url=self._target_url,
            status_code=status_code,
            error_detail=error_detail,
            total_sleep_seconds=total_sleep_seconds,
            timeline=timeline,
        )
