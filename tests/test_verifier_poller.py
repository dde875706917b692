"""Regression tests for health verifier polling and retry behavior."""

from __future__ import annotations

import pytest

from demo_service.verifier import (
    HealthCheckResponse,
    HealthEndpointVerifier,
    VerificationOutcome,
    VerifierConnectionError,
    VerifierTimeoutError,
)


class _ScriptedTransport:
    """Test double replaying a scripted sequence of health-check results."""

    def __init__(self, script: list[object]):
        """Initialize transport double.

        Args:
            script: Items returned in order; exceptions are raised instead of returned.
        """

        self._script = list(script)
        self.calls: list[tuple[str, float]] = []

    def verifier_fetch_status(self, url: str, timeout_seconds: float) -> HealthCheckResponse:
        """Return or raise the next scripted item.

        Args:
            url: Requested URL.
            timeout_seconds: Per-request timeout.

        Returns:
            HealthCheckResponse: Next scripted response.

        Raises:
            Exception: Next scripted exception.
        """

        self.calls.append((url, timeout_seconds))
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


def _build_verifier(transport: _ScriptedTransport, sleep_calls: list[float]) -> HealthEndpointVerifier:
    """Create verifier with default budget and a recording sleep function.

    Args:
        transport: Scripted transport double.
        sleep_calls: List receiving every slept duration.

    Returns:
        HealthEndpointVerifier: Verifier under test.
    """

    return HealthEndpointVerifier(
        transport=transport,
        base_url="http://go-e2e-app-service:8080",
        sleep=sleep_calls.append,
    )


def test_verifier_passes_on_first_attempt() -> None:
    """Report PASS after exactly one attempt when the target answers 200."""

    transport = _ScriptedTransport([HealthCheckResponse(status_code=200)])
    sleep_calls: list[float] = []

    result = _build_verifier(transport, sleep_calls).verifier_run()

    assert result.outcome is VerificationOutcome.PASS
    assert result.passed
    assert result.attempts == 1
    assert result.status_code == 200
    assert result.error_detail is None
    assert sleep_calls == []
    assert transport.calls == [("http://go-e2e-app-service:8080/health", 10.0)]


def test_verifier_retries_connection_refusals_then_passes() -> None:
    """Report PASS on attempt four after three refusals and three two-second sleeps."""

    refused = VerifierConnectionError("connection refused")
    transport = _ScriptedTransport([refused, refused, refused, HealthCheckResponse(status_code=200)])
    sleep_calls: list[float] = []

    result = _build_verifier(transport, sleep_calls).verifier_run()

    assert result.outcome is VerificationOutcome.PASS
    assert result.attempts == 4
    assert sleep_calls == [2.0, 2.0, 2.0]
    assert result.total_sleep_seconds == pytest.approx(6.0)
    assert [event["status"] for event in result.timeline] == ["retrying", "retrying", "retrying", "passed"]


def test_verifier_fails_immediately_on_non_success_status() -> None:
    """Report FAIL after one attempt without retrying a 503 response."""

    transport = _ScriptedTransport([HealthCheckResponse(status_code=503), HealthCheckResponse(status_code=200)])
    sleep_calls: list[float] = []

    result = _build_verifier(transport, sleep_calls).verifier_run()

    assert result.outcome is VerificationOutcome.FAIL
    assert result.attempts == 1
    assert result.status_code == 503
    assert "got 503" in result.error_detail
    assert sleep_calls == []
    assert len(transport.calls) == 1


def test_verifier_fails_after_exhausting_attempts() -> None:
    """Report FAIL after ten unreachable attempts and eighteen seconds of sleep."""

    transport = _ScriptedTransport([VerifierTimeoutError(f"timeout {index}") for index in range(10)])
    sleep_calls: list[float] = []

    result = _build_verifier(transport, sleep_calls).verifier_run()

    assert result.outcome is VerificationOutcome.FAIL
    assert result.attempts == 10
    assert result.status_code is None
    assert len(sleep_calls) == 9
    assert result.total_sleep_seconds == pytest.approx(18.0)
    assert result.error_detail == "Health endpoint failed after 10 attempts: timeout 9"
    assert result.timeline[-1]["status"] == "failed"


def test_verifier_retries_builtin_transport_errors() -> None:
    """Treat plain ConnectionError and TimeoutError from any transport as retryable."""

    transport = _ScriptedTransport([ConnectionError("reset"), TimeoutError("slow"), HealthCheckResponse(status_code=200)])
    sleep_calls: list[float] = []

    result = _build_verifier(transport, sleep_calls).verifier_run()

    assert result.passed
    assert result.attempts == 3


def test_verifier_composes_target_url_without_double_slash() -> None:
    """Strip a trailing slash from the base URL before appending the health path."""

    verifier = HealthEndpointVerifier(transport=_ScriptedTransport([]), base_url="http://localhost:8080/")

    assert verifier.target_url == "http://localhost:8080/health"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"base_url": "  "}, "base_url must not be blank"),
        ({"max_attempts": 0}, "max_attempts must be >= 1"),
        ({"request_timeout_seconds": 0}, "request_timeout_seconds must be > 0"),
        ({"retry_delay_seconds": -1}, "retry_delay_seconds must be >= 0"),
        ({"health_path": "health"}, "health_path must start with '/'"),
    ],
)
def test_verifier_rejects_invalid_configuration(overrides: dict[str, object], message: str) -> None:
    """Raise ValueError for invalid constructor arguments.

    Args:
        overrides: Constructor argument overrides.
        message: Expected error message fragment.
    """

    arguments: dict[str, object] = {"transport": _ScriptedTransport([]), "base_url": "http://localhost:8080"}
    arguments.update(overrides)

    with pytest.raises(ValueError, match=message):
        HealthEndpointVerifier(**arguments)
