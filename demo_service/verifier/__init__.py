"""Verifier package for end-to-end health polling."""

from .errors import (
    VerifierClusterConfigError,
    VerifierConnectionError,
    VerifierError,
    VerifierTimeoutError,
)
from .interfaces import (
    HealthCheckResponse,
    HealthCheckTransportPort,
    VerificationOutcome,
    VerificationResult,
    VerifierState,
)
from .poller import HealthEndpointVerifier
from .transport import HttpxHealthCheckTransport

__all__ = [
    "HealthCheckResponse",
    "HealthCheckTransportPort",
    "HealthEndpointVerifier",
    "HttpxHealthCheckTransport",
    "VerificationOutcome",
    "VerificationResult",
    "VerifierClusterConfigError",
    "VerifierConnectionError",
    "VerifierError",
    "VerifierState",
    "VerifierTimeoutError",
]
