"""Project-native typed exceptions for verifier failures."""

from __future__ import annotations


class VerifierError(Exception):
    """Base exception for verifier-level failures."""


class VerifierConnectionError(VerifierError, ConnectionError):
    """Transport-level connectivity failure while probing the target."""


class VerifierTimeoutError(VerifierError, TimeoutError):
    """Health-check request did not complete within the per-request timeout."""


class VerifierClusterConfigError(VerifierError, RuntimeError):
    """Neither in-cluster nor kubeconfig credentials could be loaded."""
