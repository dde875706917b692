"""Application bootstrap wiring for startup validation and dependency assembly."""

from __future__ import annotations

from fastapi import FastAPI

from demo_service.api import create_api_application
from demo_service.config import AppSettings, VerifierSettings, config_load_settings, config_load_verifier_settings
from demo_service.verifier import HealthCheckTransportPort, HealthEndpointVerifier, HttpxHealthCheckTransport


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(settings=resolved_settings)


def bootstrap_create_health_verifier(
    settings: VerifierSettings | None = None,
    transport: HealthCheckTransportPort | None = None,
) -> HealthEndpointVerifier:
    """Build the end-to-end health verifier from verifier settings.

    Args:
        settings: Optional preloaded verifier settings.
        transport: Optional health-check transport; an httpx transport is created when omitted.

    Returns:
        HealthEndpointVerifier: Verifier targeting `APP_URL` plus the health path.

    Raises:
        SettingsLoadError: Raised when verifier configuration validation fails.
    """

    resolved_settings = settings or config_load_verifier_settings()
    return HealthEndpointVerifier(
        transport=transport or HttpxHealthCheckTransport(),
        base_url=resolved_settings.app_url,
        health_path=resolved_settings.verifier_health_path,
        request_timeout_seconds=resolved_settings.verifier_request_timeout_seconds,
        max_attempts=resolved_settings.verifier_max_attempts,
        retry_delay_seconds=resolved_settings.verifier_retry_delay_seconds,
    )
