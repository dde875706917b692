"""Typed runtime settings with dotenv support and startup validation."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


def config_resolve_value(key: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the environment value for a key, falling back when absent or empty.

    Args:
        key: Environment variable name.
        default: Value returned when the variable is unset or empty.
        environ: Optional environment mapping; defaults to the process environment.

    Returns:
        str: Resolved configuration value.
    """

    source = os.environ if environ is None else environ
    value = source.get(key, "")
    if value:
        return value
    return default


class AppSettings(BaseSettings):
    """Settings for the HTTP service runtime.

    Environment variable names map directly to field names in uppercase.
    Empty variables are treated as unset, so `APP_VERSION=""` resolves to `dev`.

    Attributes:
        application_host: Host interface for web server binding.
        port: Web server port.
        app_version: Version label reported by the health and info endpoints.
        environment: Runtime environment label reported by the info endpoint.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )

    application_host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    app_version: str = Field(default="dev")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized_value


class VerifierSettings(BaseSettings):
    """Settings for the end-to-end health verifier.

    Attributes:
        app_url: Base URL of the deployed service under verification.
        verifier_health_path: Path suffix polled on the target service.
        verifier_request_timeout_seconds: Timeout applied to each health-check request.
        verifier_max_attempts: Number of health-check attempts before failing.
        verifier_retry_delay_seconds: Fixed delay between failed attempts.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )

    app_url: str = Field(default="http://go-e2e-app-service:8080", min_length=1)
    verifier_health_path: str = Field(default="/health")
    verifier_request_timeout_seconds: float = Field(default=10.0, gt=0)
    verifier_max_attempts: int = Field(default=10, ge=1)
    verifier_retry_delay_seconds: float = Field(default=2.0, ge=0)

    @field_validator("verifier_health_path")
    @classmethod
    def _validate_health_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("verifier_health_path must start with '/'")
        return value


def config_load_settings() -> AppSettings:
    """Load and validate service settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_verifier_settings() -> VerifierSettings:
    """Load and validate verifier settings from environment and dotenv.

    Returns:
        VerifierSettings: Validated verifier settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return VerifierSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Verifier configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
