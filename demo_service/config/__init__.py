"""Configuration package for runtime settings and startup validation."""

from .log_setup import config_configure_logging
from .settings import (
    AppSettings,
    SettingsLoadError,
    VerifierSettings,
    config_load_settings,
    config_load_verifier_settings,
    config_resolve_value,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "VerifierSettings",
    "config_configure_logging",
    "config_load_settings",
    "config_load_verifier_settings",
    "config_resolve_value",
]
