"""Health endpoint router composition."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from demo_service.config import AppSettings
from demo_service.domain import HealthReport, domain_utc_now


def api_create_health_router(
    settings: AppSettings,
    clock: Callable[[], datetime] | None = None,
) -> APIRouter:
    """Create health-check router reporting liveness and version.

    Args:
        settings: Runtime settings providing the version label.
        clock: Optional provider of the current UTC time.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    current_time = clock or domain_utc_now
    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return fixed healthy status with request time and version.

        Returns:
            JSONResponse: Health payload for liveness checks.
        """

        report = HealthReport(timestamp=current_time(), version=settings.app_version)
        return JSONResponse(content=report.domain_to_payload(), status_code=status.HTTP_200_OK)

    return router
