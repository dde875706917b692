"""Info endpoint router composition for host and configuration details."""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from demo_service.config import AppSettings
from demo_service.domain import ServiceInfo, domain_resolve_hostname


def api_create_info_router(
    settings: AppSettings,
    hostname_provider: Callable[[], str] | None = None,
) -> APIRouter:
    """Create info router exposing host identity and resolved configuration.

    Args:
        settings: Runtime settings providing version and environment labels.
        hostname_provider: Optional host name lookup used instead of the socket module.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_info_details() -> JSONResponse:
        """Return greeting, host name and exposed configuration values.

        Returns:
            JSONResponse: Info payload. Host name is empty when lookup fails.
        """

        service_info = ServiceInfo(
            hostname=domain_resolve_hostname(hostname_provider),
            env={
                "APP_VERSION": settings.app_version,
                "ENVIRONMENT": settings.environment,
            },
        )
        return JSONResponse(content=service_info.domain_to_payload(), status_code=status.HTTP_200_OK)

    return router
