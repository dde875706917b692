"""FastAPI application factory for the demo service.

Each call builds a new application that owns its own routing table; the
settings object is passed in explicitly instead of being read from the
environment by the handlers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse

from demo_service.config import AppSettings

from .access_log import AccessLogMiddleware
from .routers import api_create_health_router, api_create_info_router


def create_api_application(
    settings: AppSettings,
    clock: Callable[[], datetime] | None = None,
    hostname_provider: Callable[[], str] | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        clock: Optional provider of the current UTC time for health responses.
        hostname_provider: Optional host name lookup for info responses.

    Returns:
        FastAPI: Application exposing `/health`, `/info` and a catch-all redirect to `/info`.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Demo Service", version=settings.app_version)
    application.add_middleware(AccessLogMiddleware)

    application.include_router(api_create_health_router(settings=settings, clock=clock))
    application.include_router(api_create_info_router(settings=settings, hostname_provider=hostname_provider))

    # Registered last: matches `/` and every path not claimed by a router above.
    @application.get("/{path:path}", include_in_schema=False)
    def api_root_redirect(path: str) -> RedirectResponse:
        """Redirect the root and any unmatched path to the info endpoint.

        Args:
            path: Unmatched request path, ignored.

        Returns:
            RedirectResponse: 302 response pointing at `/info`.
        """

        _ = path
        return RedirectResponse(url="/info", status_code=status.HTTP_302_FOUND)

    return application
