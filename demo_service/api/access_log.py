"""JSON access logging middleware for the demo service.

Every request produces one ``INFO`` record on this module's logger whose
message is a JSON object with ``method``, ``path``, ``status`` and
``duration_ms``. Redirects also carry ``location``; since every unmatched
path redirects to ``/info``, that field shows which stray paths clients hit.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Emit a structured JSON access-log record after every HTTP request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        record: dict[str, object] = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
        }
        if 300 <= response.status_code < 400 and "location" in response.headers:
            record["location"] = response.headers["location"]
        logger.info(json.dumps(record))
        return response
