"""httpx-backed transport for health-check requests."""

from __future__ import annotations

from typing import Final

import httpx

from .errors import VerifierConnectionError, VerifierTimeoutError
from .interfaces import HealthCheckTransportPort, HealthCheckResponse


class HttpxHealthCheckTransport(HealthCheckTransportPort):
    """Health-check transport that reuses one pooled `httpx.Client` for all attempts."""

    _USER_AGENT: Final[str] = "demo-service-verifier/1.0 (Python/httpx)"

    def __init__(self, client: httpx.Client | None = None):
        """Initialize transport.

        Args:
            client: Optional preconfigured client; a redirect-following client is
                created and owned by the transport when omitted.
        """

        self._owns_client = client is None
        self._client = client or httpx.Client(
            follow_redirects=True,
            headers={"User-Agent": self._USER_AGENT},
        )

    def verifier_fetch_status(self, url: str, timeout_seconds: float) -> HealthCheckResponse:
        """Issue one GET request and map httpx failures to typed errors.

        Args:
            url: Absolute URL to request.
            timeout_seconds: Per-request timeout.

        Returns:
            HealthCheckResponse: Completed response with its status code.

        Raises:
            VerifierTimeoutError: Raised when the request times out.
            VerifierConnectionError: Raised for any other request failure, including malformed URLs.
        """

        try:
            response = self._client.get(url, timeout=timeout_seconds)
        except httpx.TimeoutException as error:
            raise VerifierTimeoutError(f"GET {url} timed out after {timeout_seconds}s") from error
        except (httpx.RequestError, httpx.InvalidURL) as error:
            raise VerifierConnectionError(f"GET {url} failed: {error}") from error
        return HealthCheckResponse(status_code=response.status_code)

    def close(self) -> None:
        """Close the underlying client when this transport created it."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxHealthCheckTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
