"""REST transport: one request in, one raw response out."""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter

from ..telemetry import log_request_completed
from .http_client import HTTPClient, RawResponse


class RESTTransport:
    """Sends requests relative to a workspace endpoint.

    Absolute URLs (continuation links, operation status URLs) are sent as-is.
    Default headers are read-only after construction and are merged under the
    per-request headers.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: HTTPClient | None = None,
        default_headers: Mapping[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = http_client or HTTPClient(base_url=base_url, timeout=timeout)
        if self._http.base_url is None:
            self._http.base_url = base_url.rstrip("/")
        self._default_headers = dict(default_headers or {})

    @property
    def http_client(self) -> HTTPClient:
        return self._http

    async def send(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> RawResponse:
        """Send one request. Non-2xx responses are returned, not raised."""
        merged = {**self._default_headers, **(headers or {})}
        start = perf_counter()
        response = await self._http.request(
            method, path, params=query or None, headers=merged or None, data=body
        )
        log_request_completed(
            method=method,
            url=path,
            status=response.status,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return response

    async def close(self) -> None:
        await self._http.close()
