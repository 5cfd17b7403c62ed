"""Async HTTP client built on aiohttp.

The client performs exactly one request per call and hands every response
back to the caller, whatever its status. Deciding whether a status is a
success belongs to the runner. Response hooks are the interception point
for tracing and metrics.
"""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)

ResponseHook = Callable[["RawResponse"], Awaitable[None] | None]


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and undecoded body of one HTTP exchange."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    method: str = "GET"
    url: str = ""

    def __post_init__(self) -> None:
        # Header lookups are case-insensitive
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON. An empty body decodes to None."""
        if not self.body.strip():
            return None
        return json.loads(self.body)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every response (sync or async)."""
        self._response_hooks.append(hook)

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith(("http://", "https://")):
            if not url.startswith("/"):
                url = f"/{url}"
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        data: bytes | None = None,
    ) -> RawResponse:
        """Send one request and return the response without status checks."""
        url = self.build_url(url)
        try:
            async with self.session.request(
                method, url, params=params, headers=headers, data=data
            ) as response:
                body = await response.read()
                raw = RawResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                    method=method,
                    url=str(response.url),
                )
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TransportError(
                f"{method} {url} failed: {type(e).__name__}: {e}", method=method, url=url
            ) from e

        await self._run_hooks(raw)
        return raw

    async def _run_hooks(self, response: RawResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.warning(
                    "Response hook failed",
                    exc_info=True,
                    extra={"hook": getattr(hook, "__name__", repr(hook))},
                )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
