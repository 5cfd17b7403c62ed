"""Long-running operation polling.

Architecture:
    A mutating request that the service may finish asynchronously returns an
    LROPoller built from its initial response. The poller derives where to
    poll from the response headers and then walks the operation through
    ``OperationState`` until a terminal state is observed.

Polling URL, in order of preference:
    - ``Azure-AsyncOperation`` or ``Operation-Location``: a status monitor
      whose body carries ``status``
    - ``Location``: 202 while running, any other success once done
    - The original request URI, whose body carries ``provisioningState``.
      Only PUT and PATCH target a resource there; any other request
      without a polling header is complete once accepted.

Interval:
    ``Retry-After`` from the latest response (seconds or HTTP date) when
    present, otherwise the configured polling interval.

Failure:
    Transport errors and non-success poll responses propagate immediately.
    Nothing here retries, and cancelling a waiting caller never cancels the
    operation on the service.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any, Generic, TypeVar

from ..config import DEFAULT_POLLING_INTERVAL
from ..core.enums import FinalStateVia, HttpMethod, OperationState
from ..core.exceptions import OperationFailedError
from ..models.errors import CloudError
from .rest.http_client import RawResponse
from .rest.runner import decode_json, error_from_response
from .rest.transport import RESTTransport
from .telemetry import log_poll_state

ResultT = TypeVar("ResultT")

_SYNC_SUCCESS_CODES = frozenset({200, 204})
_RESOURCE_METHODS = frozenset({HttpMethod.PUT.value, "PATCH"})


@dataclass(frozen=True)
class OperationRequest:
    """Descriptor of the request that started the operation."""

    method: str
    path: str
    query: Mapping[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


def parse_retry_after(value: str | None) -> float | None:
    """Parse a Retry-After header into seconds, or None if absent or invalid."""
    if not value:
        return None
    value = value.strip()
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    return max(0.0, (when - datetime.now(UTC)).total_seconds())


def _provisioning_state(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    properties = payload.get("properties")
    if isinstance(properties, dict) and properties.get("provisioningState"):
        return properties["provisioningState"]
    return payload.get("provisioningState") or payload.get("status")


class LROPoller(Generic[ResultT]):
    """Awaitable handle on an operation running on the service.

    Use ``poll()`` to advance one step, or ``poll_until_done()`` to wait for
    the final result. A poller has a single consumer.
    """

    def __init__(
        self,
        *,
        request: OperationRequest,
        initial_response: RawResponse,
        transport: RESTTransport,
        deserialize: Callable[[RawResponse], ResultT] | None = None,
        final_state_via: FinalStateVia = FinalStateVia.AZURE_ASYNC_OPERATION,
        polling_interval: float = DEFAULT_POLLING_INTERVAL,
    ) -> None:
        self._request = request
        self._initial = initial_response
        self._latest = initial_response
        self._transport = transport
        self._deserialize = deserialize
        self._final_state_via = final_state_via
        self._polling_interval = polling_interval
        self._polls = 0
        self._error: CloudError | None = None
        self._result: ResultT | None = None
        self._resolved = False

        self._location = initial_response.header("Location")
        monitor = initial_response.header("Azure-AsyncOperation") or initial_response.header(
            "Operation-Location"
        )
        if monitor:
            self._mode = FinalStateVia.AZURE_ASYNC_OPERATION
            self._status_url = monitor
        elif self._location:
            self._mode = FinalStateVia.LOCATION
            self._status_url = self._location
        else:
            self._mode = FinalStateVia.ORIGINAL_URI
            self._status_url = request.path

        pollable = self._mode is not FinalStateVia.ORIGINAL_URI or (
            request.method.upper() in _RESOURCE_METHODS
        )
        if initial_response.status in _SYNC_SUCCESS_CODES or not pollable:
            self._state = OperationState.SUCCEEDED
            self._result = self._deserialize_body(initial_response)
            self._resolved = True
        else:
            self._state = OperationState.ACCEPTED

    @property
    def initial_response(self) -> RawResponse:
        return self._initial

    @property
    def latest_response(self) -> RawResponse:
        return self._latest

    @property
    def request(self) -> OperationRequest:
        return self._request

    @property
    def polls(self) -> int:
        """Number of status requests issued so far."""
        return self._polls

    def status(self) -> OperationState:
        return self._state

    def done(self) -> bool:
        return self._state.is_terminal

    def next_delay(self) -> float:
        """Seconds to wait before the next poll."""
        hint = parse_retry_after(self._latest.header("Retry-After"))
        return self._polling_interval if hint is None else hint

    async def poll(self) -> OperationState:
        """Advance the operation by one status request.

        Returns the state after the request. Once terminal, no request is sent.
        """
        if self._state.is_terminal:
            return self._state

        query = self._request.query if self._mode is FinalStateVia.ORIGINAL_URI else None
        response = await self._transport.send(HttpMethod.GET.value, self._status_url, query=query)
        self._polls += 1
        self._latest = response
        self._state = self._state_from(response)

        if self._state in (OperationState.FAILED, OperationState.CANCELED):
            self._error = CloudError.from_payload(decode_json(response))

        log_poll_state(
            operation=str(self._request),
            state=self._state,
            polls=self._polls,
            delay=None if self._state.is_terminal else self.next_delay(),
        )
        return self._state

    async def poll_until_done(self) -> ResultT | None:
        """Wait for a terminal state and return the operation's result.

        Raises:
            OperationFailedError: If the operation ends Failed or Canceled
        """
        while not self._state.is_terminal:
            await asyncio.sleep(self.next_delay())
            await self.poll()

        if self._state is not OperationState.SUCCEEDED:
            detail = f": {self._error}" if self._error is not None else ""
            raise OperationFailedError(
                f"Operation {self._request} ended {self._state.value}{detail}",
                state=self._state,
                error=self._error,
            )

        if not self._resolved:
            self._result = await self._final_result()
            self._resolved = True
        return self._result

    def result(self) -> ResultT | None:
        """Result of a finished operation, without any network call.

        Raises:
            RuntimeError: If the result has not been resolved yet; await
                ``poll_until_done()`` first
            OperationFailedError: If the operation ended Failed or Canceled
        """
        if self._state in (OperationState.FAILED, OperationState.CANCELED):
            raise OperationFailedError(
                f"Operation {self._request} ended {self._state.value}",
                state=self._state,
                error=self._error,
            )
        if not self._resolved:
            raise RuntimeError(f"Operation {self._request} has no result yet")
        return self._result

    def _state_from(self, response: RawResponse) -> OperationState:
        if not 200 <= response.status < 300:
            raise error_from_response(response)

        if self._mode is FinalStateVia.AZURE_ASYNC_OPERATION:
            payload = decode_json(response)
            status = payload.get("status") if isinstance(payload, dict) else None
            return OperationState.from_status(status)

        if response.status == 202:
            return OperationState.IN_PROGRESS
        if self._mode is FinalStateVia.LOCATION:
            return OperationState.SUCCEEDED

        status = _provisioning_state(decode_json(response))
        return OperationState.SUCCEEDED if status is None else OperationState.from_status(status)

    async def _final_result(self) -> ResultT | None:
        if self._deserialize is None:
            return None
        if self._mode is not FinalStateVia.AZURE_ASYNC_OPERATION:
            # The last poll already returned the resource
            return self._deserialize_body(self._latest)

        if self._final_state_via is FinalStateVia.LOCATION and self._location:
            response = await self._fetch(self._location, query=None)
        elif (
            self._final_state_via is FinalStateVia.ORIGINAL_URI
            or self._request.method.upper() == HttpMethod.PUT.value
        ):
            response = await self._fetch(self._request.path, query=self._request.query)
        else:
            return None
        return self._deserialize_body(response)

    async def _fetch(self, url: str, query: Mapping[str, str] | None) -> RawResponse:
        response = await self._transport.send(HttpMethod.GET.value, url, query=query)
        if not 200 <= response.status < 300:
            raise error_from_response(response)
        self._latest = response
        return response

    def _deserialize_body(self, response: RawResponse) -> ResultT | None:
        if self._deserialize is None or not response.body.strip():
            return None
        return self._deserialize(response)
