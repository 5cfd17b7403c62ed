"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ...core.exceptions import (
    ArtifactsError,
    ConflictError,
    NotFoundError,
    PreconditionFailedError,
    ServiceError,
    UnknownServerError,
)
from ...models.errors import CloudError
from ..serializer import Serializer
from ..telemetry import log_request_failed
from .http_client import RawResponse
from .transport import RESTTransport

_STATUS_ERRORS: dict[int, type[ServiceError]] = {
    404: NotFoundError,
    409: ConflictError,
    412: PreconditionFailedError,
}


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "PUT" | "POST" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    success_codes: frozenset[int] = frozenset({200})
    build_query: Callable[[dict[str, Any]], dict[str, str]] | None = None
    build_body: Callable[[dict[str, Any]], BaseModel | None] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: RawResponse, params: dict[str, Any]) -> Any:
        return response


def decode_json(response: RawResponse) -> Any:
    """Decode a response body, treating undecodable bodies as absent."""
    try:
        return response.json()
    except ValueError:
        return None


def error_from_response(response: RawResponse) -> ServiceError:
    """Build the typed error for a response whose status was not accepted."""
    error = CloudError.from_payload(decode_json(response))
    error_cls = _STATUS_ERRORS.get(response.status, UnknownServerError)
    detail = str(error) if error is not None else (response.text()[:200] or "no body")
    return error_cls(
        f"{response.method} {response.url} returned {response.status}: {detail}",
        status_code=response.status,
        error=error,
        response=response,
    )


class RestRunner:
    def __init__(self, transport: RESTTransport, serializer: Serializer | None = None) -> None:
        self._t = transport
        self._serializer = serializer or Serializer()

    @property
    def transport(self) -> RESTTransport:
        return self._t

    async def send(self, *, spec: RestEndpointSpec, params: dict[str, Any]) -> RawResponse:
        """Issue the request described by ``spec`` and check its status.

        Raises:
            ServiceError: Subclass matching the status when it is not one of
                the spec's success codes
            TransportError: On network failure
        """
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        headers = spec.build_headers(params) if spec.build_headers else {}
        model = spec.build_body(params) if spec.build_body else None

        body = None
        if model is not None:
            body = self._serializer.serialize(model)
            headers = {**headers, "Content-Type": "application/json"}

        try:
            response = await self._t.send(
                spec.method.upper(), path, query=query, headers=headers or None, body=body
            )
        except ArtifactsError as e:
            log_request_failed(
                endpoint_id=spec.id, status=None, error_type=type(e).__name__, error_message=str(e)
            )
            raise

        if response.status not in spec.success_codes:
            error = error_from_response(response)
            log_request_failed(
                endpoint_id=spec.id,
                status=response.status,
                error_type=type(error).__name__,
                error_message=str(error),
            )
            raise error
        return response

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        response = await self.send(spec=spec, params=params)
        return adapter.parse(response, params)

