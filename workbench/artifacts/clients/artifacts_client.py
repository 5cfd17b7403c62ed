"""Workspace artifacts client.

ArtifactsClient owns the HTTP session and the pieces every collection
shares (transport, runner, serializer, configuration) and hands out typed
clients per collection.

Example:
    async with ArtifactsClient("https://myws.dev.example.net") as client:
        async for notebook in client.notebooks.list():
            print(notebook.name)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import TypeVar

from ..config import ClientConfig
from ..models.resource import ArtifactResource
from ..operations.notebook import NotebookOperations
from ..operations.resource_client import ResourceClient
from ..runtime.rest import HTTPClient, ResponseHook, RESTTransport, RestRunner
from ..runtime.serializer import Serializer

ResourceT = TypeVar("ResourceT", bound=ArtifactResource)


class ArtifactsClient:
    """Entry point for artifact operations on one workspace."""

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        config: ClientConfig | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: Workspace endpoint; ignored when ``config`` is given
            config: Full client configuration
            default_headers: Headers added to every request, e.g. Authorization;
                merged over the headers of ``config``
            http_client: Pre-built HTTP client (its base_url is set to the endpoint)
        """
        if config is None:
            if endpoint is None:
                raise ValueError("Either endpoint or config is required")
            config = ClientConfig(endpoint=endpoint, default_headers=dict(default_headers or {}))
        elif default_headers:
            config = replace(
                config, default_headers={**config.default_headers, **default_headers}
            )
        self.config = config
        self._serializer = Serializer()
        self._transport = RESTTransport(
            config.endpoint,
            http_client=http_client,
            default_headers=config.default_headers,
            timeout=config.timeout,
        )
        self._runner = RestRunner(self._transport, self._serializer)
        self._notebooks: NotebookOperations | None = None

    @classmethod
    def from_env(cls, **kwargs) -> ArtifactsClient:
        """Create a client from ``WORKBENCH_*`` environment variables."""
        return cls(config=ClientConfig.from_env(), **kwargs)

    @property
    def notebooks(self) -> NotebookOperations:
        if self._notebooks is None:
            self._notebooks = NotebookOperations(
                self._runner, self.config, serializer=self._serializer
            )
        return self._notebooks

    def resources(self, collection: str, schema: type[ResourceT]) -> ResourceClient[ResourceT]:
        """Typed client for any collection sharing the artifact route shape."""
        return ResourceClient(
            self._runner,
            self.config,
            collection=collection,
            schema=schema,
            serializer=self._serializer,
        )

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Observe every response, e.g. to record tracing spans or metrics."""
        self._transport.http_client.add_response_hook(hook)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> ArtifactsClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
