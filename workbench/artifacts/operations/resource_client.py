"""Typed operations over one artifact collection.

Architecture:
    ResourceClient is generic over the resource schema and driven by the
    route table from ``routes.build_routes``. Each method issues exactly one
    request through the shared RestRunner; listings are wrapped in an
    AsyncPager and mutations in an LROPoller.

    The client holds no mutable state beyond read-only configuration, so
    operations on independent names may run concurrently.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from ..config import ClientConfig
from ..core.enums import FinalStateVia
from ..models.page import ResourcePage
from ..models.resource import ArtifactRenameRequest, ArtifactResource, NotModified
from ..runtime.lro import LROPoller, OperationRequest
from ..runtime.paging import AsyncPager
from ..runtime.rest import RawResponse, RestRunner
from ..runtime.serializer import Serializer
from . import routes
from .adapters import ConditionalResponseAdapter, ModelResponseAdapter

logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT", bound=ArtifactResource)


class ResourceClient(Generic[ResourceT]):
    """Operations on the artifacts of one collection (e.g. notebooks)."""

    def __init__(
        self,
        runner: RestRunner,
        config: ClientConfig,
        *,
        collection: str,
        schema: type[ResourceT],
        serializer: Serializer | None = None,
        final_state_via: FinalStateVia = FinalStateVia.ORIGINAL_URI,
    ) -> None:
        """Initialize the client.

        Args:
            runner: Runner shared by all collections of a service client
            config: Read-only client configuration
            collection: Collection path segment, e.g. "notebooks"
            schema: Resource model used to deserialize responses
            serializer: Serializer for request and response bodies
            final_state_via: Where create-or-update reads its final resource
                from once a status monitor reports success
        """
        self._runner = runner
        self._config = config
        self.collection = collection
        self.schema = schema
        self._serializer = serializer or Serializer()
        self._final_state_via = final_state_via
        self._routes = routes.build_routes(collection)
        self._item_adapter = ConditionalResponseAdapter(schema, self._serializer)
        self._page_adapter = ModelResponseAdapter(ResourcePage[schema], self._serializer)

    def _params(self, **values: Any) -> dict[str, Any]:
        return {"api_version": self._config.api_version, **values}

    async def get(self, name: str, *, if_none_match: str | None = None) -> ResourceT | NotModified:
        """Get one resource.

        With ``if_none_match`` set to the etag the caller holds, an unchanged
        resource yields ``NotModified`` and no body is deserialized.

        Raises:
            NotFoundError: If the resource does not exist
        """
        return await self._runner.run(
            spec=self._routes[routes.GET],
            adapter=self._item_adapter,
            params=self._params(name=name, if_none_match=if_none_match),
        )

    async def list_page(self) -> ResourcePage[ResourceT]:
        """Fetch the first page of the collection."""
        return await self._fetch_page(routes.LIST)

    async def list_next_page(self, continuation_token: str) -> ResourcePage[ResourceT]:
        """Fetch the page a previous page's ``next_link`` points to."""
        return await self._fetch_page(routes.LIST_NEXT, next_link=continuation_token)

    async def list_summary_page(self) -> ResourcePage[ResourceT]:
        """Fetch the first page of the summarized listing."""
        return await self._fetch_page(routes.LIST_SUMMARY)

    async def list_summary_next_page(self, continuation_token: str) -> ResourcePage[ResourceT]:
        return await self._fetch_page(routes.LIST_SUMMARY_NEXT, next_link=continuation_token)

    def list(self) -> AsyncPager[ResourceT]:
        """Iterate every resource of the collection, one page at a time."""
        return AsyncPager(self.list_page, self.list_next_page)

    def list_summary(self) -> AsyncPager[ResourceT]:
        """Iterate the summarized projection of the collection."""
        return AsyncPager(self.list_summary_page, self.list_summary_next_page)

    async def create_or_update(
        self,
        name: str,
        resource: ResourceT,
        *,
        if_match: str | None = None,
    ) -> LROPoller[ResourceT]:
        """Create or replace a resource.

        Args:
            name: Resource name
            resource: Resource definition
            if_match: Etag the stored resource must still have

        Raises:
            PreconditionFailedError: If ``if_match`` no longer matches
        """
        spec = self._routes[routes.CREATE_OR_UPDATE]
        params = self._params(name=name, resource=resource, if_match=if_match)
        response = await self._runner.send(spec=spec, params=params)
        return self._poller(spec.method, spec.build_path(params), response, self._load)

    async def delete(self, name: str) -> LROPoller[None]:
        """Delete a resource. Deleting a resource that does not exist succeeds."""
        spec = self._routes[routes.DELETE]
        params = self._params(name=name)
        response = await self._runner.send(spec=spec, params=params)
        return self._poller(spec.method, spec.build_path(params), response, None)

    async def rename(self, name: str, new_name: str | ArtifactRenameRequest) -> LROPoller[None]:
        """Rename a resource.

        Raises:
            ConflictError: If ``new_name`` is already taken
        """
        if isinstance(new_name, ArtifactRenameRequest):
            new_name = new_name.new_name
        spec = self._routes[routes.RENAME]
        params = self._params(name=name, new_name=new_name)
        response = await self._runner.send(spec=spec, params=params)
        return self._poller(spec.method, spec.build_path(params), response, None)

    async def _fetch_page(self, route: str, **values: Any) -> ResourcePage[ResourceT]:
        return await self._runner.run(
            spec=self._routes[route], adapter=self._page_adapter, params=self._params(**values)
        )

    def _load(self, response: RawResponse) -> ResourceT:
        return self._serializer.deserialize(response.body, self.schema)

    def _poller(self, method, path, response, deserialize) -> LROPoller[Any]:
        logger.debug(
            "Operation started",
            extra={"method": method, "path": path, "status": response.status},
        )
        return LROPoller(
            request=OperationRequest(
                method=method, path=path, query={"api-version": self._config.api_version}
            ),
            initial_response=response,
            transport=self._runner.transport,
            deserialize=deserialize,
            final_state_via=self._final_state_via
            if deserialize is not None
            else FinalStateVia.AZURE_ASYNC_OPERATION,
            polling_interval=self._config.polling_interval,
        )
