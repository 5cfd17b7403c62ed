"""Notebook operations."""

from __future__ import annotations

from ..config import NOTEBOOKS, ClientConfig
from ..models.resource import NotebookResource
from ..runtime.rest import RestRunner
from ..runtime.serializer import Serializer
from .resource_client import ResourceClient


class NotebookOperations(ResourceClient[NotebookResource]):
    """Notebooks of a workspace: ``/notebooks`` bound to NotebookResource."""

    def __init__(
        self,
        runner: RestRunner,
        config: ClientConfig,
        *,
        serializer: Serializer | None = None,
    ) -> None:
        super().__init__(
            runner,
            config,
            collection=NOTEBOOKS,
            schema=NotebookResource,
            serializer=serializer,
        )
