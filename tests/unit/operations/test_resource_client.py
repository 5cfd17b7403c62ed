"""Unit tests for ResourceClient and NotebookOperations.

The transport is replaced by an AsyncMock so each test controls the exact
sequence of responses and can count network calls.
"""

from __future__ import annotations

import json
from unittest.mock import ANY, call

import pytest

from workbench.artifacts.core import (
    ConflictError,
    NotFoundError,
    OperationState,
    PreconditionFailedError,
    SchemaMismatchError,
    UnknownServerError,
)
from workbench.artifacts.models import (
    ArtifactRenameRequest,
    ArtifactResource,
    NotebookResource,
    NotModified,
)
from workbench.artifacts.operations import NotebookOperations, ResourceClient
from workbench.artifacts.runtime import LROPoller

API_VERSION = "2019-06-01-preview"


@pytest.fixture
def notebooks(runner, config):
    return NotebookOperations(runner, config)


def _notebook(name, etag=None, **properties):
    return {"name": name, "etag": etag, "properties": properties}


class TestGet:
    """Test get and conditional get."""

    @pytest.mark.asyncio
    async def test_get(self, notebooks, mock_transport, make_response):
        """Test get returns a typed resource."""
        mock_transport.send.return_value = make_response(200, _notebook("nb1", "e1", nbformat=4))

        notebook = await notebooks.get("nb1")

        assert isinstance(notebook, NotebookResource)
        assert notebook.etag == "e1"
        assert notebook.properties == {"nbformat": 4}
        mock_transport.send.assert_awaited_once_with(
            "GET",
            "/notebooks/nb1",
            query={"api-version": API_VERSION},
            headers={"Accept": "application/json"},
            body=None,
        )

    @pytest.mark.asyncio
    async def test_get_not_found(self, notebooks, mock_transport, make_response):
        """Test 404 raises NotFoundError with the service error."""
        mock_transport.send.return_value = make_response(
            404, {"error": {"code": "NotebookNotFound", "message": "nb1 not found"}}
        )

        with pytest.raises(NotFoundError) as exc_info:
            await notebooks.get("nb1")

        assert exc_info.value.error.code == "NotebookNotFound"

    @pytest.mark.asyncio
    async def test_get_not_modified(self, notebooks, mock_transport, make_response):
        """Test If-None-Match with the current etag yields NotModified."""
        mock_transport.send.return_value = make_response(304, b"not json at all")

        result = await notebooks.get("nb1", if_none_match="e1")

        assert result == NotModified(etag="e1")
        _, kwargs = mock_transport.send.call_args
        assert kwargs["headers"]["If-None-Match"] == "e1"

    @pytest.mark.asyncio
    async def test_get_schema_mismatch(self, notebooks, mock_transport, make_response):
        """Test an invalid success body raises SchemaMismatchError."""
        mock_transport.send.return_value = make_response(200, {"name": "nb1"})

        with pytest.raises(SchemaMismatchError):
            await notebooks.get("nb1")


class TestListing:
    """Test page primitives and pagers."""

    @pytest.mark.asyncio
    async def test_two_page_scenario(self, notebooks, mock_transport, make_response):
        """Test ["a"] with token T1, then ["b"] with no token."""
        mock_transport.send.side_effect = [
            make_response(200, {"value": [_notebook("a")], "nextLink": "T1"}),
            make_response(200, {"value": [_notebook("b")], "nextLink": None}),
        ]

        page1 = await notebooks.list_page()
        page2 = await notebooks.list_next_page(page1.continuation_token)

        assert [n.name for n in page1.value] == ["a"]
        assert page1.continuation_token == "T1"
        assert [n.name for n in page2.value] == ["b"]
        assert page2.continuation_token is None
        assert mock_transport.send.await_args_list[1].args == ("GET", "T1")

    @pytest.mark.asyncio
    async def test_list_flattens(self, notebooks, mock_transport, make_response):
        """Test list() yields every item across pages with one call per page."""
        next_link = "https://ws.dev.example.net/notebooks?api-version=x&skipToken=1"
        mock_transport.send.side_effect = [
            make_response(200, {"value": [_notebook("a"), _notebook("b")], "nextLink": next_link}),
            make_response(200, {"value": [_notebook("c")]}),
        ]

        names = [notebook.name async for notebook in notebooks.list()]

        assert names == ["a", "b", "c"]
        assert mock_transport.send.await_count == 2
        first, second = mock_transport.send.await_args_list
        assert first.args == ("GET", "/notebooks")
        assert second.args == ("GET", next_link)
        assert second.kwargs["query"] is None or second.kwargs["query"] == {}

    @pytest.mark.asyncio
    async def test_list_summary(self, notebooks, mock_transport, make_response):
        """Test the summary listing uses its own path."""
        mock_transport.send.side_effect = [make_response(200, {"value": [_notebook("a")]})]

        pages = [page async for page in notebooks.list_summary().by_page()]

        assert len(pages) == 1
        assert mock_transport.send.await_args.args == ("GET", "/notebooks/summary")

    @pytest.mark.asyncio
    async def test_list_error_is_not_an_empty_page(self, notebooks, mock_transport, make_response):
        """Test a failing page fetch raises instead of ending the listing."""
        mock_transport.send.side_effect = [
            make_response(200, {"value": [_notebook("a")], "nextLink": "T1"}),
            make_response(500, {"code": "InternalError", "message": "boom"}),
        ]
        seen = []

        with pytest.raises(UnknownServerError):
            async for notebook in notebooks.list():
                seen.append(notebook.name)

        assert seen == ["a"]


class TestCreateOrUpdate:
    """Test create-or-update."""

    @pytest.mark.asyncio
    async def test_sync_upsert_then_get(self, notebooks, mock_transport, make_response):
        """Test an upserted resource reads back equal modulo server fields."""
        resource = NotebookResource(name="nb1", properties={"nbformat": 4, "cells": []})
        stored = {**resource.model_dump(exclude_none=True), "etag": "e1", "id": "/nb/nb1"}
        mock_transport.send.side_effect = [
            make_response(200, stored),
            make_response(200, stored),
        ]

        poller = await notebooks.create_or_update("nb1", resource)
        created = await poller.poll_until_done()
        fetched = await notebooks.get("nb1")

        assert isinstance(poller, LROPoller)
        for value in (created, fetched):
            assert value.name == resource.name
            assert value.properties == resource.properties
        put = mock_transport.send.await_args_list[0]
        assert put.args == ("PUT", "/notebooks/nb1")
        assert json.loads(put.kwargs["body"]) == {
            "name": "nb1",
            "properties": {"nbformat": 4, "cells": []},
        }
        assert put.kwargs["headers"]["Content-Type"] == "application/json"
        assert mock_transport.send.await_count == 2

    @pytest.mark.asyncio
    async def test_if_match_precondition_failed(self, notebooks, mock_transport, make_response):
        """Test a stale If-Match raises PreconditionFailedError."""
        mock_transport.send.return_value = make_response(
            412, {"code": "PreconditionFailed", "message": "etag mismatch"}
        )

        with pytest.raises(PreconditionFailedError):
            await notebooks.create_or_update(
                "nb1", NotebookResource(properties={}), if_match="stale"
            )

        _, kwargs = mock_transport.send.call_args
        assert kwargs["headers"]["If-Match"] == "stale"

    @pytest.mark.asyncio
    async def test_async_upsert(self, notebooks, mock_transport, make_response):
        """Test a 202 upsert polls the status monitor, then fetches the resource."""
        status_url = "https://ws.dev.example.net/operationResults/1"
        mock_transport.send.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": status_url}),
            make_response(200, {"status": "InProgress"}),
            make_response(200, {"status": "Succeeded"}),
            make_response(200, _notebook("nb1", "e9")),
        ]

        poller = await notebooks.create_or_update("nb1", NotebookResource(properties={}))
        assert poller.status() is OperationState.ACCEPTED

        notebook = await poller.poll_until_done()

        assert notebook.etag == "e9"
        assert mock_transport.send.await_args_list[-1].args == ("GET", "/notebooks/nb1")


class TestDelete:
    """Test delete."""

    @pytest.mark.asyncio
    async def test_delete_twice(self, notebooks, mock_transport, make_response):
        """Test a second delete of a gone resource succeeds like the first."""
        mock_transport.send.side_effect = [make_response(200), make_response(204)]

        first = await notebooks.delete("nb1")
        second = await notebooks.delete("nb1")

        assert await first.poll_until_done() is None
        assert await second.poll_until_done() is None
        assert mock_transport.send.await_count == 2
        assert mock_transport.send.await_args.args == ("DELETE", "/notebooks/nb1")

    @pytest.mark.asyncio
    async def test_delete_accepted(self, notebooks, mock_transport, make_response):
        """Test a 202 delete returns a pending poller."""
        mock_transport.send.return_value = make_response(
            202, headers={"Location": "https://ws.dev.example.net/ops/2"}
        )

        poller = await notebooks.delete("nb1")

        assert not poller.done()
        assert poller.request.method == "DELETE"

    @pytest.mark.asyncio
    async def test_accepted_delete_without_polling_header(
        self, notebooks, mock_transport, make_response
    ):
        """Test a bare 202 delete completes with the single DELETE request."""
        mock_transport.send.return_value = make_response(202)

        poller = await notebooks.delete("nb1")

        assert await poller.poll_until_done() is None
        assert mock_transport.send.await_count == 1
        assert mock_transport.send.await_args.args == ("DELETE", "/notebooks/nb1")

    @pytest.mark.asyncio
    async def test_accepted_upsert_without_polling_header(
        self, notebooks, mock_transport, make_response
    ):
        """Test a bare 202 upsert polls the notebook itself."""
        mock_transport.send.side_effect = [
            make_response(202),
            make_response(200, _notebook("nb1", "e3")),
        ]

        poller = await notebooks.create_or_update("nb1", NotebookResource(properties={}))
        notebook = await poller.poll_until_done()

        assert notebook.etag == "e3"
        assert mock_transport.send.await_args_list[-1].args == ("GET", "/notebooks/nb1")


class TestRename:
    """Test rename."""

    @pytest.mark.asyncio
    async def test_rename(self, notebooks, mock_transport, make_response):
        """Test rename posts newName."""
        mock_transport.send.return_value = make_response(200)

        poller = await notebooks.rename("nb1", "nb2")

        assert await poller.poll_until_done() is None
        args, kwargs = mock_transport.send.call_args
        assert args == ("POST", "/notebooks/nb1/rename")
        assert json.loads(kwargs["body"]) == {"newName": "nb2"}

    @pytest.mark.asyncio
    async def test_rename_accepts_request_object(self, notebooks, mock_transport, make_response):
        """Test rename takes an ArtifactRenameRequest."""
        mock_transport.send.return_value = make_response(202)

        await notebooks.rename("nb1", ArtifactRenameRequest(new_name="nb3"))

        _, kwargs = mock_transport.send.call_args
        assert json.loads(kwargs["body"]) == {"newName": "nb3"}

    @pytest.mark.asyncio
    async def test_accepted_rename_without_polling_header(
        self, notebooks, mock_transport, make_response
    ):
        """Test a bare 202 rename completes without polling the rename URL."""
        mock_transport.send.return_value = make_response(202)

        poller = await notebooks.rename("nb1", "nb2")

        assert poller.done()
        assert await poller.poll_until_done() is None
        assert mock_transport.send.await_args_list == [
            call("POST", "/notebooks/nb1/rename", query=ANY, headers=ANY, body=ANY)
        ]

    @pytest.mark.asyncio
    async def test_rename_conflict(self, notebooks, mock_transport, make_response):
        """Test an existing target name raises ConflictError."""
        mock_transport.send.return_value = make_response(
            409, {"code": "ArtifactAlreadyExists", "message": "nb2 exists"}
        )

        with pytest.raises(ConflictError):
            await notebooks.rename("nb1", "nb2")


@pytest.mark.asyncio
async def test_generic_collection(runner, config, mock_transport, make_response):
    """Test the same client drives another collection."""
    client = ResourceClient(
        runner, config, collection="sparkJobDefinitions", schema=ArtifactResource
    )
    mock_transport.send.return_value = make_response(200, {"name": "job1"})

    job = await client.get("job1")

    assert job.name == "job1"
    assert mock_transport.send.await_args.args == ("GET", "/sparkJobDefinitions/job1")
