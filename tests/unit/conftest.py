"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from workbench.artifacts.config import ClientConfig
from workbench.artifacts.runtime.rest import RawResponse, RESTTransport, RestRunner

ENDPOINT = "https://ws.dev.example.net"


def _make_response(
    status: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    method: str = "GET",
    url: str = "",
) -> RawResponse:
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    else:
        raw = json.dumps(body).encode()
    return RawResponse(status=status, headers=headers or {}, body=raw, method=method, url=url)


@pytest.fixture
def make_response():
    """Factory for RawResponse objects with JSON-encoded bodies."""
    return _make_response


@pytest.fixture
def config():
    """Client config with no polling delay."""
    return ClientConfig(endpoint=ENDPOINT, polling_interval=0.0)


@pytest.fixture
def mock_transport():
    """REST transport whose send() is an AsyncMock; set side_effect per test."""
    transport = MagicMock(spec=RESTTransport)
    transport.send = AsyncMock()
    return transport


@pytest.fixture
def runner(mock_transport):
    """RestRunner over the mock transport."""
    return RestRunner(mock_transport)
