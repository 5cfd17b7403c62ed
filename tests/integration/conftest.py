"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from workbench.artifacts import ArtifactsClient

# Skip all integration tests unless RUN_WORKBENCH_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_WORKBENCH_NETWORK_TESTS") != "1" or not os.environ.get("WORKBENCH_ENDPOINT"),
    reason="Requires a workspace. Set RUN_WORKBENCH_NETWORK_TESTS=1 and WORKBENCH_ENDPOINT to run",
)


@pytest_asyncio.fixture
async def client():
    """Client for the workspace in WORKBENCH_ENDPOINT, authorized by WORKBENCH_TOKEN."""
    token = os.environ.get("WORKBENCH_TOKEN")
    headers = {"Authorization": f"Bearer {token}"} if token else None
    async with ArtifactsClient(os.environ["WORKBENCH_ENDPOINT"], default_headers=headers) as c:
        yield c
