"""Client configuration and service constants.

This module centralizes the API version, collection names and defaults
used by the transport, the resource clients and the poller.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_API_VERSION = "2019-06-01-preview"
DEFAULT_TIMEOUT = 30.0
DEFAULT_POLLING_INTERVAL = 2.0

# Collection path segments
NOTEBOOKS = "notebooks"

ENV_ENDPOINT = "WORKBENCH_ENDPOINT"
ENV_API_VERSION = "WORKBENCH_API_VERSION"
ENV_TIMEOUT = "WORKBENCH_TIMEOUT"
ENV_POLLING_INTERVAL = "WORKBENCH_POLLING_INTERVAL"


@dataclass(frozen=True)
class ClientConfig:
    """Read-only settings shared by every operation of a client.

    Attributes:
        endpoint: Workspace development endpoint, e.g. "https://ws.dev.example.net"
        api_version: Value of the ``api-version`` query parameter
        timeout: Total per-request timeout in seconds
        polling_interval: Default seconds between status polls
        default_headers: Headers sent with every request (e.g. Authorization)
    """

    endpoint: str
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    polling_interval: float = DEFAULT_POLLING_INTERVAL
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.endpoint or not self.endpoint.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL, got {self.endpoint!r}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.polling_interval < 0:
            raise ValueError("polling_interval must be >= 0")
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``WORKBENCH_*`` environment variables.

        Raises:
            ValueError: If ``WORKBENCH_ENDPOINT`` is missing or a number is malformed
        """
        env = os.environ if environ is None else environ
        endpoint = env.get(ENV_ENDPOINT)
        if not endpoint:
            raise ValueError(f"{ENV_ENDPOINT} is not set")
        return cls(
            endpoint=endpoint,
            api_version=env.get(ENV_API_VERSION) or DEFAULT_API_VERSION,
            timeout=float(env.get(ENV_TIMEOUT) or DEFAULT_TIMEOUT),
            polling_interval=float(env.get(ENV_POLLING_INTERVAL) or DEFAULT_POLLING_INTERVAL),
        )
