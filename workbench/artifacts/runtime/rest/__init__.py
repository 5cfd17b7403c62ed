"""REST runtime abstractions."""

from .http_client import HTTPClient, RawResponse, ResponseHook
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, error_from_response
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RawResponse",
    "ResponseHook",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "error_from_response",
]
