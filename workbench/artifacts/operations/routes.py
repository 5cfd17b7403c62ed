"""Route table for a resource collection.

Each operation on a collection is one RestEndpointSpec: method, path
builder, accepted status codes and header/body builders. Every collection
of artifacts shares the same shape, so the table is built per collection
name rather than written out per resource kind.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, quote, urlsplit

from ..core.enums import HttpMethod
from ..models.resource import ArtifactRenameRequest
from ..runtime.rest import RestEndpointSpec

LIST = "list"
LIST_NEXT = "list_next"
LIST_SUMMARY = "list_summary"
LIST_SUMMARY_NEXT = "list_summary_next"
GET = "get"
CREATE_OR_UPDATE = "create_or_update"
DELETE = "delete"
RENAME = "rename"

# Delete accepts the same set whether the resource was removed now or was already gone
_MUTATION_CODES = frozenset({200, 201, 202, 204})


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _api_version(params: dict[str, Any]) -> dict[str, str]:
    return {"api-version": params["api_version"]}


def _next_query(params: dict[str, Any]) -> dict[str, str]:
    # Continuation links usually embed the api-version already
    if "api-version" in parse_qs(urlsplit(params["next_link"]).query):
        return {}
    return _api_version(params)


def _headers(params: dict[str, Any]) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if params.get("if_match"):
        headers["If-Match"] = params["if_match"]
    if params.get("if_none_match"):
        headers["If-None-Match"] = params["if_none_match"]
    return headers


def resource_path(collection: str, name: str) -> str:
    return f"/{collection}/{_segment(name)}"


def build_routes(collection: str) -> dict[str, RestEndpointSpec]:
    """Build the route table for ``collection`` (e.g. "notebooks")."""

    def item_path(params: dict[str, Any]) -> str:
        return resource_path(collection, params["name"])

    def next_link(params: dict[str, Any]) -> str:
        return params["next_link"]

    def rename_body(params: dict[str, Any]) -> ArtifactRenameRequest:
        return ArtifactRenameRequest(new_name=params["new_name"])

    return {
        LIST: RestEndpointSpec(
            id=f"{collection}.{LIST}",
            method=HttpMethod.GET.value,
            build_path=lambda _: f"/{collection}",
            build_query=_api_version,
            build_headers=_headers,
        ),
        LIST_SUMMARY: RestEndpointSpec(
            id=f"{collection}.{LIST_SUMMARY}",
            method=HttpMethod.GET.value,
            build_path=lambda _: f"/{collection}/summary",
            build_query=_api_version,
            build_headers=_headers,
        ),
        LIST_NEXT: RestEndpointSpec(
            id=f"{collection}.{LIST_NEXT}",
            method=HttpMethod.GET.value,
            build_path=next_link,
            build_query=_next_query,
            build_headers=_headers,
        ),
        LIST_SUMMARY_NEXT: RestEndpointSpec(
            id=f"{collection}.{LIST_SUMMARY_NEXT}",
            method=HttpMethod.GET.value,
            build_path=next_link,
            build_query=_next_query,
            build_headers=_headers,
        ),
        GET: RestEndpointSpec(
            id=f"{collection}.{GET}",
            method=HttpMethod.GET.value,
            build_path=item_path,
            success_codes=frozenset({200, 304}),
            build_query=_api_version,
            build_headers=_headers,
        ),
        CREATE_OR_UPDATE: RestEndpointSpec(
            id=f"{collection}.{CREATE_OR_UPDATE}",
            method=HttpMethod.PUT.value,
            build_path=item_path,
            success_codes=_MUTATION_CODES,
            build_query=_api_version,
            build_body=lambda params: params["resource"],
            build_headers=_headers,
        ),
        DELETE: RestEndpointSpec(
            id=f"{collection}.{DELETE}",
            method=HttpMethod.DELETE.value,
            build_path=item_path,
            success_codes=_MUTATION_CODES,
            build_query=_api_version,
            build_headers=_headers,
        ),
        RENAME: RestEndpointSpec(
            id=f"{collection}.{RENAME}",
            method=HttpMethod.POST.value,
            build_path=lambda params: f"{item_path(params)}/rename",
            success_codes=_MUTATION_CODES,
            build_query=_api_version,
            build_body=rename_body,
            build_headers=_headers,
        ),
    }
