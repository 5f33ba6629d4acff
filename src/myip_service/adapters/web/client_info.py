"""Extract a ClientContext from an ASGI scope.

Works on the raw scope rather than a framework request object so it can be
used from any handler or middleware.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from starlette.datastructures import QueryParams

from myip_service.domain.models import ClientContext

from .client_ip import extract_client_ip


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def collect_headers(scope: dict[str, Any]) -> dict[str, str]:
    """Headers in the order received, lower-cased, repeated headers joined with ``", "``."""
    collected: dict[str, str] = {}
    for name, value in scope.get("headers") or []:
        decoded_name = _decode_header_value(name).lower()
        decoded_value = _decode_header_value(value)
        if decoded_name in collected:
            collected[decoded_name] = f"{collected[decoded_name]}, {decoded_value}"
        else:
            collected[decoded_name] = decoded_value
    return collected


def collect_query(query_string: bytes | str) -> dict[str, str | list[str]]:
    """Query parameters; a repeated key maps to the list of its values."""
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    params = QueryParams(query_string)
    query: dict[str, str | list[str]] = {}
    for key in params:
        values = params.getlist(key)
        query[key] = values[0] if len(values) == 1 else values
    return query


def _original_url(scope: dict[str, Any]) -> str:
    path = scope.get("root_path", "") + scope.get("path", "/")
    raw_path = scope.get("raw_path")
    if isinstance(raw_path, bytes) and raw_path:
        path = scope.get("root_path", "") + raw_path.decode("latin-1").split("?", 1)[0]
    query_string = scope.get("query_string") or b""
    if query_string:
        return f"{path}?{_decode_header_value(query_string)}"
    return path


def get_client_context_from_scope(
    scope: dict[str, Any],
    trusted_ip_headers: Sequence[str],
) -> ClientContext:
    """Build the request-scoped ClientContext.

    Missing pieces stay None rather than raising; the caller decides on fallbacks.
    """
    headers = collect_headers(scope)

    peer_host: str | None = None
    client = scope.get("client")
    if isinstance(client, (list, tuple)) and client:
        candidate = client[0]
        if isinstance(candidate, (str, bytes)):
            peer_host = _decode_header_value(candidate)

    scheme = scope.get("scheme") or "http"
    return ClientContext(
        ip=extract_client_ip(headers, peer_host, trusted_ip_headers),
        user_agent=headers.get("user-agent"),
        headers=headers,
        scheme=scheme,
        secure=scheme in ("https", "wss"),
        host=headers.get("host"),
        origin=headers.get("origin"),
        method=scope.get("method", "GET"),
        url=_original_url(scope),
        query=collect_query(scope.get("query_string") or b""),
    )
