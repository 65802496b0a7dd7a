"""Request URL, url-mode and pagination helpers."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

CREDENTIAL_KEYS = frozenset({"account", "catalog"})


def endpoint_url(base_url: str, call_kind: str) -> str:
    return f"{base_url.rstrip('/')}/{call_kind}.json"


def request_url(base_url: str, call_kind: str, options: Mapping[str, Any]) -> str:
    query = urlencode({key: value for key, value in options.items() if value is not None})
    return f"{endpoint_url(base_url, call_kind)}?{query}"


def extract_prefixed(query: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Pick the ``prefix``-named parameters out of an incoming query, prefix stripped.

    Credentials are never taken from the query.
    """
    return {
        key[len(prefix):]: value
        for key, value in query.items()
        if key.startswith(prefix) and len(key) > len(prefix) and key[len(prefix):] not in CREDENTIAL_KEYS
    }


def page_query(params: Mapping[str, Any], prefix: str, page: int) -> str:
    prefixed = {
        f"{prefix}{key}": value
        for key, value in params.items()
        if key not in CREDENTIAL_KEYS and key != "page" and value is not None
    }
    return "?" + urlencode({f"{prefix}page": max(page, 1), **prefixed})


def current_page(params: Mapping[str, Any]) -> int:
    try:
        return max(int(params.get("page", 1)), 1)
    except (TypeError, ValueError):
        return 1
