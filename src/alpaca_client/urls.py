"""Request URL construction."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "v2"

# Characters left unescaped in query values (timestamps and CSV lists)
_QUERY_SAFE = ":,"

_COMPOSITE_TYPES = (list, tuple, set, frozenset, dict)


def format_query_value(value: Any) -> str:
    """Render a scalar query value as text."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_query(query: Mapping[str, Any] | None) -> str:
    """Render a query mapping as ``k1=v1&k2=v2`` in insertion order.

    Composite values (lists, dicts, ...) are dropped rather than serialized.
    Callers that want a list sent must join it first. ``None`` values are
    skipped.
    """
    if not query:
        return ""

    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, _COMPOSITE_TYPES):
            logger.debug("Dropping composite query parameter: %s", key)
            continue
        pairs.append((key, format_query_value(value)))

    return urlencode(pairs, safe=_QUERY_SAFE)


def build_url(
    path: str,
    query: Mapping[str, Any] | None = None,
    *,
    domain: str,
    version: str | None = DEFAULT_VERSION,
) -> str:
    """Compose an absolute request URL.

    Args:
        path: Endpoint path, leading/trailing slashes are ignored
        query: Flat query parameters
        domain: Scheme and host, e.g. "https://paper-api.alpaca.markets"
        version: API version segment, or None for unversioned endpoints

    Returns:
        The full URL. Never raises; an empty path yields the bare prefix.
    """
    prefix = domain.rstrip("/")
    segment = f"/{version}/" if version is not None else "/"
    query_string = build_query(query)

    url = f"{prefix}{segment}{path.strip('/')}"
    if query_string:
        url = f"{url}?{query_string}"
    return url
