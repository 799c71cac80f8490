"""Request body encoding and response body decoding."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from alpaca_client.exceptions import AlpacaDecodeError

JSON_CONTENT_TYPE = "application/json"


def _json_default(value: Any) -> Any:
    """Serialize values the json module does not handle natively."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode_body(body: Any) -> bytes | None:
    """Encode a request payload for the wire.

    Mappings and pydantic models are serialized to compact JSON. Strings and
    bytes are treated as pre-encoded and passed through unchanged. ``None``
    and empty payloads produce no body at all.
    """
    if body is None:
        return None
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    if isinstance(body, Mapping):
        if not body:
            return None
        return json.dumps(dict(body), separators=(",", ":"), default=_json_default).encode()
    if isinstance(body, str):
        return body.encode() if body else None
    if isinstance(body, bytes):
        return body or None

    msg = f"Unsupported request body type: {type(body).__name__}"
    raise TypeError(msg)


def is_json_content_type(content_type: str | None) -> bool:
    """Check a Content-Type header value for JSON, case-insensitively."""
    return bool(content_type) and JSON_CONTENT_TYPE in content_type.lower()


def decode_body(content_type: str | None, raw: bytes | str) -> Any:
    """Decode a response body according to its declared Content-Type.

    Args:
        content_type: The first Content-Type header value, if any
        raw: Response body

    Returns:
        The parsed JSON value for JSON responses (None for an empty body),
        otherwise the body text verbatim. Bytes that are not valid UTF-8 are
        kept as surrogate escapes, so
        ``text.encode("utf-8", "surrogateescape")`` restores the original body.

    Raises:
        AlpacaDecodeError: If the body is declared JSON but is not valid JSON
    """
    text = raw.decode("utf-8", errors="surrogateescape") if isinstance(raw, bytes) else raw

    if not is_json_content_type(content_type):
        return text

    if not text.strip():
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise AlpacaDecodeError(
            f"Invalid JSON in response body: {e.msg}",
            content_type=content_type,
            body=text,
        ) from e
