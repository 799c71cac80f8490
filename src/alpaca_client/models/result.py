"""Normalized result of a completed HTTP exchange."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from alpaca_client.codec import decode_body
from alpaca_client.exceptions import AlpacaAPIError

if TYPE_CHECKING:
    import httpx


class ApiResult(BaseModel):
    """Outcome of any completed HTTP exchange, successful or not.

    Non-2xx responses are returned as data; inspect ``status_code`` (or
    ``ok``) to detect application-level failures.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(description="HTTP status code")
    status_text: str = Field(default="", description="HTTP reason phrase")
    payload: Any = Field(default=None, description="Decoded JSON value or raw body text")

    @property
    def ok(self) -> bool:
        """Check if the status code is 2xx."""
        return 200 <= self.status_code < 300

    @classmethod
    def from_response(cls, response: httpx.Response) -> ApiResult:
        """Build a result from an httpx response.

        Raises:
            AlpacaDecodeError: If a JSON response body cannot be parsed
        """
        content_types = response.headers.get_list("content-type")
        content_type = content_types[0] if content_types else None

        return cls(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            payload=decode_body(content_type, response.content),
        )

    def raise_for_status(self) -> ApiResult:
        """Raise AlpacaAPIError for a non-2xx result, else return self."""
        if self.ok:
            return self

        message = f"API error: {self.status_code}"
        if isinstance(self.payload, dict) and self.payload.get("message"):
            message = str(self.payload["message"])

        raise AlpacaAPIError(
            message,
            status_code=self.status_code,
            response_body=self.payload,
        )
