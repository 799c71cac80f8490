"""Typed exceptions for the Alpaca API client.

Completed HTTP exchanges are returned as ``ApiResult`` whatever their status
code. Exceptions are reserved for exchanges that never completed, responses
that cannot be decoded, and local validation.
"""

from typing import Any


class AlpacaError(Exception):
    """Base exception for all Alpaca client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AlpacaTransportError(AlpacaError):
    """No response was received (connection refused, DNS, TLS, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        self.method = method
        self.url = url
        super().__init__(message)


class AlpacaDecodeError(AlpacaError):
    """Response declared JSON but the body could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        content_type: str | None = None,
        body: str | None = None,
    ) -> None:
        self.content_type = content_type
        self.body = body
        super().__init__(message)


class AlpacaAPIError(AlpacaError):
    """Non-2xx result, raised only on request via ApiResult.raise_for_status()."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class AlpacaValidationError(AlpacaError):
    """Request validation error before sending to API."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
