"""Base API client with the shared request pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from alpaca_client.api.endpoints import Host
from alpaca_client.codec import encode_body
from alpaca_client.exceptions import AlpacaTransportError
from alpaca_client.models.result import ApiResult
from alpaca_client.urls import DEFAULT_VERSION, build_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from alpaca_client.api.endpoints import Endpoint
    from alpaca_client.auth import AlpacaAuth
    from alpaca_client.config import AlpacaConfig

logger = logging.getLogger(__name__)


class BaseAPI:
    """Base class for Alpaca API endpoint groups.

    Turns a method, path and parameters into an authenticated request and
    normalizes every completed exchange into an ApiResult. Non-2xx statuses
    are data, not errors; only a missing response raises.
    """

    def __init__(
        self,
        config: AlpacaConfig,
        auth: AlpacaAuth,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.auth = auth
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    def set_config(self, config: AlpacaConfig) -> None:
        """Replace the configuration used for subsequent requests."""
        self.config = config

    def _domain_for(self, host: Host) -> str:
        """Resolve a catalog host to a configured base URL."""
        if host is Host.DATA:
            return self.config.data_url
        if host is Host.OAUTH:
            return self.config.oauth_url
        return self.config.trading_url

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: bytes | None,
    ) -> httpx.Response:
        """Hand the request to the HTTP transport."""
        if self._http_client is not None:
            # Use shared connection pool
            return await self._http_client.request(
                method, url, headers=headers, content=content
            )

        # Fallback: create per-request client (no pooling)
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.request(method, url, headers=headers, content=content)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        domain: str | None = None,
        version: str | None = DEFAULT_VERSION,
    ) -> ApiResult:
        """Make an authenticated API request.

        Args:
            method: HTTP method
            path: Endpoint path (e.g., "orders")
            query: Flat query parameters
            body: Mapping (sent as JSON) or pre-encoded string
            domain: Host override; defaults to the environment's trading host
            version: API version segment, None for unversioned endpoints

        Returns:
            ApiResult for any completed exchange, whatever its status

        Raises:
            AlpacaTransportError: If no response was received
            AlpacaDecodeError: If a JSON response body cannot be parsed
        """
        url = build_url(
            path,
            query,
            domain=domain if domain is not None else self.config.trading_url,
            version=version,
        )
        headers = self.auth.headers()
        content = encode_body(body)

        logger.debug("Request: %s %s", method, url)

        try:
            response = await self._send(method, url, headers, content)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # A response came back, so it is a result rather than a failure
            response = e.response
            logger.info("Response: %s %s -> %s", method, url, response.status_code)
        except httpx.RequestError as e:
            raise AlpacaTransportError(
                f"Request failed: {method} {url}: {e}",
                method=method,
                url=url,
            ) from e

        return ApiResult.from_response(response)

    async def _call(
        self,
        endpoint: Endpoint,
        path_args: Mapping[str, Any] | None = None,
        values: Mapping[str, Any] | None = None,
        *,
        extra_query: Mapping[str, Any] | None = None,
        extra_body: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        """Resolve a catalog endpoint and execute it."""
        resolved = endpoint.resolve(
            path_args, values, extra_query=extra_query, extra_body=extra_body
        )
        return await self._request(
            resolved.method,
            resolved.path,
            query=resolved.query,
            body=resolved.body,
            domain=self._domain_for(resolved.host),
            version=resolved.version,
        )
