"""Tests for sharing one http client across the API modules."""

from unittest.mock import AsyncMock, patch

import httpx

from alpaca_client import AlpacaClient, AlpacaConfig, ApiResult


class TestPooledClient:
    """Tests for the client-owned connection pool."""

    async def test_pool_reaches_every_api_module(self, config: AlpacaConfig) -> None:
        """Entering the client should hand one pool to all eight API modules."""
        async with AlpacaClient(config) as client:
            pool = client._http_client
            assert isinstance(pool, httpx.AsyncClient)
            assert len(client._apis) == 8
            assert {id(api._http_client) for api in client._apis} == {id(pool)}

        assert pool.is_closed
        assert all(api._http_client is None for api in client._apis)

    async def test_pool_uses_configured_timeout(self) -> None:
        """The owned pool should use the configured timeout."""
        client = AlpacaClient(AlpacaConfig(key_id="k", secret_key="s", timeout=5.0))
        await client.open()
        try:
            assert client._http_client.timeout.read == 5.0
        finally:
            await client.close()

    async def test_external_client_is_shared_and_left_open(self, config: AlpacaConfig) -> None:
        """A caller's client should reach every module and outlive close()."""
        external = httpx.AsyncClient()
        try:
            async with AlpacaClient(config, http_client=external) as client:
                assert client._owns_http_client is False
                assert all(api._http_client is external for api in client._apis)

            await client.close()
            assert not external.is_closed
        finally:
            await external.aclose()


class TestPerRequestClient:
    """Tests for requests made without a pool."""

    async def test_per_request_client_is_created(self, config: AlpacaConfig) -> None:
        """Without a pool each request should open and close its own client."""
        client = AlpacaClient(config)
        response = httpx.Response(
            200,
            json={"is_open": True},
            request=httpx.Request("GET", "https://paper-api.alpaca.markets/v2/clock"),
        )

        with patch("alpaca_client.api.base.httpx.AsyncClient") as client_cls:
            per_request = client_cls.return_value.__aenter__.return_value
            per_request.request = AsyncMock(return_value=response)

            result = await client.calendar.get_clock()

        client_cls.assert_called_once_with(timeout=config.timeout)
        per_request.request.assert_awaited_once()
        assert result == ApiResult(status_code=200, status_text="OK", payload={"is_open": True})
