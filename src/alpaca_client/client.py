"""Main Alpaca client."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import httpx

from alpaca_client.api.account import AccountAPI
from alpaca_client.api.assets import AssetsAPI
from alpaca_client.api.calendar import CalendarAPI
from alpaca_client.api.market_data import MarketDataAPI
from alpaca_client.api.oauth import OAuthAPI
from alpaca_client.api.orders import OrdersAPI
from alpaca_client.api.positions import PositionsAPI
from alpaca_client.api.watchlists import WatchlistsAPI
from alpaca_client.auth import AlpacaAuth
from alpaca_client.config import AlpacaConfig, Environment

if TYPE_CHECKING:
    from types import TracebackType

    from alpaca_client.api.base import BaseAPI


class AlpacaClient:
    """Alpaca API client.

    Provides a unified interface to the trading, market data and OAuth APIs.
    Every request returns an ApiResult, whatever its HTTP status.

    Usage (context manager - recommended for connection pooling):
        async with AlpacaClient(config) as client:
            account = await client.account.get_account()
            bars = await client.market_data.get_bars("1Day", "AAPL", start, end)

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        client = AlpacaClient(config, http_client=http_client)
        # Client uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        client = AlpacaClient(config)
        result = await client.orders.list_orders(status="open")

    Credentials and environment may be changed at any time and apply to
    subsequent requests. Set them before sharing the client across
    concurrent tasks.
    """

    def __init__(
        self,
        config: AlpacaConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Alpaca configuration with credentials (defaults to an
                empty paper configuration)
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
                        If not provided, use open()/close() or context manager to
                        enable pooling, or each request creates its own connection.
        """
        self.config = config or AlpacaConfig()
        self.auth = AlpacaAuth.from_config(self.config)

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

        # Initialize API modules
        self.account = AccountAPI(self.config, self.auth, http_client)
        self.assets = AssetsAPI(self.config, self.auth, http_client)
        self.calendar = CalendarAPI(self.config, self.auth, http_client)
        self.market_data = MarketDataAPI(self.config, self.auth, http_client)
        self.oauth = OAuthAPI(self.config, self.auth, http_client)
        self.orders = OrdersAPI(self.config, self.auth, http_client)
        self.positions = PositionsAPI(self.config, self.auth, http_client)
        self.watchlists = WatchlistsAPI(self.config, self.auth, http_client)

    @property
    def _apis(self) -> tuple[BaseAPI, ...]:
        return (
            self.account,
            self.assets,
            self.calendar,
            self.market_data,
            self.oauth,
            self.orders,
            self.positions,
            self.watchlists,
        )

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on all API modules."""
        self._http_client = http_client
        for api in self._apis:
            api.set_http_client(http_client)

    def _set_config(self, config: AlpacaConfig) -> None:
        """Update configuration on all API modules."""
        self.config = config
        for api in self._apis:
            api.set_config(config)

    async def open(self) -> None:
        """Open connection pool for HTTP requests.

        Creates a shared httpx.AsyncClient for connection pooling.
        Only needed if not using context manager or external http_client.
        """
        if self._http_client is None and self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._set_http_client(http_client)

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> AlpacaClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls, *, paper: bool | None = None) -> AlpacaClient:
        """Create client from environment variables.

        Expects APCA_API_KEY_ID and APCA_API_SECRET_KEY, or APCA_OAUTH_TOKEN.
        """
        config = AlpacaConfig.from_env(paper=paper)
        return cls(config)

    @property
    def environment(self) -> Environment:
        """Get the active trading environment."""
        return self.config.environment

    def set_paper(self, paper: bool = True) -> None:
        """Switch between the paper and live trading hosts."""
        self._set_config(dataclasses.replace(self.config, paper=paper))

    def set_key(self, key_id: str = "") -> None:
        """Set the API key ID."""
        self.auth.set_key(key_id)

    def set_secret(self, secret_key: str = "") -> None:
        """Set the API secret key."""
        self.auth.set_secret(secret_key)

    def set_access_token(self, token: str | None) -> None:
        """Set the OAuth access token.

        While a token is set it is used instead of the key pair.
        Pass None to go back to key pair authentication.
        """
        self.auth.set_access_token(token)
