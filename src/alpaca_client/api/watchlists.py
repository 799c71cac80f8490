"""Watchlists API endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.models.result import ApiResult


def _symbol_list(symbols: str | Sequence[str] | None) -> list[str]:
    """Normalize a single symbol or a sequence of symbols to a list."""
    if isinstance(symbols, str):
        return [symbols]
    return list(symbols or [])


class WatchlistsAPI(BaseAPI):
    """Alpaca Watchlists API.

    Watchlists can be addressed by ID or, through the ``*_by_name``
    variants, by name.
    """

    async def list_watchlists(self) -> ApiResult:
        """List all watchlists."""
        return await self._call(endpoints.LIST_WATCHLISTS)

    async def create_watchlist(
        self, name: str, symbols: str | Sequence[str] | None = None
    ) -> ApiResult:
        """Create a watchlist.

        Args:
            name: Watchlist name
            symbols: Initial symbols, empty when omitted
        """
        values = {"name": name, "symbols": _symbol_list(symbols)}
        return await self._call(endpoints.CREATE_WATCHLIST, values=values)

    async def get_watchlist(self, watchlist_id: str) -> ApiResult:
        """Get a watchlist by ID."""
        return await self._call(endpoints.GET_WATCHLIST, {"watchlist_id": watchlist_id})

    async def get_watchlist_by_name(self, name: str) -> ApiResult:
        """Get a watchlist by name."""
        return await self._call(endpoints.GET_WATCHLIST_BY_NAME, values={"name": name})

    async def update_watchlist(
        self, watchlist_id: str, name: str, symbols: str | Sequence[str] | None = None
    ) -> ApiResult:
        """Replace a watchlist's name and symbols."""
        values = {"name": name, "symbols": _symbol_list(symbols)}
        return await self._call(
            endpoints.UPDATE_WATCHLIST, {"watchlist_id": watchlist_id}, values
        )

    async def update_watchlist_by_name(
        self, name: str, symbols: str | Sequence[str] | None = None
    ) -> ApiResult:
        """Replace the symbols of the named watchlist."""
        values = {"name": name, "symbols": _symbol_list(symbols)}
        return await self._call(endpoints.UPDATE_WATCHLIST_BY_NAME, values=values)

    async def add_asset(self, watchlist_id: str, symbol: str) -> ApiResult:
        """Append a symbol to a watchlist."""
        return await self._call(
            endpoints.ADD_WATCHLIST_ASSET, {"watchlist_id": watchlist_id}, {"symbol": symbol}
        )

    async def add_asset_by_name(self, name: str, symbol: str) -> ApiResult:
        """Append a symbol to the named watchlist."""
        return await self._call(
            endpoints.ADD_WATCHLIST_ASSET_BY_NAME, values={"name": name, "symbol": symbol}
        )

    async def remove_asset(self, watchlist_id: str, symbol: str) -> ApiResult:
        """Remove a symbol from a watchlist."""
        return await self._call(
            endpoints.REMOVE_WATCHLIST_ASSET, {"watchlist_id": watchlist_id, "symbol": symbol}
        )

    async def delete_watchlist(self, watchlist_id: str) -> ApiResult:
        """Delete a watchlist."""
        return await self._call(endpoints.DELETE_WATCHLIST, {"watchlist_id": watchlist_id})

    async def delete_watchlist_by_name(self, name: str) -> ApiResult:
        """Delete the named watchlist."""
        return await self._call(endpoints.DELETE_WATCHLIST_BY_NAME, values={"name": name})
