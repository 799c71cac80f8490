"""Market Data API endpoints.

These endpoints live on the market data host rather than the trading host,
and are the same for paper and live accounts.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.api.types import BarAdjustment, SortDirection
from alpaca_client.models.result import ApiResult

DateLike = date | datetime | str


class MarketDataAPI(BaseAPI):
    """Alpaca Market Data API.

    Historical trades, quotes and bars, latest values, snapshots and news.
    Start/end values are sent as YYYY-MM-DDTHH:MM:SSZ exactly as given;
    no timezone conversion is applied.
    """

    async def get_trades(
        self,
        symbol: str,
        start: DateLike | None,
        end: DateLike | None,
        *,
        limit: int | None = None,
        page_token: str | None = None,
    ) -> ApiResult:
        """Get historical trades for a symbol.

        Args:
            symbol: Ticker symbol
            start: Start of the time range
            end: End of the time range
            limit: Maximum number of trades per page
            page_token: Token from the previous page

        Returns:
            ApiResult with trades and a next_page_token
        """
        values = {"start": start, "end": end, "limit": limit, "page_token": page_token}
        return await self._call(endpoints.GET_TRADES, {"symbol": symbol}, values)

    async def get_last_trade(self, symbol: str) -> ApiResult:
        """Get the latest trade for a symbol."""
        return await self._call(endpoints.GET_LAST_TRADE, {"symbol": symbol})

    async def get_quotes(
        self,
        symbol: str,
        start: DateLike | None,
        end: DateLike | None,
        *,
        limit: int | None = None,
        page_token: str | None = None,
    ) -> ApiResult:
        """Get historical quotes for a symbol."""
        values = {"start": start, "end": end, "limit": limit, "page_token": page_token}
        return await self._call(endpoints.GET_QUOTES, {"symbol": symbol}, values)

    async def get_last_quote(self, symbol: str) -> ApiResult:
        """Get the latest quote for a symbol."""
        return await self._call(endpoints.GET_LAST_QUOTE, {"symbol": symbol})

    async def get_bars(
        self,
        timeframe: str,
        symbol: str,
        start: DateLike | None,
        end: DateLike | None,
        *,
        limit: int | None = None,
        page_token: str | None = None,
        adjustment: BarAdjustment | None = None,
    ) -> ApiResult:
        """Get historical bars for a symbol.

        Args:
            timeframe: Bar size, e.g. "1Min", "1Hour", "1Day"
            symbol: Ticker symbol
            start: Start of the time range
            end: End of the time range
            limit: Maximum number of bars per page
            page_token: Token from the previous page
            adjustment: Corporate action adjustment

        Returns:
            ApiResult with bars and a next_page_token
        """
        values = {
            "timeframe": timeframe,
            "start": start,
            "end": end,
            "limit": limit,
            "page_token": page_token,
            "adjustment": adjustment,
        }
        return await self._call(endpoints.GET_BARS, {"symbol": symbol}, values)

    async def get_multi_snapshot(self, symbols: str | Sequence[str]) -> ApiResult:
        """Get snapshots for several symbols.

        Args:
            symbols: Symbols as a list or a comma separated string
        """
        return await self._call(endpoints.GET_MULTI_SNAPSHOT, values={"symbols": symbols})

    async def get_snapshot(self, symbol: str) -> ApiResult:
        """Get the snapshot (latest trade, quote, bars) for a symbol."""
        return await self._call(endpoints.GET_SNAPSHOT, {"symbol": symbol})

    async def get_news(
        self,
        *,
        symbols: str | Sequence[str] | None = None,
        start: DateLike | None = None,
        end: DateLike | None = None,
        limit: int | None = None,
        sort: SortDirection | None = None,
        include_content: bool | None = None,
        exclude_contentless: bool | None = None,
        page_token: str | None = None,
        **options: Any,
    ) -> ApiResult:
        """Get news articles.

        Named filters are formatted like the other market data endpoints.
        Any further ``options`` are passed through as query parameters as
        given; list values among them are not sent.
        """
        values = {
            "symbols": symbols,
            "start": start,
            "end": end,
            "limit": limit,
            "sort": sort,
            "include_content": include_content,
            "exclude_contentless": exclude_contentless,
            "page_token": page_token,
        }
        return await self._call(endpoints.GET_NEWS, values=values, extra_query=options)
