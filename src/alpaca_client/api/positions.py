"""Positions API endpoints."""

from __future__ import annotations

from decimal import Decimal

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.models.result import ApiResult


class PositionsAPI(BaseAPI):
    """Alpaca Positions API."""

    async def list_positions(self) -> ApiResult:
        """List open positions."""
        return await self._call(endpoints.LIST_POSITIONS)

    async def get_position(self, symbol: str) -> ApiResult:
        """Get the open position for a symbol or asset ID."""
        return await self._call(endpoints.GET_POSITION, {"symbol": symbol})

    async def close_all_positions(self, *, cancel_orders: bool | None = None) -> ApiResult:
        """Liquidate all open positions.

        Args:
            cancel_orders: Also cancel all open orders first
        """
        return await self._call(
            endpoints.CLOSE_ALL_POSITIONS, values={"cancel_orders": cancel_orders}
        )

    async def close_position(
        self,
        symbol: str,
        *,
        qty: int | float | Decimal | None = None,
        percentage: int | float | Decimal | None = None,
    ) -> ApiResult:
        """Liquidate an open position, fully or partially.

        Args:
            symbol: Symbol or asset ID
            qty: Number of shares to liquidate
            percentage: Percent of the position to liquidate
        """
        return await self._call(
            endpoints.CLOSE_POSITION,
            {"symbol": symbol},
            {"qty": qty, "percentage": percentage},
        )
