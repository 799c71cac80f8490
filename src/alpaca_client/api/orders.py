"""Orders API endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.api.types import (
    OrderClass,
    OrderSide,
    OrderStatusFilter,
    OrderType,
    SortDirection,
    TimeInForce,
)
from alpaca_client.models.result import ApiResult

Number = int | float | Decimal | str


class OrdersAPI(BaseAPI):
    """Alpaca Orders API.

    Provides order listing, placement, replacement and cancellation.
    """

    async def list_orders(
        self,
        *,
        status: OrderStatusFilter | None = None,
        limit: int | None = None,
        after: datetime | str | None = None,
        until: datetime | str | None = None,
        direction: SortDirection | None = None,
        nested: bool | None = None,
        symbols: Sequence[str] | None = None,
    ) -> ApiResult:
        """List orders.

        Args:
            status: Order status filter ("open", "closed" or "all")
            limit: Maximum number of orders
            after: Only orders submitted after this time
            until: Only orders submitted until this time
            direction: Chronological sort direction
            nested: Roll up multi-leg orders under their parent
            symbols: Only orders for these symbols

        Returns:
            ApiResult with a list of orders
        """
        values = {
            "status": status,
            "limit": limit,
            "after": after,
            "until": until,
            "direction": direction,
            "nested": nested,
            "symbols": symbols or None,
        }
        return await self._call(endpoints.LIST_ORDERS, values=values)

    async def get_order(self, order_id: str, *, nested: bool | None = None) -> ApiResult:
        """Get an order by its server-assigned ID."""
        return await self._call(endpoints.GET_ORDER, {"order_id": order_id}, {"nested": nested})

    async def get_order_by_client_id(self, client_order_id: str) -> ApiResult:
        """Get an order by the client-assigned order ID."""
        return await self._call(
            endpoints.GET_ORDER_BY_CLIENT_ID,
            values={"client_order_id": client_order_id},
        )

    async def replace_order(
        self,
        order_id: str,
        qty: Number,
        time_in_force: TimeInForce,
        *,
        limit_price: Number | None = None,
        stop_price: Number | None = None,
        trail: Number | None = None,
        client_order_id: str | None = None,
    ) -> ApiResult:
        """Replace an open order with new parameters.

        Args:
            order_id: Order to replace
            qty: New quantity
            time_in_force: New time-in-force
            limit_price: New limit price
            stop_price: New stop price
            trail: New trail value for trailing stop orders
            client_order_id: New client order ID

        Returns:
            ApiResult with the replacement order
        """
        values = {
            "qty": qty,
            "time_in_force": time_in_force,
            "limit_price": limit_price,
            "stop_price": stop_price,
            "trail": trail,
            "client_order_id": client_order_id,
        }
        return await self._call(endpoints.REPLACE_ORDER, {"order_id": order_id}, values)

    async def cancel_order(self, order_id: str) -> ApiResult:
        """Cancel an open order."""
        return await self._call(endpoints.CANCEL_ORDER, {"order_id": order_id})

    async def cancel_all_orders(self) -> ApiResult:
        """Cancel all open orders."""
        return await self._call(endpoints.CANCEL_ALL_ORDERS)

    async def create_order(
        self,
        symbol: str,
        qty: Number | None,
        side: OrderSide,
        type: OrderType,
        time_in_force: TimeInForce,
        *,
        limit_price: Number | None = None,
        stop_price: Number | None = None,
        client_order_id: str | None = None,
        extended_hours: bool | None = None,
        order_class: OrderClass | None = None,
        trail_price: Number | None = None,
        trail_percent: Number | None = None,
        take_profit: Mapping[str, Any] | None = None,
        stop_loss: Mapping[str, Any] | None = None,
        notional: Number | None = None,
        additional: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        """Submit a new order.

        Args:
            symbol: Symbol or asset ID
            qty: Number of shares; None when ordering by ``notional``
            side: "buy" or "sell"
            type: Order type
            time_in_force: Time-in-force
            limit_price: Limit price for limit and stop-limit orders
            stop_price: Stop price for stop and stop-limit orders
            client_order_id: Unique client-assigned ID
            extended_hours: Eligible for extended hours (limit/day only)
            order_class: "simple", "bracket", "oco" or "oto"
            trail_price: Dollar trail for trailing stop orders
            trail_percent: Percent trail for trailing stop orders
            take_profit: Take-profit leg, e.g. {"limit_price": "301"}
            stop_loss: Stop-loss leg, e.g. {"stop_price": "299"}
            notional: Dollar amount to trade instead of ``qty``
            additional: Extra body fields, merged over the named ones

        Returns:
            ApiResult with the created order
        """
        values = {
            "symbol": symbol,
            "qty": qty,
            "notional": notional,
            "side": side,
            "type": type,
            "time_in_force": time_in_force,
            "limit_price": limit_price,
            "stop_price": stop_price,
            "trail_price": trail_price,
            "trail_percent": trail_percent,
            "extended_hours": extended_hours,
            "client_order_id": client_order_id,
            "order_class": order_class,
            "take_profit": take_profit,
            "stop_loss": stop_loss,
        }
        return await self._call(endpoints.CREATE_ORDER, values=values, extra_body=additional)
