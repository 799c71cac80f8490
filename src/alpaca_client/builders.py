"""Fluent order builder for the Alpaca Orders API."""

from decimal import Decimal
from typing import Any

from alpaca_client.api.types import OrderClass, OrderSide, OrderType, TimeInForce
from alpaca_client.exceptions import AlpacaValidationError

__all__ = ["OrderBuilder"]

Number = int | float | Decimal | str


class OrderBuilder:
    """Fluent builder for equity orders.

    Example:
        order = (
            OrderBuilder("AAPL")
            .buy(100)
            .limit(150.00)
            .good_until_cancel()
            .bracket(take_profit=160.00, stop_loss=145.00)
            .build()
        )

        # Then use with OrdersAPI:
        result = await client.orders.create_order(**order)
    """

    def __init__(self, symbol: str) -> None:
        """Initialize builder with symbol.

        Args:
            symbol: Stock ticker symbol (e.g., "AAPL")
        """
        self._symbol = symbol.upper()
        self._side: OrderSide | None = None
        self._qty: Number | None = None
        self._notional: Number | None = None
        self._type: OrderType = "market"
        self._limit_price: Number | None = None
        self._stop_price: Number | None = None
        self._trail_price: Number | None = None
        self._trail_percent: Number | None = None
        self._time_in_force: TimeInForce = "day"
        self._extended_hours: bool | None = None
        self._client_order_id: str | None = None
        self._order_class: OrderClass | None = None
        self._take_profit: dict[str, Any] | None = None
        self._stop_loss: dict[str, Any] | None = None

    # Side methods
    def buy(self, qty: Number) -> "OrderBuilder":
        """Buy a number of shares."""
        self._side = "buy"
        self._qty = qty
        self._notional = None
        return self

    def sell(self, qty: Number) -> "OrderBuilder":
        """Sell a number of shares."""
        self._side = "sell"
        self._qty = qty
        self._notional = None
        return self

    def buy_notional(self, amount: Number) -> "OrderBuilder":
        """Buy a dollar amount (fractional shares)."""
        self._side = "buy"
        self._notional = amount
        self._qty = None
        return self

    def sell_notional(self, amount: Number) -> "OrderBuilder":
        """Sell a dollar amount (fractional shares)."""
        self._side = "sell"
        self._notional = amount
        self._qty = None
        return self

    # Order type methods
    def market(self) -> "OrderBuilder":
        """Set as market order (default)."""
        self._type = "market"
        self._limit_price = None
        self._stop_price = None
        self._trail_price = None
        self._trail_percent = None
        return self

    def limit(self, price: Number) -> "OrderBuilder":
        """Set as limit order with specified price."""
        self._type = "limit"
        self._limit_price = price
        self._stop_price = None
        self._trail_price = None
        self._trail_percent = None
        return self

    def stop(self, price: Number) -> "OrderBuilder":
        """Set as stop order with specified trigger price."""
        self._type = "stop"
        self._stop_price = price
        self._limit_price = None
        self._trail_price = None
        self._trail_percent = None
        return self

    def stop_limit(self, stop_price: Number, limit_price: Number) -> "OrderBuilder":
        """Set as stop-limit order with trigger and limit prices."""
        self._type = "stop_limit"
        self._stop_price = stop_price
        self._limit_price = limit_price
        self._trail_price = None
        self._trail_percent = None
        return self

    def trailing_stop(
        self, *, price: Number | None = None, percent: Number | None = None
    ) -> "OrderBuilder":
        """Set as trailing stop with a dollar or percent trail."""
        self._type = "trailing_stop"
        self._limit_price = None
        self._stop_price = None
        self._trail_price = price
        self._trail_percent = percent
        return self

    # Time-in-force methods
    def day(self) -> "OrderBuilder":
        """Set order to expire at end of day (default)."""
        self._time_in_force = "day"
        return self

    def good_until_cancel(self) -> "OrderBuilder":
        """Set order to remain active until cancelled."""
        self._time_in_force = "gtc"
        return self

    def immediate_or_cancel(self) -> "OrderBuilder":
        """Set order to fill immediately or cancel."""
        self._time_in_force = "ioc"
        return self

    def fill_or_kill(self) -> "OrderBuilder":
        """Set order to fill completely or cancel entirely."""
        self._time_in_force = "fok"
        return self

    def at_open(self) -> "OrderBuilder":
        """Execute in the opening auction."""
        self._time_in_force = "opg"
        return self

    def at_close(self) -> "OrderBuilder":
        """Execute in the closing auction."""
        self._time_in_force = "cls"
        return self

    # Advanced orders
    def bracket(
        self,
        *,
        take_profit: Number,
        stop_loss: Number,
        stop_loss_limit: Number | None = None,
    ) -> "OrderBuilder":
        """Attach take-profit and stop-loss legs."""
        self._order_class = "bracket"
        self._take_profit = {"limit_price": take_profit}
        self._stop_loss = {"stop_price": stop_loss}
        if stop_loss_limit is not None:
            self._stop_loss["limit_price"] = stop_loss_limit
        return self

    # Other options
    def extended_hours(self, enabled: bool = True) -> "OrderBuilder":
        """Allow execution in pre-market and after-hours sessions."""
        self._extended_hours = enabled
        return self

    def client_order_id(self, order_id: str) -> "OrderBuilder":
        """Set custom client order ID."""
        self._client_order_id = order_id
        return self

    def build(self) -> dict[str, Any]:
        """Build keyword arguments for OrdersAPI.create_order().

        Raises:
            AlpacaValidationError: If required fields are missing or inconsistent
        """
        if self._side is None:
            raise AlpacaValidationError(
                "Order side required - call buy(), sell(), etc.", field="side"
            )
        if self._qty is None and self._notional is None:
            raise AlpacaValidationError("Quantity or notional required", field="qty")
        if self._qty is not None and Decimal(str(self._qty)) <= 0:
            raise AlpacaValidationError("Quantity must be positive", field="qty")
        if self._type in ("limit", "stop_limit") and self._limit_price is None:
            raise AlpacaValidationError(
                "Limit price required for limit orders", field="limit_price"
            )
        if self._type in ("stop", "stop_limit") and self._stop_price is None:
            raise AlpacaValidationError(
                "Stop price required for stop orders", field="stop_price"
            )
        no_trail = self._trail_price is None and self._trail_percent is None
        both_trails = self._trail_price is not None and self._trail_percent is not None
        if self._type == "trailing_stop" and (no_trail or both_trails):
            raise AlpacaValidationError(
                "Exactly one of trail price or trail percent required for trailing stops",
                field="trail_price",
            )
        if self._extended_hours and (self._type != "limit" or self._time_in_force != "day"):
            raise AlpacaValidationError(
                "Extended hours orders must be day limit orders", field="extended_hours"
            )

        order: dict[str, Any] = {
            "symbol": self._symbol,
            "qty": self._qty,
            "side": self._side,
            "type": self._type,
            "time_in_force": self._time_in_force,
        }

        optional = {
            "notional": self._notional,
            "limit_price": self._limit_price,
            "stop_price": self._stop_price,
            "trail_price": self._trail_price,
            "trail_percent": self._trail_percent,
            "extended_hours": self._extended_hours,
            "client_order_id": self._client_order_id,
            "order_class": self._order_class,
            "take_profit": self._take_profit,
            "stop_loss": self._stop_loss,
        }
        order.update({key: value for key, value in optional.items() if value is not None})

        return order
