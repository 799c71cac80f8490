"""Alpaca API client modules."""

from alpaca_client.api.account import AccountAPI
from alpaca_client.api.assets import AssetsAPI
from alpaca_client.api.calendar import CalendarAPI
from alpaca_client.api.market_data import MarketDataAPI
from alpaca_client.api.oauth import OAuthAPI
from alpaca_client.api.orders import OrdersAPI
from alpaca_client.api.positions import PositionsAPI
from alpaca_client.api.watchlists import WatchlistsAPI

__all__ = [
    "AccountAPI",
    "AssetsAPI",
    "CalendarAPI",
    "MarketDataAPI",
    "OAuthAPI",
    "OrdersAPI",
    "PositionsAPI",
    "WatchlistsAPI",
]
