"""API parameter types.

Literal type aliases for parameters with constrained values. They document
and type-check what callers pass; values are sent to Alpaca as given.
"""

from typing import Literal

# =============================================================================
# Common Types
# =============================================================================

SortDirection = Literal["asc", "desc"]
"""Sort direction for listed results."""

# =============================================================================
# Order Types
# =============================================================================

OrderSide = Literal["buy", "sell"]
"""Order side."""

OrderType = Literal["market", "limit", "stop", "stop_limit", "trailing_stop"]
"""Order type."""

TimeInForce = Literal["day", "gtc", "opg", "cls", "ioc", "fok"]
"""Order duration/time-in-force."""

OrderClass = Literal["simple", "bracket", "oco", "oto"]
"""Order class for advanced orders."""

OrderStatusFilter = Literal["open", "closed", "all"]
"""Order status filter when listing orders."""

# =============================================================================
# Asset Types
# =============================================================================

AssetStatus = Literal["active", "inactive"]
"""Asset status filter."""

AssetClass = Literal["us_equity", "crypto"]
"""Asset class filter."""

# =============================================================================
# Account Types
# =============================================================================

PortfolioPeriod = str
"""Portfolio history period, a number plus unit: "1D", "1W", "1M", "1A"."""

PortfolioTimeframe = Literal["1Min", "5Min", "15Min", "1H", "1D"]
"""Portfolio history resolution."""

# =============================================================================
# Market Data Types
# =============================================================================

BarAdjustment = Literal["raw", "split", "dividend", "all"]
"""Corporate action adjustment for bars."""
