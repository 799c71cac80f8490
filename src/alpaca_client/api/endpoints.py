"""Declarative endpoint catalog.

Each remote operation is described by one ``Endpoint``: HTTP method, path
template, recognized query and body parameters, and optional host/version
overrides. ``Endpoint.resolve`` turns caller arguments into the path, query
and body for a single request. Values that are ``None`` are treated as absent
and never sent.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import StrEnum
from string import Formatter
from typing import Any
from urllib.parse import quote

from alpaca_client.exceptions import AlpacaValidationError
from alpaca_client.urls import DEFAULT_VERSION


class Host(StrEnum):
    """Which configured host an endpoint lives on."""

    TRADING = "trading"  # paper or live, from the environment
    DATA = "data"
    OAUTH = "oauth"


class ParamKind(StrEnum):
    """How a parameter value is rendered before sending."""

    SCALAR = "scalar"
    CSV = "csv"  # list joined with commas
    DATE = "date"  # YYYY-MM-DD
    TIMESTAMP = "timestamp"  # YYYY-MM-DDTHH:MM:SSZ


DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _to_datetime(value: date | datetime | str) -> datetime:
    """Coerce a date, datetime or ISO string to a datetime, keeping its wall time."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.fromisoformat(value)


def format_date(value: date | datetime | str) -> str:
    """Format a value as YYYY-MM-DD."""
    return _to_datetime(value).strftime(DATE_FORMAT)


def format_timestamp(value: date | datetime | str) -> str:
    """Format a value as YYYY-MM-DDTHH:MM:SSZ without timezone conversion."""
    return _to_datetime(value).strftime(TIMESTAMP_FORMAT)


def join_csv(value: str | Sequence[str]) -> str:
    """Join a list of values with commas; strings pass through."""
    if isinstance(value, str):
        return value
    return ",".join(str(v) for v in value)


@dataclass(frozen=True, slots=True)
class Param:
    """A recognized query or body parameter."""

    name: str
    kind: ParamKind = ParamKind.SCALAR

    def render(self, value: Any) -> Any:
        """Apply this parameter's formatting to a present value."""
        if self.kind is ParamKind.CSV:
            return join_csv(value)
        try:
            if self.kind is ParamKind.DATE:
                return format_date(value)
            if self.kind is ParamKind.TIMESTAMP:
                return format_timestamp(value)
        except (TypeError, ValueError) as e:
            raise AlpacaValidationError(
                f"Invalid date or time for {self.name}: {value!r}", field=self.name
            ) from e
        return value


def _params(*specs: str | Param) -> tuple[Param, ...]:
    """Build a parameter tuple; bare strings are scalar parameters."""
    return tuple(spec if isinstance(spec, Param) else Param(spec) for spec in specs)


@dataclass(frozen=True, slots=True)
class ResolvedRequest:
    """Per-call request parts produced from an endpoint."""

    method: str
    path: str
    query: dict[str, Any]
    body: dict[str, Any] | None
    host: Host
    version: str | None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Shape of one remote operation."""

    method: str
    path: str
    query: tuple[Param, ...] = ()
    body: tuple[Param, ...] = ()
    host: Host = Host.TRADING
    version: str | None = DEFAULT_VERSION

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Names of the path template placeholders."""
        return tuple(name for _, name, _, _ in Formatter().parse(self.path) if name)

    def resolve(
        self,
        path_args: Mapping[str, Any] | None = None,
        values: Mapping[str, Any] | None = None,
        *,
        extra_query: Mapping[str, Any] | None = None,
        extra_body: Mapping[str, Any] | None = None,
    ) -> ResolvedRequest:
        """Build the path, query and body for one call.

        Args:
            path_args: Values for the path template placeholders
            values: Named arguments; only recognized, non-None ones are sent
            extra_query: Free-form query entries appended as given
            extra_body: Free-form body entries merged over recognized fields

        Returns:
            ResolvedRequest for the executor

        Raises:
            KeyError: If a path placeholder has no value
        """
        path_args = path_args or {}
        values = values or {}

        missing = [name for name in self.placeholders if path_args.get(name) is None]
        if missing:
            msg = f"Missing path argument(s) for {self.path}: {', '.join(missing)}"
            raise KeyError(msg)

        path = self.path.format(
            **{name: quote(str(path_args[name]), safe="") for name in self.placeholders}
        )

        query = {
            param.name: param.render(values[param.name])
            for param in self.query
            if values.get(param.name) is not None
        }
        if extra_query:
            query.update(extra_query)

        body: dict[str, Any] | None = None
        if self.body or extra_body:
            body = {
                param.name: param.render(values[param.name])
                for param in self.body
                if values.get(param.name) is not None
            }
            if extra_body:
                body.update(extra_body)

        return ResolvedRequest(
            method=self.method,
            path=path,
            query=query,
            body=body,
            host=self.host,
            version=self.version,
        )


# =============================================================================
# Account
# =============================================================================

ACTIVITY_QUERY = _params(
    Param("date", ParamKind.DATE),
    Param("until", ParamKind.DATE),
    Param("after", ParamKind.DATE),
    "direction",
    "page_size",
    "page_token",
)

GET_ACCOUNT = Endpoint("GET", "account")
GET_ACCOUNT_CONFIGURATIONS = Endpoint("GET", "account/configurations")
UPDATE_ACCOUNT_CONFIGURATIONS = Endpoint("PATCH", "account/configurations")
GET_ACCOUNT_ACTIVITIES = Endpoint(
    "GET",
    "account/activities",
    query=(Param("activity_types", ParamKind.CSV), *ACTIVITY_QUERY),
)
GET_ACCOUNT_ACTIVITIES_OF_TYPE = Endpoint(
    "GET", "account/activities/{activity_type}", query=ACTIVITY_QUERY
)
GET_PORTFOLIO_HISTORY = Endpoint(
    "GET",
    "account/portfolio/history",
    query=_params("period", "timeframe", Param("date_end", ParamKind.DATE), "extended_hours"),
)

# =============================================================================
# Orders
# =============================================================================

LIST_ORDERS = Endpoint(
    "GET",
    "orders",
    query=_params(
        "status",
        "limit",
        "after",
        "until",
        "direction",
        "nested",
        Param("symbols", ParamKind.CSV),
    ),
)
GET_ORDER = Endpoint("GET", "orders/{order_id}", query=_params("nested"))
GET_ORDER_BY_CLIENT_ID = Endpoint(
    "GET", "orders:by_client_order_id", query=_params("client_order_id")
)
REPLACE_ORDER = Endpoint(
    "PATCH",
    "orders/{order_id}",
    body=_params(
        "qty", "time_in_force", "limit_price", "stop_price", "trail", "client_order_id"
    ),
)
CANCEL_ORDER = Endpoint("DELETE", "orders/{order_id}")
CANCEL_ALL_ORDERS = Endpoint("DELETE", "orders")
CREATE_ORDER = Endpoint(
    "POST",
    "orders",
    body=_params(
        "symbol",
        "qty",
        "notional",
        "side",
        "type",
        "time_in_force",
        "limit_price",
        "stop_price",
        "trail_price",
        "trail_percent",
        "extended_hours",
        "client_order_id",
        "order_class",
        "take_profit",
        "stop_loss",
    ),
)

# =============================================================================
# Positions
# =============================================================================

LIST_POSITIONS = Endpoint("GET", "positions")
GET_POSITION = Endpoint("GET", "positions/{symbol}")
CLOSE_ALL_POSITIONS = Endpoint("DELETE", "positions", query=_params("cancel_orders"))
CLOSE_POSITION = Endpoint(
    "DELETE", "positions/{symbol}", query=_params("qty", "percentage")
)

# =============================================================================
# Assets
# =============================================================================

LIST_ASSETS = Endpoint("GET", "assets", query=_params("status", "asset_class", "exchange"))
GET_ASSET = Endpoint("GET", "assets/{symbol_or_id}")

# =============================================================================
# Watchlists
# =============================================================================

LIST_WATCHLISTS = Endpoint("GET", "watchlists")
CREATE_WATCHLIST = Endpoint("POST", "watchlists", body=_params("name", "symbols"))
GET_WATCHLIST = Endpoint("GET", "watchlists/{watchlist_id}")
GET_WATCHLIST_BY_NAME = Endpoint("GET", "watchlists:by_name", query=_params("name"))
UPDATE_WATCHLIST = Endpoint(
    "PUT", "watchlists/{watchlist_id}", body=_params("name", "symbols")
)
UPDATE_WATCHLIST_BY_NAME = Endpoint(
    "PUT", "watchlists:by_name", query=_params("name"), body=_params("name", "symbols")
)
ADD_WATCHLIST_ASSET = Endpoint("POST", "watchlists/{watchlist_id}", body=_params("symbol"))
ADD_WATCHLIST_ASSET_BY_NAME = Endpoint(
    "POST", "watchlists:by_name", query=_params("name"), body=_params("symbol")
)
REMOVE_WATCHLIST_ASSET = Endpoint("DELETE", "watchlists/{watchlist_id}/{symbol}")
DELETE_WATCHLIST = Endpoint("DELETE", "watchlists/{watchlist_id}")
DELETE_WATCHLIST_BY_NAME = Endpoint("DELETE", "watchlists:by_name", query=_params("name"))

# =============================================================================
# Calendar and clock
# =============================================================================

GET_CALENDAR = Endpoint(
    "GET",
    "calendar",
    query=(Param("start", ParamKind.DATE), Param("end", ParamKind.DATE)),
)
GET_CLOCK = Endpoint("GET", "clock")

# =============================================================================
# Market data
# =============================================================================

HISTORICAL_QUERY = _params(
    Param("start", ParamKind.TIMESTAMP),
    Param("end", ParamKind.TIMESTAMP),
    "limit",
    "page_token",
)

GET_TRADES = Endpoint("GET", "stocks/{symbol}/trades", query=HISTORICAL_QUERY, host=Host.DATA)
GET_LAST_TRADE = Endpoint("GET", "stocks/{symbol}/trades/latest", host=Host.DATA)
GET_QUOTES = Endpoint("GET", "stocks/{symbol}/quotes", query=HISTORICAL_QUERY, host=Host.DATA)
GET_LAST_QUOTE = Endpoint("GET", "stocks/{symbol}/quotes/latest", host=Host.DATA)
GET_BARS = Endpoint(
    "GET",
    "stocks/{symbol}/bars",
    query=(Param("timeframe"), *HISTORICAL_QUERY, Param("adjustment")),
    host=Host.DATA,
)
GET_MULTI_SNAPSHOT = Endpoint(
    "GET", "stocks/snapshots", query=(Param("symbols", ParamKind.CSV),), host=Host.DATA
)
GET_SNAPSHOT = Endpoint("GET", "stocks/{symbol}/snapshot", host=Host.DATA)
GET_NEWS = Endpoint(
    "GET",
    "news",
    query=_params(
        Param("symbols", ParamKind.CSV),
        *HISTORICAL_QUERY,
        "sort",
        "include_content",
        "exclude_contentless",
    ),
    host=Host.DATA,
    version="v1beta1",
)

# =============================================================================
# OAuth
# =============================================================================

GET_OAUTH_TOKEN = Endpoint(
    "POST",
    "oauth/token",
    body=_params("grant_type", "code", "client_id", "client_secret", "redirect_uri"),
    host=Host.OAUTH,
    version=None,
)
GET_OAUTH_TOKEN_DETAILS = Endpoint("GET", "oauth/token", host=Host.OAUTH, version=None)
