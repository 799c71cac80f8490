"""Tests for the endpoint catalog and parameter mapping."""

from datetime import date, datetime

import pytest

from alpaca_client.api import endpoints
from alpaca_client.api.endpoints import (
    Endpoint,
    Host,
    Param,
    ParamKind,
    format_date,
    format_timestamp,
    join_csv,
)
from alpaca_client.exceptions import AlpacaValidationError


class TestFormatting:
    """Tests for parameter formatting helpers."""

    def test_format_date(self) -> None:
        """Dates should render as YYYY-MM-DD."""
        assert format_date(date(2021, 1, 5)) == "2021-01-05"
        assert format_date(datetime(2021, 1, 5, 13, 30)) == "2021-01-05"
        assert format_date("2021-01-05T13:30:00") == "2021-01-05"

    def test_format_timestamp(self) -> None:
        """Timestamps should render as YYYY-MM-DDTHH:MM:SSZ."""
        assert format_timestamp("2021-01-01") == "2021-01-01T00:00:00Z"
        assert format_timestamp(date(2021, 2, 1)) == "2021-02-01T00:00:00Z"
        assert format_timestamp(datetime(2021, 2, 1, 9, 30, 5)) == "2021-02-01T09:30:05Z"

    def test_timestamp_no_timezone_conversion(self) -> None:
        """Wall time should be kept as given, whatever the offset."""
        assert format_timestamp("2021-02-01T09:30:00-05:00") == "2021-02-01T09:30:00Z"

    def test_join_csv(self) -> None:
        """Lists should be joined with commas, strings passed through."""
        assert join_csv(["AAPL", "MSFT"]) == "AAPL,MSFT"
        assert join_csv("AAPL,MSFT") == "AAPL,MSFT"


class TestEndpointResolve:
    """Tests for Endpoint.resolve."""

    def test_substitutes_path_placeholders(self) -> None:
        """Path placeholders should be filled from path arguments."""
        resolved = endpoints.GET_ORDER.resolve({"order_id": "abc-123"})

        assert resolved.path == "orders/abc-123"
        assert resolved.method == "GET"

    def test_path_arguments_are_quoted(self) -> None:
        """Path arguments should not be able to add segments."""
        resolved = endpoints.GET_POSITION.resolve({"symbol": "BTC/USD"})

        assert resolved.path == "positions/BTC%2FUSD"

    def test_missing_path_argument(self) -> None:
        """A missing placeholder value should raise KeyError."""
        with pytest.raises(KeyError):
            endpoints.GET_ORDER.resolve({})

    def test_absent_values_not_sent(self) -> None:
        """None values should be left out of the query."""
        resolved = endpoints.LIST_ORDERS.resolve(values={"status": "open", "limit": None})

        assert resolved.query == {"status": "open"}
        assert resolved.body is None

    def test_falsy_values_are_sent(self) -> None:
        """False and 0 are present values, not absent ones."""
        resolved = endpoints.LIST_ORDERS.resolve(values={"nested": False, "limit": 0})

        assert resolved.query == {"limit": 0, "nested": False}

    def test_unrecognized_values_ignored(self) -> None:
        """Values the endpoint does not declare should not be sent."""
        resolved = endpoints.LIST_ASSETS.resolve(values={"status": "active", "bogus": 1})

        assert resolved.query == {"status": "active"}

    def test_csv_parameter(self) -> None:
        """CSV parameters should be joined into one value."""
        resolved = endpoints.GET_ACCOUNT_ACTIVITIES.resolve(
            values={"activity_types": ["FILL", "DIV"]}
        )

        assert resolved.query == {"activity_types": "FILL,DIV"}

    def test_body_parameters(self) -> None:
        """Body parameters should go to the body, lists kept as lists."""
        resolved = endpoints.CREATE_WATCHLIST.resolve(
            values={"name": "tech", "symbols": ["AAPL"]}
        )

        assert resolved.body == {"name": "tech", "symbols": ["AAPL"]}
        assert resolved.query == {}

    def test_extra_body_merged(self) -> None:
        """Extra body entries should be merged over named ones."""
        resolved = endpoints.CREATE_ORDER.resolve(
            values={"symbol": "AAPL", "qty": 1},
            extra_body={"qty": 2, "position_intent": "buy_to_open"},
        )

        assert resolved.body == {"symbol": "AAPL", "qty": 2, "position_intent": "buy_to_open"}

    def test_extra_query_appended(self) -> None:
        """Extra query entries should be appended as given."""
        resolved = endpoints.GET_NEWS.resolve(values={"limit": 5}, extra_query={"foo": "bar"})

        assert resolved.query == {"limit": 5, "foo": "bar"}

    def test_host_and_version(self) -> None:
        """Hosts and versions should come from the descriptor."""
        assert endpoints.GET_BARS.host is Host.DATA
        assert endpoints.GET_NEWS.version == "v1beta1"
        assert endpoints.GET_OAUTH_TOKEN.host is Host.OAUTH
        assert endpoints.GET_OAUTH_TOKEN.version is None
        assert endpoints.GET_ACCOUNT.host is Host.TRADING
        assert endpoints.GET_ACCOUNT.version == "v2"

    def test_custom_endpoint(self) -> None:
        """Endpoints can be declared ad hoc."""
        endpoint = Endpoint(
            "GET",
            "things/{thing_id}",
            query=(Param("day", ParamKind.DATE),),
        )

        resolved = endpoint.resolve({"thing_id": 7}, {"day": date(2020, 5, 1)})

        assert endpoint.placeholders == ("thing_id",)
        assert resolved.path == "things/7"
        assert resolved.query == {"day": "2020-05-01"}

    def test_unparseable_date_raises_validation_error(self) -> None:
        """A non-ISO date string should name the offending parameter."""
        endpoint = Endpoint("GET", "things", query=(Param("day", ParamKind.DATE),))

        with pytest.raises(AlpacaValidationError) as exc_info:
            endpoint.resolve({}, {"day": "01/02/2021"})

        assert exc_info.value.field == "day"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unparseable_timestamp_raises_validation_error(self) -> None:
        """A non-ISO timestamp should raise before any request is built."""
        with pytest.raises(AlpacaValidationError) as exc_info:
            endpoints.GET_BARS.resolve(
                {"symbol": "AAPL"}, {"timeframe": "1Day", "start": "yesterday"}
            )

        assert exc_info.value.field == "start"
