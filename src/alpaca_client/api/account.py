"""Account API endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.api.types import PortfolioPeriod, PortfolioTimeframe, SortDirection
from alpaca_client.models.result import ApiResult

DateLike = date | datetime | str


class AccountAPI(BaseAPI):
    """Alpaca Account API.

    Provides access to the account, its configuration, activities and
    portfolio history.
    """

    async def get_account(self) -> ApiResult:
        """Get the current account."""
        return await self._call(endpoints.GET_ACCOUNT)

    async def get_configurations(self) -> ApiResult:
        """Get the account configuration (trade confirmations, shorting, ...)."""
        return await self._call(endpoints.GET_ACCOUNT_CONFIGURATIONS)

    async def update_configurations(self, config: Mapping[str, Any]) -> ApiResult:
        """Update account configuration fields.

        An empty mapping sends the PATCH with no body at all rather than
        an empty JSON document, which leaves every setting unchanged.

        Args:
            config: Fields to change, e.g. {"no_shorting": True}
        """
        return await self._call(endpoints.UPDATE_ACCOUNT_CONFIGURATIONS, extra_body=config)

    async def get_activities(
        self,
        activity_types: Sequence[str] | None = None,
        *,
        date: DateLike | None = None,
        until: DateLike | None = None,
        after: DateLike | None = None,
        direction: SortDirection | None = None,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> ApiResult:
        """Get account activities of one or more types.

        Args:
            activity_types: Activity types to include (e.g. ["FILL", "DIV"]);
                all types when omitted
            date: Only activities on this date
            until: Only activities up to this date
            after: Only activities after this date
            direction: Sort direction
            page_size: Maximum number of entries
            page_token: Activity ID to page from

        Returns:
            ApiResult with a list of activities
        """
        values = {
            "activity_types": activity_types or None,
            "date": date,
            "until": until,
            "after": after,
            "direction": direction,
            "page_size": page_size,
            "page_token": page_token,
        }
        return await self._call(endpoints.GET_ACCOUNT_ACTIVITIES, values=values)

    async def get_activities_of_type(
        self,
        activity_type: str,
        *,
        date: DateLike | None = None,
        until: DateLike | None = None,
        after: DateLike | None = None,
        direction: SortDirection | None = None,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> ApiResult:
        """Get account activities of a single type (e.g. "FILL")."""
        values = {
            "date": date,
            "until": until,
            "after": after,
            "direction": direction,
            "page_size": page_size,
            "page_token": page_token,
        }
        return await self._call(
            endpoints.GET_ACCOUNT_ACTIVITIES_OF_TYPE,
            {"activity_type": activity_type},
            values,
        )

    async def get_portfolio_history(
        self,
        *,
        period: PortfolioPeriod | None = None,
        timeframe: PortfolioTimeframe | None = None,
        date_end: DateLike | None = None,
        extended_hours: bool | None = None,
    ) -> ApiResult:
        """Get equity and profit/loss history.

        Args:
            period: Duration of the data, e.g. "1M"
            timeframe: Resolution of each data point
            date_end: Last date of the history
            extended_hours: Include extended hours (1D period only)
        """
        values = {
            "period": period,
            "timeframe": timeframe,
            "date_end": date_end,
            "extended_hours": extended_hours,
        }
        return await self._call(endpoints.GET_PORTFOLIO_HISTORY, values=values)
