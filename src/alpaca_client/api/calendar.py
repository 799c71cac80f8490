"""Calendar and clock API endpoints."""

from __future__ import annotations

from datetime import date, datetime

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.models.result import ApiResult


class CalendarAPI(BaseAPI):
    """Alpaca market calendar and clock."""

    async def get_calendar(
        self,
        *,
        start: date | datetime | str | None = None,
        end: date | datetime | str | None = None,
    ) -> ApiResult:
        """Get market days between two dates.

        Args:
            start: First date (sent as YYYY-MM-DD)
            end: Last date (sent as YYYY-MM-DD)

        Returns:
            ApiResult with trading days and their open/close times
        """
        return await self._call(endpoints.GET_CALENDAR, values={"start": start, "end": end})

    async def get_clock(self) -> ApiResult:
        """Get the market clock (open/closed, next open and close)."""
        return await self._call(endpoints.GET_CLOCK)
