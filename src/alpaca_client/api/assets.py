"""Assets API endpoints."""

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.api.types import AssetClass, AssetStatus
from alpaca_client.models.result import ApiResult


class AssetsAPI(BaseAPI):
    """Alpaca Assets API."""

    async def list_assets(
        self,
        *,
        status: AssetStatus | None = None,
        asset_class: AssetClass | None = None,
        exchange: str | None = None,
    ) -> ApiResult:
        """List assets.

        Args:
            status: Asset status filter
            asset_class: Asset class filter
            exchange: Exchange filter (e.g. "NASDAQ")
        """
        values = {"status": status, "asset_class": asset_class, "exchange": exchange}
        return await self._call(endpoints.LIST_ASSETS, values=values)

    async def get_asset_by_id(self, asset_id: str) -> ApiResult:
        """Get an asset by its ID."""
        return await self._call(endpoints.GET_ASSET, {"symbol_or_id": asset_id})

    async def get_asset(self, symbol: str) -> ApiResult:
        """Get an asset by symbol."""
        return await self._call(endpoints.GET_ASSET, {"symbol_or_id": symbol})
