"""Alpaca API client library.

A typed, async Python client for Alpaca's trading, market data and OAuth
APIs. Every completed request yields an ``ApiResult``; inspect its
``status_code`` to tell success from an API-level failure.

Example:
    from alpaca_client import AlpacaClient, AlpacaConfig

    # Create client from environment variables
    client = AlpacaClient.from_env(paper=True)

    # Or with explicit config
    config = AlpacaConfig(key_id="your_key", secret_key="your_secret", paper=True)

    async with AlpacaClient(config) as client:
        account = await client.account.get_account()
        if account.ok:
            print(account.payload["buying_power"])

        result = await client.orders.create_order("AAPL", 10, "buy", "market", "day")
        if result.status_code == 422:
            print(result.payload["message"])

    # OAuth applications
    url = client.oauth.get_authorize_url("client_id", "https://app/cb", "trading")
"""

from alpaca_client.builders import OrderBuilder
from alpaca_client.client import AlpacaClient
from alpaca_client.config import AlpacaConfig, Environment
from alpaca_client.exceptions import (
    AlpacaAPIError,
    AlpacaDecodeError,
    AlpacaError,
    AlpacaTransportError,
    AlpacaValidationError,
)
from alpaca_client.models.result import ApiResult

__version__ = "0.1.0"

__all__ = [
    # Builders
    "OrderBuilder",
    # Main client
    "AlpacaClient",
    "AlpacaConfig",
    "ApiResult",
    "Environment",
    # Exceptions
    "AlpacaAPIError",
    "AlpacaDecodeError",
    "AlpacaError",
    "AlpacaTransportError",
    "AlpacaValidationError",
]
