"""Authentication for the Alpaca API."""

from alpaca_client.auth.credentials import AlpacaAuth
from alpaca_client.auth.oauth import build_authorize_url, generate_state

__all__ = ["AlpacaAuth", "build_authorize_url", "generate_state"]
