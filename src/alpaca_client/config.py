"""Configuration management for the Alpaca client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import StrEnum


class Environment(StrEnum):
    """Trading environment, selects the default trading host."""

    PAPER = "paper"
    LIVE = "live"


def _env_flag(value: str | None, default: bool) -> bool:
    """Interpret a boolean-ish environment variable."""
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class AlpacaConfig:
    """Alpaca API configuration.

    Either a key pair or an OAuth access token is expected. When both are
    given the access token wins at request time.
    """

    key_id: str = ""
    secret_key: str = ""
    access_token: str | None = None
    paper: bool = True
    timeout: float = 30.0

    # API hosts
    paper_url: str = field(default="https://paper-api.alpaca.markets", repr=False)
    live_url: str = field(default="https://api.alpaca.markets", repr=False)
    data_url: str = field(default="https://data.alpaca.markets", repr=False)
    oauth_url: str = field(default="https://api.alpaca.markets", repr=False)
    authorize_url: str = field(
        default="https://app.alpaca.markets/oauth/authorize", repr=False
    )

    @property
    def environment(self) -> Environment:
        """Get the active trading environment."""
        return Environment.PAPER if self.paper else Environment.LIVE

    @property
    def trading_url(self) -> str:
        """Get the trading host for the active environment."""
        return self.paper_url if self.paper else self.live_url

    @classmethod
    def from_env(cls, *, paper: bool | None = None) -> AlpacaConfig:
        """Create config from environment variables.

        Expected env vars:
        - APCA_API_KEY_ID and APCA_API_SECRET_KEY, or
        - APCA_OAUTH_TOKEN
        - APCA_PAPER (optional, defaults to true; overridden by ``paper``)
        """
        key_id = os.environ.get("APCA_API_KEY_ID", "")
        secret_key = os.environ.get("APCA_API_SECRET_KEY", "")
        access_token = os.environ.get("APCA_OAUTH_TOKEN") or None

        if not access_token and not (key_id and secret_key):
            msg = (
                "Missing required environment variables: "
                "APCA_API_KEY_ID and APCA_API_SECRET_KEY, or APCA_OAUTH_TOKEN"
            )
            raise ValueError(msg)

        if paper is None:
            paper = _env_flag(os.environ.get("APCA_PAPER"), default=True)

        return cls(
            key_id=key_id,
            secret_key=secret_key,
            access_token=access_token,
            paper=paper,
        )
