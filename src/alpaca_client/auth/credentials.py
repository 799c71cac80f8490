"""Credential holder and request header selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alpaca_client.config import AlpacaConfig


class AlpacaAuth:
    """Holds the active credentials and produces auth headers.

    Two mutually exclusive modes exist: an OAuth bearer token, or an API key
    pair. A bearer token, when set, always takes precedence. The mode is
    decided each time ``headers()`` is called, so setters affect only
    requests issued afterwards.

    Configure credentials before sharing the client across concurrent tasks;
    no locking is done.
    """

    def __init__(
        self,
        key_id: str = "",
        secret_key: str = "",
        access_token: str | None = None,
    ) -> None:
        self._key_id = key_id
        self._secret_key = secret_key
        self._access_token = access_token

    @classmethod
    def from_config(cls, config: AlpacaConfig) -> AlpacaAuth:
        """Create an auth handler from configuration."""
        return cls(config.key_id, config.secret_key, config.access_token)

    @property
    def key_id(self) -> str:
        """Get the API key ID."""
        return self._key_id

    @property
    def access_token(self) -> str | None:
        """Get the OAuth access token, if any."""
        return self._access_token

    @property
    def uses_bearer_token(self) -> bool:
        """Check if requests authenticate with the bearer token."""
        return self._access_token is not None

    def set_key(self, key_id: str = "") -> None:
        """Set the API key ID."""
        self._key_id = key_id

    def set_secret(self, secret_key: str = "") -> None:
        """Set the API secret key."""
        self._secret_key = secret_key

    def set_access_token(self, token: str | None) -> None:
        """Set the OAuth access token. None reverts to key pair auth."""
        self._access_token = token

    def headers(self) -> dict[str, str]:
        """Build the header set for a request."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        if self._access_token is not None:
            headers["Authorization"] = f"Bearer {self._access_token}"
        else:
            headers["APCA-API-KEY-ID"] = self._key_id
            headers["APCA-API-SECRET-KEY"] = self._secret_key

        return headers
