"""OAuth API endpoints."""

from alpaca_client.api import endpoints
from alpaca_client.api.base import BaseAPI
from alpaca_client.auth.oauth import build_authorize_url
from alpaca_client.models.result import ApiResult


class OAuthAPI(BaseAPI):
    """Alpaca OAuth flow for third-party applications.

    1. Send the user to ``get_authorize_url(...)``
    2. Exchange the returned code with ``get_access_token(...)``
    3. Use the token via ``AlpacaClient.set_access_token(...)``
    """

    def get_authorize_url(
        self,
        client_id: str,
        redirect_uri: str,
        scope: str = "",
        state: str | None = None,
    ) -> str:
        """Build the authorization URL. No request is made.

        A random 16 hex character state is generated when none is given.
        """
        return build_authorize_url(
            client_id,
            redirect_uri,
            scope,
            state,
            base_url=self.config.authorize_url,
        )

    async def get_access_token(
        self,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> ApiResult:
        """Exchange an authorization code for an access token.

        Returns:
            ApiResult whose payload holds access_token, token_type and scope
        """
        values = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
        }
        return await self._call(endpoints.GET_OAUTH_TOKEN, values=values)

    async def get_access_token_details(self) -> ApiResult:
        """Get details about the bearer token in use."""
        return await self._call(endpoints.GET_OAUTH_TOKEN_DETAILS)
