"""OAuth authorization URL construction.

Building the authorize URL is pure string work: no request is made. The
user is sent to the returned URL and comes back to ``redirect_uri`` with a
``code`` to exchange via ``OAuthAPI.get_access_token``.
"""

import secrets
from urllib.parse import quote_plus

DEFAULT_AUTHORIZE_URL = "https://app.alpaca.markets/oauth/authorize"


def generate_state() -> str:
    """Generate a random 16 hex character OAuth state value."""
    return secrets.token_hex(8)


def build_authorize_url(
    client_id: str,
    redirect_uri: str,
    scope: str = "",
    state: str | None = None,
    *,
    base_url: str = DEFAULT_AUTHORIZE_URL,
) -> str:
    """Build the OAuth authorization redirect URL.

    Args:
        client_id: OAuth application client ID
        redirect_uri: Where the user is sent after authorizing
        scope: Space separated scopes (e.g. "account:write trading")
        state: Opaque anti-CSRF value, generated when not given
        base_url: Authorization page URL

    Returns:
        The authorization URL
    """
    if state is None:
        state = generate_state()

    return (
        f"{base_url}?response_type=code"
        f"&client_id={quote_plus(client_id)}"
        f"&redirect_uri={quote_plus(redirect_uri)}"
        f"&state={quote_plus(state)}"
        f"&scope={quote_plus(scope)}"
    )
