"""Shared fixtures for unit tests.

Requests never leave the process: API modules are wired to an
httpx.AsyncClient backed by httpx.MockTransport, and every request the
client sends is recorded for inspection.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest

from alpaca_client import AlpacaClient, AlpacaConfig

Handler = Callable[[httpx.Request], httpx.Response]


class TransportRecorder:
    """Records requests and answers them with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        """The most recent request."""
        return self.requests[-1]

    def respond(
        self,
        status_code: int = 200,
        *,
        json: object = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Answer all following requests with a fixed response."""

        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text, headers=headers)
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, headers=headers)

        self.handler = handler


@pytest.fixture
def config() -> AlpacaConfig:
    """Create a test configuration."""
    return AlpacaConfig(
        key_id="test_key",
        secret_key="test_secret",
        paper=True,
    )


@pytest.fixture
def recorder() -> TransportRecorder:
    """Create a request recorder."""
    return TransportRecorder()


@pytest.fixture
async def client(
    config: AlpacaConfig, recorder: TransportRecorder
) -> AsyncIterator[AlpacaClient]:
    """Create a client whose requests are answered by the recorder."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    try:
        yield AlpacaClient(config, http_client=http_client)
    finally:
        await http_client.aclose()
