"""Shared fixtures."""

from collections.abc import AsyncIterator, Callable

import httpx
import pytest

from playmovies_partner import PlayMovies, StaticTokenProvider
from playmovies_partner.auth import TokenProvider

Handler = Callable[[httpx.Request], httpx.Response]
HubFactory = Callable[..., PlayMovies]


@pytest.fixture
async def make_hub() -> AsyncIterator[HubFactory]:
    """Factory for hubs whose HTTP client answers with a handler.

    Every client created through the factory is closed after the test.
    """
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Handler, token_provider: TokenProvider | None = None) -> PlayMovies:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return PlayMovies(
            token_provider or StaticTokenProvider("test-token"),
            http_client=http_client,
        )

    yield factory

    for client in clients:
        await client.aclose()
