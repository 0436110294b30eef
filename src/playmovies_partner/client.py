"""Main Play Movies Partner client (hub)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from playmovies_partner.api.accounts import AccountsResource
from playmovies_partner.config import PlayMoviesConfig

if TYPE_CHECKING:
    from types import TracebackType

    from playmovies_partner.auth.tokens import TokenProvider


class PlayMovies:
    """Central access point to the Play Movies Partner API.

    Holds the HTTP transport, the token provider and the request settings
    (user agent, base URL, root URL) shared by every call builder.

    Usage (context manager - recommended for connection pooling):
        async with PlayMovies(provider) as hub:
            _, order = await hub.accounts().orders_get("account", "order").execute()

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        hub = PlayMovies(provider, http_client=http_client)
        # Hub uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        hub = PlayMovies(provider)
        _, page = await hub.accounts().avails_list("account").execute()

    The settings are plain attributes without locking; change them before
    sharing the hub between concurrent tasks.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        *,
        http_client: httpx.AsyncClient | None = None,
        config: PlayMoviesConfig | None = None,
    ) -> None:
        """Initialize the hub.

        Args:
            token_provider: Produces bearer tokens for a set of scopes
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the hub will use this pool and NOT close it.
                        If not provided, use open()/close() or context manager to
                        enable pooling, or each request creates its own connection.
            config: Initial user agent, URLs and timeout (defaults if omitted)
        """
        self.config = config or PlayMoviesConfig()
        self.token_provider = token_provider

        self._user_agent = self.config.user_agent
        self._base_url = self.config.base_url
        self._root_url = self.config.root_url

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

    @property
    def http_client(self) -> httpx.AsyncClient | None:
        """Shared HTTP client, or None when requests use a per-call client."""
        return self._http_client

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def root_url(self) -> str:
        return self._root_url

    def set_user_agent(self, user_agent: str) -> str:
        """Set the User-Agent header sent with every request.

        Returns:
            The previous user agent
        """
        previous, self._user_agent = self._user_agent, user_agent
        return previous

    def set_base_url(self, base_url: str) -> str:
        """Set the URL that method paths are appended to.

        Returns:
            The previous base URL
        """
        previous, self._base_url = self._base_url, base_url
        return previous

    def set_root_url(self, root_url: str) -> str:
        """Set the service root URL.

        Returns:
            The previous root URL
        """
        previous, self._root_url = self._root_url, root_url
        return previous

    def accounts(self) -> AccountsResource:
        """Method builders for the *accounts* resource."""
        return AccountsResource(self)

    async def open(self) -> None:
        """Open connection pool for HTTP requests.

        Creates a shared httpx.AsyncClient for connection pooling.
        Only needed if not using context manager or external http_client.
        """
        if self._http_client is None and self._owns_http_client:
            self._http_client = httpx.AsyncClient(timeout=self.config.timeout)

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this hub owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> PlayMovies:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()
