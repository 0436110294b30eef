"""Bearer token providers.

A token provider turns a set of OAuth2 scopes into a bearer token. The
call builders only depend on the ``TokenProvider`` protocol, so any object
with a matching ``get_token`` coroutine can be passed to the hub.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol

import google.auth
from google.auth import credentials as ga_credentials
from google.auth.transport.requests import Request
from google.oauth2 import service_account

logger = logging.getLogger(__name__)


class TokenProvider(Protocol):
    """Anything that can produce a bearer token for a set of scopes."""

    async def get_token(self, scopes: Sequence[str]) -> str | None:
        """Return a bearer token, or None to send the request without one.

        Raise to signal failure; the call builder consults its delegate.
        """
        ...


class StaticTokenProvider:
    """Returns the same pre-minted token for every scope set."""

    def __init__(self, token: str) -> None:
        self._token = token

    async def get_token(self, scopes: Sequence[str]) -> str | None:
        return self._token


class NoTokenProvider:
    """Never returns a token (API key only, via the ``key`` parameter)."""

    async def get_token(self, scopes: Sequence[str]) -> str | None:
        return None


class GoogleAuthTokenProvider:
    """Token provider backed by ``google.auth`` credentials.

    Credentials are scoped once per distinct scope set and refreshed in a
    worker thread whenever they are no longer valid. An empty scope set
    yields no token.

    Usage:
        provider = GoogleAuthTokenProvider.from_service_account_file("sa.json")
        hub = PlayMovies(provider)
    """

    def __init__(
        self,
        credentials: ga_credentials.Credentials,
        *,
        request_factory: Callable[[], Any] = Request,
    ) -> None:
        self.credentials = credentials
        self._request_factory = request_factory
        self._scoped: dict[frozenset[str], ga_credentials.Credentials] = {}
        self._refresh_lock = asyncio.Lock()

    @classmethod
    def from_service_account_file(cls, path: str | Path) -> GoogleAuthTokenProvider:
        """Create a provider from a service account JSON key file."""
        credentials = service_account.Credentials.from_service_account_file(str(path))
        return cls(credentials)

    @classmethod
    def from_default(cls) -> GoogleAuthTokenProvider:
        """Create a provider from Application Default Credentials."""
        credentials, _ = google.auth.default()
        return cls(credentials)

    def _scoped_credentials(self, scopes: Sequence[str]) -> ga_credentials.Credentials:
        key = frozenset(scopes)
        scoped = self._scoped.get(key)
        if scoped is None:
            scoped = ga_credentials.with_scopes_if_required(self.credentials, sorted(key))
            self._scoped[key] = scoped
        return scoped

    async def get_token(self, scopes: Sequence[str]) -> str | None:
        if not scopes:
            return None

        credentials = self._scoped_credentials(scopes)
        if not credentials.valid:
            async with self._refresh_lock:
                # Another task may have refreshed while we waited
                if not credentials.valid:
                    logger.debug("Refreshing credentials for scopes: %s", sorted(scopes))
                    await asyncio.to_thread(credentials.refresh, self._request_factory())

        token: str | None = credentials.token
        return token
