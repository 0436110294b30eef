"""Tests for token providers."""

import asyncio
from unittest.mock import MagicMock, patch

from google.auth import credentials as ga_credentials

from playmovies_partner.auth import (
    GoogleAuthTokenProvider,
    NoTokenProvider,
    Scope,
    StaticTokenProvider,
)

SCOPES = [Scope.PLAYMOVIES_PARTNER_READONLY.value]


def make_credentials(*, valid: bool, token: str = "fresh-token") -> MagicMock:
    """Unscoped credentials mock whose refresh() makes it valid."""
    credentials = MagicMock()
    credentials.valid = valid
    credentials.token = token if valid else None

    def refresh(request) -> None:
        credentials.valid = True
        credentials.token = token

    credentials.refresh.side_effect = refresh
    return credentials


class TestSimpleProviders:
    """Tests for StaticTokenProvider and NoTokenProvider."""

    async def test_static_token(self) -> None:
        """Should return the same token for any scopes."""
        provider = StaticTokenProvider("abc")

        assert await provider.get_token(SCOPES) == "abc"
        assert await provider.get_token([]) == "abc"

    async def test_no_token(self) -> None:
        """Should never return a token."""
        assert await NoTokenProvider().get_token(SCOPES) is None


class TestGoogleAuthTokenProvider:
    """Tests for GoogleAuthTokenProvider."""

    async def test_refreshes_invalid_credentials(self) -> None:
        """Should refresh expired credentials before returning a token."""
        credentials = make_credentials(valid=False)
        provider = GoogleAuthTokenProvider(credentials, request_factory=lambda: "request")

        token = await provider.get_token(SCOPES)

        assert token == "fresh-token"
        credentials.refresh.assert_called_once_with("request")

    async def test_valid_credentials_not_refreshed(self) -> None:
        """Should reuse a still-valid token."""
        credentials = make_credentials(valid=True, token="cached")
        provider = GoogleAuthTokenProvider(credentials, request_factory=lambda: "request")

        assert await provider.get_token(SCOPES) == "cached"
        credentials.refresh.assert_not_called()

    async def test_concurrent_callers_refresh_once(self) -> None:
        """Concurrent requests share a single refresh."""
        credentials = make_credentials(valid=False)
        provider = GoogleAuthTokenProvider(credentials, request_factory=lambda: "request")

        tokens = await asyncio.gather(*(provider.get_token(SCOPES) for _ in range(5)))

        assert tokens == ["fresh-token"] * 5
        assert credentials.refresh.call_count == 1

    async def test_empty_scopes_yield_no_token(self) -> None:
        """No scopes means no token and no refresh."""
        credentials = make_credentials(valid=False)
        provider = GoogleAuthTokenProvider(credentials)

        assert await provider.get_token([]) is None
        credentials.refresh.assert_not_called()

    async def test_scoped_credentials_cached_per_scope_set(self) -> None:
        """Credentials are scoped once per distinct set of scopes."""
        scoped = MagicMock()
        scoped.valid = True
        scoped.token = "scoped-token"
        base = MagicMock(spec=ga_credentials.Scoped)
        base.requires_scopes = True
        base.with_scopes.return_value = scoped
        provider = GoogleAuthTokenProvider(base)

        assert await provider.get_token(["b", "a"]) == "scoped-token"
        assert await provider.get_token(["a", "b"]) == "scoped-token"

        assert base.with_scopes.call_count == 1
        assert base.with_scopes.call_args.args[0] == ["a", "b"]

    def test_from_service_account_file(self) -> None:
        """Should load service account credentials from a key file."""
        credentials = MagicMock()
        target = (
            "playmovies_partner.auth.tokens.service_account.Credentials.from_service_account_file"
        )

        with patch(target, return_value=credentials) as loader:
            provider = GoogleAuthTokenProvider.from_service_account_file("sa.json")

        loader.assert_called_once_with("sa.json")
        assert provider.credentials is credentials

    def test_from_default(self) -> None:
        """Should use application default credentials."""
        credentials = MagicMock()

        with patch(
            "playmovies_partner.auth.tokens.google.auth.default",
            return_value=(credentials, "project"),
        ):
            provider = GoogleAuthTokenProvider.from_default()

        assert provider.credentials is credentials
