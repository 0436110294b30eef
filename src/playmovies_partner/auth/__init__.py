"""Authentication: OAuth2 scopes and bearer token providers."""

from playmovies_partner.auth.scopes import Scope
from playmovies_partner.auth.tokens import (
    GoogleAuthTokenProvider,
    NoTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)

__all__ = [
    "GoogleAuthTokenProvider",
    "NoTokenProvider",
    "Scope",
    "StaticTokenProvider",
    "TokenProvider",
]
