"""OAuth2 scopes accepted by the Play Movies Partner API."""

from __future__ import annotations

from enum import StrEnum


class Scope(StrEnum):
    """OAuth2 authorization scopes."""

    # View the digital assets you publish on Google Play Movies and TV
    PLAYMOVIES_PARTNER_READONLY = "https://www.googleapis.com/auth/playmovies_partner.readonly"

    @classmethod
    def default(cls) -> Scope:
        """Scope used when a call specifies none."""
        return cls.PLAYMOVIES_PARTNER_READONLY
