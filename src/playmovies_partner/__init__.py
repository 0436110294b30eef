"""Google Play Movies Partner API client library.

A typed, async Python client for the Play Movies Partner API (v1).

Example:
    from playmovies_partner import GoogleAuthTokenProvider, PlayMovies

    provider = GoogleAuthTokenProvider.from_service_account_file("sa.json")

    async with PlayMovies(provider) as hub:
        # Single resources
        _, order = await hub.accounts().orders_get("account", "order").execute()

        # Filtered list, one page
        _, page = await (
            hub.accounts()
            .avails_list("account")
            .add_territories("US")
            .add_territories("FR")
            .page_size(10)
            .execute()
        )

        # Every page
        async for info in hub.accounts().store_infos_list("account").iter_items():
            print(info.video_id, info.country)
"""

from playmovies_partner.api import AccountsResource
from playmovies_partner.auth import (
    GoogleAuthTokenProvider,
    NoTokenProvider,
    Scope,
    StaticTokenProvider,
    TokenProvider,
)
from playmovies_partner.client import PlayMovies
from playmovies_partner.config import PlayMoviesConfig
from playmovies_partner.delegate import DefaultDelegate, Delegate, MethodInfo
from playmovies_partner.exceptions import (
    BadRequestError,
    CallReusedError,
    FieldClashError,
    HttpError,
    JsonDecodeError,
    MissingTokenError,
    PlayMoviesAPIError,
    PlayMoviesError,
    RequestFailedError,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "AccountsResource",
    "PlayMovies",
    "PlayMoviesConfig",
    # Auth
    "GoogleAuthTokenProvider",
    "NoTokenProvider",
    "Scope",
    "StaticTokenProvider",
    "TokenProvider",
    # Delegate
    "DefaultDelegate",
    "Delegate",
    "MethodInfo",
    # Exceptions
    "BadRequestError",
    "CallReusedError",
    "FieldClashError",
    "HttpError",
    "JsonDecodeError",
    "MissingTokenError",
    "PlayMoviesAPIError",
    "PlayMoviesError",
    "RequestFailedError",
]
