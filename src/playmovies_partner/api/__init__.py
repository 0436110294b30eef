"""Play Movies Partner API resources and call builders."""

from playmovies_partner.api.accounts import AccountsResource
from playmovies_partner.api.avails import AvailGetCall, AvailListCall
from playmovies_partner.api.base import CallBuilder, ListCallBuilder, MethodSpec, QueryParam
from playmovies_partner.api.orders import OrderGetCall, OrderListCall
from playmovies_partner.api.store_infos import StoreInfoCountryGetCall, StoreInfoListCall

__all__ = [
    "AccountsResource",
    "AvailGetCall",
    "AvailListCall",
    "CallBuilder",
    "ListCallBuilder",
    "MethodSpec",
    "OrderGetCall",
    "OrderListCall",
    "QueryParam",
    "StoreInfoCountryGetCall",
    "StoreInfoListCall",
]
