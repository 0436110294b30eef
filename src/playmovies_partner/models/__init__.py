"""Pydantic models for Play Movies Partner API responses."""

from playmovies_partner.models.avails import Avail, ListAvailsResponse
from playmovies_partner.models.errors import ErrorResponse, ErrorStatus
from playmovies_partner.models.orders import ListOrdersResponse, Order
from playmovies_partner.models.store_infos import ListStoreInfosResponse, StoreInfo

__all__ = [
    # Avails
    "Avail",
    "ListAvailsResponse",
    # Errors
    "ErrorResponse",
    "ErrorStatus",
    # Orders
    "ListOrdersResponse",
    "Order",
    # Store infos
    "ListStoreInfosResponse",
    "StoreInfo",
]
