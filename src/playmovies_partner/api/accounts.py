"""Accounts resource: factory for every method under ``v1/accounts``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playmovies_partner.api.avails import AvailGetCall, AvailListCall
from playmovies_partner.api.orders import OrderGetCall, OrderListCall
from playmovies_partner.api.store_infos import StoreInfoCountryGetCall, StoreInfoListCall

if TYPE_CHECKING:
    from playmovies_partner.client import PlayMovies


class AccountsResource:
    """Play Movies Partner *accounts* resource.

    Not created directly; use ``PlayMovies.accounts()``. Each method returns
    a call builder with its path parameters already set. Nothing is sent
    until the builder's ``execute()`` is awaited.
    """

    def __init__(self, hub: PlayMovies) -> None:
        self.hub = hub

    def orders_list(self, account_id: str) -> OrderListCall:
        """List Orders owned or managed by the partner."""
        return OrderListCall(self.hub, accountId=account_id)

    def orders_get(self, account_id: str, order_id: str) -> OrderGetCall:
        """Get an Order given its ID."""
        return OrderGetCall(self.hub, accountId=account_id, orderId=order_id)

    def avails_list(self, account_id: str) -> AvailListCall:
        """List Avails owned or managed by the partner."""
        return AvailListCall(self.hub, accountId=account_id)

    def avails_get(self, account_id: str, avail_id: str) -> AvailGetCall:
        """Get an Avail given its ID."""
        return AvailGetCall(self.hub, accountId=account_id, availId=avail_id)

    def store_infos_country_get(
        self,
        account_id: str,
        video_id: str,
        country: str,
    ) -> StoreInfoCountryGetCall:
        """Get a StoreInfo given its video ID and country."""
        return StoreInfoCountryGetCall(
            self.hub,
            accountId=account_id,
            videoId=video_id,
            country=country,
        )

    def store_infos_list(self, account_id: str) -> StoreInfoListCall:
        """List StoreInfos owned or managed by the partner."""
        return StoreInfoListCall(self.hub, accountId=account_id)
