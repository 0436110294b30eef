"""Orders API methods."""

from playmovies_partner.api.base import CallBuilder, ListCallBuilder, MethodSpec, QueryParam
from playmovies_partner.models.orders import ListOrdersResponse, Order


class OrderListCall(ListCallBuilder[ListOrdersResponse]):
    """List Orders owned or managed by the partner.

    Example:
        _, page = await (
            hub.accounts()
            .orders_list("account")
            .add_status("STATUS_APPROVED")
            .page_size(50)
            .execute()
        )
    """

    spec = MethodSpec(
        id="playmoviespartner.accounts.orders.list",
        path="v1/accounts/{accountId}/orders",
        path_params=("accountId",),
        query_params=(
            QueryParam("videoIds", repeated=True),
            QueryParam("studioNames", repeated=True),
            QueryParam("status", repeated=True),
            QueryParam("pphNames", repeated=True),
            QueryParam("pageToken"),
            QueryParam("pageSize"),
            QueryParam("name"),
            QueryParam("customId"),
        ),
        response_model=ListOrdersResponse,
    )
    items_field = "orders"

    def account_id(self, value: str) -> "OrderListCall":
        self._set_path("accountId", value)
        return self

    def add_video_ids(self, value: str) -> "OrderListCall":
        """Filter Orders that match any of the given video IDs."""
        self._add_query("videoIds", value)
        return self

    def add_studio_names(self, value: str) -> "OrderListCall":
        self._add_query("studioNames", value)
        return self

    def add_status(self, value: str) -> "OrderListCall":
        """Filter Orders that match one of the given statuses."""
        self._add_query("status", value)
        return self

    def add_pph_names(self, value: str) -> "OrderListCall":
        self._add_query("pphNames", value)
        return self

    def page_token(self, value: str) -> "OrderListCall":
        self._set_query("pageToken", value)
        return self

    def page_size(self, value: int) -> "OrderListCall":
        self._set_query("pageSize", value)
        return self

    def name(self, value: str) -> "OrderListCall":
        """Match Orders whose name, show, season or episode contains ``value``."""
        self._set_query("name", value)
        return self

    def custom_id(self, value: str) -> "OrderListCall":
        """Match Orders by case-insensitive, partner-specific custom ID."""
        self._set_query("customId", value)
        return self


class OrderGetCall(CallBuilder[Order]):
    """Get an Order given its ID."""

    spec = MethodSpec(
        id="playmoviespartner.accounts.orders.get",
        path="v1/accounts/{accountId}/orders/{orderId}",
        path_params=("accountId", "orderId"),
        query_params=(),
        response_model=Order,
    )

    def account_id(self, value: str) -> "OrderGetCall":
        self._set_path("accountId", value)
        return self

    def order_id(self, value: str) -> "OrderGetCall":
        self._set_path("orderId", value)
        return self
