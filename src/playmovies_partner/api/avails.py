"""Avails API methods."""

from playmovies_partner.api.base import CallBuilder, ListCallBuilder, MethodSpec, QueryParam
from playmovies_partner.models.avails import Avail, ListAvailsResponse


class AvailListCall(ListCallBuilder[ListAvailsResponse]):
    """List Avails owned or managed by the partner."""

    spec = MethodSpec(
        id="playmoviespartner.accounts.avails.list",
        path="v1/accounts/{accountId}/avails",
        path_params=("accountId",),
        query_params=(
            QueryParam("videoIds", repeated=True),
            QueryParam("title"),
            QueryParam("territories", repeated=True),
            QueryParam("studioNames", repeated=True),
            QueryParam("pphNames", repeated=True),
            QueryParam("pageToken"),
            QueryParam("pageSize"),
            QueryParam("altIds", repeated=True),
            QueryParam("altId"),
        ),
        response_model=ListAvailsResponse,
    )
    items_field = "avails"

    def account_id(self, value: str) -> "AvailListCall":
        self._set_path("accountId", value)
        return self

    def add_video_ids(self, value: str) -> "AvailListCall":
        self._add_query("videoIds", value)
        return self

    def title(self, value: str) -> "AvailListCall":
        """Match Avails whose title contains ``value`` (case-insensitive)."""
        self._set_query("title", value)
        return self

    def add_territories(self, value: str) -> "AvailListCall":
        """Filter by territory, ISO 3166-1 alpha-2 (e.g. ``"US"``)."""
        self._add_query("territories", value)
        return self

    def add_studio_names(self, value: str) -> "AvailListCall":
        self._add_query("studioNames", value)
        return self

    def add_pph_names(self, value: str) -> "AvailListCall":
        self._add_query("pphNames", value)
        return self

    def page_token(self, value: str) -> "AvailListCall":
        self._set_query("pageToken", value)
        return self

    def page_size(self, value: int) -> "AvailListCall":
        self._set_query("pageSize", value)
        return self

    def add_alt_ids(self, value: str) -> "AvailListCall":
        """Filter Avails that match any of the given partner-specific alt IDs."""
        self._add_query("altIds", value)
        return self

    def alt_id(self, value: str) -> "AvailListCall":
        self._set_query("altId", value)
        return self


class AvailGetCall(CallBuilder[Avail]):
    """Get an Avail given its ID."""

    spec = MethodSpec(
        id="playmoviespartner.accounts.avails.get",
        path="v1/accounts/{accountId}/avails/{availId}",
        path_params=("accountId", "availId"),
        query_params=(),
        response_model=Avail,
    )

    def account_id(self, value: str) -> "AvailGetCall":
        self._set_path("accountId", value)
        return self

    def avail_id(self, value: str) -> "AvailGetCall":
        self._set_path("availId", value)
        return self
