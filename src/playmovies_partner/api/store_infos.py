"""StoreInfos API methods."""

from playmovies_partner.api.base import CallBuilder, ListCallBuilder, MethodSpec, QueryParam
from playmovies_partner.models.store_infos import ListStoreInfosResponse, StoreInfo


class StoreInfoListCall(ListCallBuilder[ListStoreInfosResponse]):
    """List StoreInfos owned or managed by the partner."""

    spec = MethodSpec(
        id="playmoviespartner.accounts.storeInfos.list",
        path="v1/accounts/{accountId}/storeInfos",
        path_params=("accountId",),
        query_params=(
            QueryParam("videoIds", repeated=True),
            QueryParam("videoId"),
            QueryParam("studioNames", repeated=True),
            QueryParam("seasonIds", repeated=True),
            QueryParam("pphNames", repeated=True),
            QueryParam("pageToken"),
            QueryParam("pageSize"),
            QueryParam("name"),
            QueryParam("mids", repeated=True),
            QueryParam("countries", repeated=True),
        ),
        response_model=ListStoreInfosResponse,
    )
    items_field = "store_infos"

    def account_id(self, value: str) -> "StoreInfoListCall":
        self._set_path("accountId", value)
        return self

    def add_video_ids(self, value: str) -> "StoreInfoListCall":
        self._add_query("videoIds", value)
        return self

    def video_id(self, value: str) -> "StoreInfoListCall":
        self._set_query("videoId", value)
        return self

    def add_studio_names(self, value: str) -> "StoreInfoListCall":
        self._add_query("studioNames", value)
        return self

    def add_season_ids(self, value: str) -> "StoreInfoListCall":
        self._add_query("seasonIds", value)
        return self

    def add_pph_names(self, value: str) -> "StoreInfoListCall":
        self._add_query("pphNames", value)
        return self

    def page_token(self, value: str) -> "StoreInfoListCall":
        self._set_query("pageToken", value)
        return self

    def page_size(self, value: int) -> "StoreInfoListCall":
        self._set_query("pageSize", value)
        return self

    def name(self, value: str) -> "StoreInfoListCall":
        """Match StoreInfos whose name, show, season or episode contains ``value``."""
        self._set_query("name", value)
        return self

    def add_mids(self, value: str) -> "StoreInfoListCall":
        """Filter by Knowledge Graph ID (e.g. ``"/m/0ffx29"``)."""
        self._add_query("mids", value)
        return self

    def add_countries(self, value: str) -> "StoreInfoListCall":
        self._add_query("countries", value)
        return self


class StoreInfoCountryGetCall(CallBuilder[StoreInfo]):
    """Get a StoreInfo given its video ID and country."""

    spec = MethodSpec(
        id="playmoviespartner.accounts.storeInfos.country.get",
        path="v1/accounts/{accountId}/storeInfos/{videoId}/country/{country}",
        path_params=("accountId", "videoId", "country"),
        query_params=(),
        response_model=StoreInfo,
    )

    def account_id(self, value: str) -> "StoreInfoCountryGetCall":
        self._set_path("accountId", value)
        return self

    def video_id(self, value: str) -> "StoreInfoCountryGetCall":
        self._set_path("videoId", value)
        return self

    def country(self, value: str) -> "StoreInfoCountryGetCall":
        self._set_path("country", value)
        return self
