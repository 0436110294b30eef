"""StoreInfo models."""

from datetime import datetime

from pydantic import BaseModel, Field


class StoreInfo(BaseModel):
    """A playable video of an Edit as available on the Play Store in one country.

    Unique per ``(video_id, country)``. Title-level or Edit-level EIDR, when
    present, identify the same title or edit across partners.
    """

    video_id: str | None = Field(default=None, alias="videoId")
    country: str | None = Field(default=None)
    live_time: datetime | None = Field(default=None, alias="liveTime")
    type: str | None = Field(default=None)
    name: str | None = Field(default=None)

    # Cross references
    title_level_eidr: str | None = Field(default=None, alias="titleLevelEidr")
    edit_level_eidr: str | None = Field(default=None, alias="editLevelEidr")
    mid: str | None = Field(default=None)  # Knowledge Graph ID

    # TV hierarchy
    show_id: str | None = Field(default=None, alias="showId")
    show_name: str | None = Field(default=None, alias="showName")
    season_id: str | None = Field(default=None, alias="seasonId")
    season_name: str | None = Field(default=None, alias="seasonName")
    season_number: str | None = Field(default=None, alias="seasonNumber")
    episode_number: str | None = Field(default=None, alias="episodeNumber")

    studio_name: str | None = Field(default=None, alias="studioName")
    pph_names: list[str] | None = Field(default=None, alias="pphNames")

    # Media
    subtitles: list[str] | None = Field(default=None)
    audio_tracks: list[str] | None = Field(default=None, alias="audioTracks")
    trailer_id: str | None = Field(default=None, alias="trailerId")

    # Offers
    has_hd_offer: bool | None = Field(default=None, alias="hasHdOffer")
    has_sd_offer: bool | None = Field(default=None, alias="hasSdOffer")
    has_est_offer: bool | None = Field(default=None, alias="hasEstOffer")
    has_vod_offer: bool | None = Field(default=None, alias="hasVodOffer")
    has_audio51: bool | None = Field(default=None, alias="hasAudio51")
    has_info_cards: bool | None = Field(default=None, alias="hasInfoCards")

    model_config = {"populate_by_name": True, "frozen": True}


class ListStoreInfosResponse(BaseModel):
    """Response from the list store infos endpoint."""

    store_infos: list[StoreInfo] | None = Field(default=None, alias="storeInfos")
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    total_size: int | None = Field(default=None, alias="totalSize")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def has_more(self) -> bool:
        return bool(self.next_page_token)
