"""Avail models (EMA Avails format, version 1.6b)."""

from pydantic import BaseModel, Field

OPEN_ENDED = "Open"


class Avail(BaseModel):
    """Availability window of an Edit in one territory.

    Describes the period Google is allowed to sell or rent the Edit. Field
    names follow the EMA Avails spec. Dates are kept as the strings the API
    returns; ``end`` may be the literal ``"Open"``.
    """

    avail_id: str | None = Field(default=None, alias="availId")
    alt_id: str | None = Field(default=None, alias="altId")
    display_name: str | None = Field(default=None, alias="displayName")
    store_language: str | None = Field(default=None, alias="storeLanguage")
    territory: str | None = Field(default=None)  # ISO 3166-1 alpha-2

    # Terms
    format_profile: str | None = Field(default=None, alias="formatProfile")  # SD, HD, UHD
    license_type: str | None = Field(default=None, alias="licenseType")  # EST, VOD, SVOD, POEST
    price_type: str | None = Field(default=None, alias="priceType")
    price_value: str | None = Field(default=None, alias="priceValue")
    start: str | None = Field(default=None)
    end: str | None = Field(default=None)
    release_date: str | None = Field(default=None, alias="releaseDate")
    suppression_lift_date: str | None = Field(default=None, alias="suppressionLiftDate")

    # Asset
    work_type: str | None = Field(default=None, alias="workType")
    title_internal_alias: str | None = Field(default=None, alias="titleInternalAlias")
    series_title_internal_alias: str | None = Field(
        default=None, alias="seriesTitleInternalAlias"
    )
    series_alt_id: str | None = Field(default=None, alias="seriesAltId")
    season_title_internal_alias: str | None = Field(
        default=None, alias="seasonTitleInternalAlias"
    )
    season_alt_id: str | None = Field(default=None, alias="seasonAltId")
    season_number: str | None = Field(default=None, alias="seasonNumber")
    episode_title_internal_alias: str | None = Field(
        default=None, alias="episodeTitleInternalAlias"
    )
    episode_alt_id: str | None = Field(default=None, alias="episodeAltId")
    episode_number: str | None = Field(default=None, alias="episodeNumber")

    # Rating
    rating_system: str | None = Field(default=None, alias="ratingSystem")
    rating_value: str | None = Field(default=None, alias="ratingValue")
    rating_reason: str | None = Field(default=None, alias="ratingReason")

    # Captions
    caption_included: bool | None = Field(default=None, alias="captionIncluded")
    caption_exemption: str | None = Field(default=None, alias="captionExemption")

    # Identifiers
    content_id: str | None = Field(default=None, alias="contentId")  # EIDR edit ID
    product_id: str | None = Field(default=None, alias="productId")
    encode_id: str | None = Field(default=None, alias="encodeId")
    video_id: str | None = Field(default=None, alias="videoId")
    pph_names: list[str] | None = Field(default=None, alias="pphNames")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_open_ended(self) -> bool:
        """True if the window has no end date."""
        return self.end == OPEN_ENDED


class ListAvailsResponse(BaseModel):
    """Response from the list avails endpoint."""

    avails: list[Avail] | None = Field(default=None)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    total_size: int | None = Field(default=None, alias="totalSize")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def has_more(self) -> bool:
        return bool(self.next_page_token)
