"""Order-related models."""

from datetime import datetime

from pydantic import BaseModel, Field


class Order(BaseModel):
    """Fulfillment status of an Edit delivered with legacy order-based delivery.

    ``order_id`` is generated by Google and unique per account. Partners may
    also identify an order by its ``custom_id`` when they provided one.
    """

    order_id: str | None = Field(default=None, alias="orderId")
    custom_id: str | None = Field(default=None, alias="customId")
    video_id: str | None = Field(default=None, alias="videoId")
    countries: list[str] | None = Field(default=None)  # ISO 3166-1 alpha-2
    type: str | None = Field(default=None)  # MOVIE, SEASON, EPISODE, BUNDLE

    # Titles
    name: str | None = Field(default=None)
    episode_name: str | None = Field(default=None, alias="episodeName")
    season_name: str | None = Field(default=None, alias="seasonName")
    show_name: str | None = Field(default=None, alias="showName")

    # Status
    status: str | None = Field(default=None)
    status_detail: str | None = Field(default=None, alias="statusDetail")
    rejection_note: str | None = Field(default=None, alias="rejectionNote")

    # Timeline: ordered <= approved <= received, enforced server-side only
    ordered_time: datetime | None = Field(default=None, alias="orderedTime")
    approved_time: datetime | None = Field(default=None, alias="approvedTime")
    received_time: datetime | None = Field(default=None, alias="receivedTime")
    earliest_avail_start_time: datetime | None = Field(
        default=None, alias="earliestAvailStartTime"
    )

    # Priority (higher is more urgent)
    priority: float | None = Field(default=None)
    legacy_priority: str | None = Field(default=None, alias="legacyPriority")
    normalized_priority: str | None = Field(default=None, alias="normalizedPriority")

    # Ownership
    channel_id: str | None = Field(default=None, alias="channelId")
    channel_name: str | None = Field(default=None, alias="channelName")
    studio_name: str | None = Field(default=None, alias="studioName")
    pph_name: str | None = Field(default=None, alias="pphName")

    model_config = {"populate_by_name": True, "frozen": True}


class ListOrdersResponse(BaseModel):
    """Response from the list orders endpoint."""

    orders: list[Order] | None = Field(default=None)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    total_size: int | None = Field(default=None, alias="totalSize")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def has_more(self) -> bool:
        """Whether another page can be requested with ``next_page_token``."""
        return bool(self.next_page_token)
