"""Tests for avail model parsing."""

from playmovies_partner.models.avails import OPEN_ENDED, Avail, ListAvailsResponse


def _avail_data(**overrides) -> dict:
    """Helper to create avail test data in EMA field names."""
    base = {
        "availId": "AV1",
        "altId": "ALT-1",
        "displayName": "Googlers",
        "storeLanguage": "en",
        "territory": "US",
        "formatProfile": "HD",
        "licenseType": "EST",
        "priceType": "Tier",
        "priceValue": "1",
        "start": "2016-01-01",
        "end": "2017-01-01",
        "workType": "Episode",
        "seriesTitleInternalAlias": "Googlers Show",
        "seasonNumber": "1",
        "episodeNumber": "3",
        "ratingSystem": "MPAA",
        "ratingValue": "PG-13",
        "captionIncluded": True,
        "contentId": "10.5240/7791-8534-2C23-9030-8610-5",
        "videoId": "VID9",
        "pphNames": ["Post House"],
    }
    base.update(overrides)
    return base


class TestAvail:
    """Tests for Avail model."""

    def test_parse_ema_fields(self) -> None:
        """Should map EMA camelCase names to attributes."""
        avail = Avail.model_validate(_avail_data())

        assert avail.avail_id == "AV1"
        assert avail.format_profile == "HD"
        assert avail.license_type == "EST"
        assert avail.series_title_internal_alias == "Googlers Show"
        assert avail.episode_number == "3"
        assert avail.caption_included is True
        assert avail.content_id == "10.5240/7791-8534-2C23-9030-8610-5"
        assert avail.pph_names == ["Post House"]

    def test_dates_stay_strings(self) -> None:
        """Start and end dates are kept verbatim."""
        avail = Avail.model_validate(_avail_data())

        assert avail.start == "2016-01-01"
        assert avail.end == "2017-01-01"
        assert avail.is_open_ended is False

    def test_open_ended_window(self) -> None:
        """The literal Open end date marks an open-ended window."""
        avail = Avail.model_validate(_avail_data(end=OPEN_ENDED))

        assert avail.end == "Open"
        assert avail.is_open_ended is True

    def test_missing_end_is_not_open_ended(self) -> None:
        """An absent end date is unknown, not open."""
        assert Avail.model_validate({}).is_open_ended is False


class TestListAvailsResponse:
    """Tests for ListAvailsResponse model."""

    def test_parse_page(self) -> None:
        """Should parse avails and pagination fields."""
        response = ListAvailsResponse.model_validate(
            {"avails": [_avail_data()], "nextPageToken": "n", "totalSize": 40}
        )

        assert response.avails is not None
        assert response.avails[0].territory == "US"
        assert response.has_more is True
        assert response.total_size == 40
