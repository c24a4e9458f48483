"""
Tests for the videos.list request builder.
"""

from __future__ import annotations

import pytest

from youtube_data.exceptions import (
    AuthorizationRequired,
    IncompatibleParameters,
    InvalidParameter,
    MissingRequiredParameter,
)
from youtube_data.models.enums import Chart, MyRating, VideoPart
from youtube_data.services.youtube_service import YouTubeDataClient


class TestVideoFilters:
    """Test the exactly-one-of filter group."""

    def test_id_list(self, client: YouTubeDataClient, api_key: str) -> None:
        params = client.videos().id(["dQw4w9WgXcQ", "9bZkp7q19f0"]).build_params()

        assert params == {
            "key": api_key,
            "part": "id",
            "id": "dQw4w9WgXcQ,9bZkp7q19f0",
        }

    def test_chart(self, client: YouTubeDataClient) -> None:
        params = client.videos().chart(Chart.MOST_POPULAR).build_params()

        assert params["chart"] == "mostPopular"

    def test_no_filter_is_missing(self, client: YouTubeDataClient) -> None:
        with pytest.raises(MissingRequiredParameter) as exc_info:
            client.videos([VideoPart.SNIPPET]).region_code("JP").build_params()

        assert exc_info.value.expected == ["chart", "id", "my_rating"]

    def test_chart_and_id_are_incompatible(self, client: YouTubeDataClient) -> None:
        request = client.videos().id(["abc"]).chart(Chart.MOST_POPULAR)

        with pytest.raises(IncompatibleParameters) as exc_info:
            request.build_params()

        assert exc_info.value.parameters == ["chart", "id"]
        assert exc_info.value.message == (
            "Incompatible parameters specified in the request: chart, id"
        )

    def test_my_rating_requires_authorization(self, client: YouTubeDataClient) -> None:
        request = client.videos().my_rating(MyRating.LIKE)

        with pytest.raises(AuthorizationRequired) as exc_info:
            request.build_params()

        assert exc_info.value.parameter == "my_rating"

    def test_my_rating_with_id_is_incompatible(self, client: YouTubeDataClient) -> None:
        request = client.videos().my_rating(MyRating.DISLIKE).id(["abc"])

        with pytest.raises(IncompatibleParameters):
            request.build_params()

    def test_empty_id_list_is_invalid(self, client: YouTubeDataClient) -> None:
        with pytest.raises(InvalidParameter, match="at least one video ID"):
            client.videos().id([]).build_params()

    def test_id_accepts_any_sequence(self, client: YouTubeDataClient) -> None:
        params = client.videos().id(("a", "b", "c")).build_params()

        assert params["id"] == "a,b,c"


class TestVideoParameters:
    """Test optional parameters and their bounds."""

    def test_chart_with_category_and_region(
        self, client: YouTubeDataClient, api_key: str
    ) -> None:
        params = (
            client.videos([VideoPart.SNIPPET, VideoPart.STATISTICS])
            .chart(Chart.MOST_POPULAR)
            .region_code("JP")
            .video_category_id("10")
            .hl("ja")
            .max_results(20)
            .page_token("CBQQAA")
            .build_params()
        )

        assert params == {
            "key": api_key,
            "part": "snippet,statistics",
            "chart": "mostPopular",
            "regionCode": "JP",
            "videoCategoryId": "10",
            "hl": "ja",
            "maxResults": "20",
            "pageToken": "CBQQAA",
        }

    def test_category_requires_chart(self, client: YouTubeDataClient) -> None:
        request = client.videos().id(["abc"]).video_category_id("10")

        with pytest.raises(InvalidParameter, match="`chart` must be specified"):
            request.build_params()

    @pytest.mark.parametrize("given,expected", [(0, "1"), (1, "1"), (50, "50"), (99, "50")])
    def test_max_results_is_clamped(
        self, client: YouTubeDataClient, given: int, expected: str
    ) -> None:
        params = client.videos().id(["abc"]).max_results(given).build_params()

        assert params["maxResults"] == expected

    @pytest.mark.parametrize("given,expected", [(10, "72"), (720, "720"), (10000, "4320")])
    def test_max_height_is_clamped(
        self, client: YouTubeDataClient, given: int, expected: str
    ) -> None:
        params = client.videos().id(["abc"]).max_height(given).build_params()

        assert params["maxHeight"] == expected

    @pytest.mark.parametrize("given,expected", [(-1, "72"), (1280, "1280"), (9000, "8192")])
    def test_max_width_is_clamped(
        self, client: YouTubeDataClient, given: int, expected: str
    ) -> None:
        params = client.videos().id(["abc"]).max_width(given).build_params()

        assert params["maxWidth"] == expected


class TestBuilderLifecycle:
    """Test the builder's mutable-accumulator behaviour."""

    def test_setters_return_the_builder(self, client: YouTubeDataClient) -> None:
        request = client.videos()

        assert request.id(["abc"]) is request
        assert request.max_results(5) is request

    def test_later_value_replaces_earlier(self, client: YouTubeDataClient) -> None:
        params = client.videos().id(["abc"]).id(["def"]).build_params()

        assert params["id"] == "def"

    def test_builders_do_not_share_state(self, client: YouTubeDataClient) -> None:
        first = client.videos().id(["abc"])
        second = client.videos().chart(Chart.MOST_POPULAR)

        assert "chart" not in first.build_params()
        assert "id" not in second.build_params()
