"""
Tests for request parameter enums.

Each member's value must be the exact wire token the API accepts.
"""

from __future__ import annotations

import pytest

from youtube_data.models.enums import (
    ChannelPart,
    Chart,
    MyRating,
    Order,
    ResourceType,
    SafeSearch,
    SearchPart,
    ThumbnailKind,
    VideoCaption,
    VideoDimension,
    VideoDuration,
    VideoLicense,
    VideoPart,
)
from youtube_data.services.base import format_value


class TestWireTokens:
    """Test enum wire tokens."""

    @pytest.mark.parametrize(
        "member,token",
        [
            (Order.VIEW_COUNT, "viewCount"),
            (Order.VIDEO_COUNT, "videoCount"),
            (SafeSearch.STRICT, "strict"),
            (VideoCaption.CLOSED_CAPTION, "closedCaption"),
            (VideoDimension.TWO_DIMENSIONAL, "2d"),
            (VideoDimension.THREE_DIMENSIONAL, "3d"),
            (VideoDuration.LONG, "long"),
            (VideoLicense.CREATIVE_COMMON, "creativeCommon"),
            (Chart.MOST_POPULAR, "mostPopular"),
            (MyRating.LIKE, "like"),
            (ChannelPart.CONTENT_OWNER_DETAILS, "contentOwnerDetails"),
            (VideoPart.LIVE_STREAMING_DETAILS, "liveStreamingDetails"),
        ],
    )
    def test_format_value_uses_wire_token(self, member, token) -> None:
        """Serializing a member yields its wire token."""
        assert format_value(member) == token

    def test_lookup_by_token(self) -> None:
        """Members can be looked up from the token the API returns."""
        assert ThumbnailKind("maxres") is ThumbnailKind.MAXRES
        assert ResourceType("playlist") is ResourceType.PLAYLIST

    def test_unknown_token_is_rejected(self) -> None:
        """Tokens outside the closed set are not accepted."""
        with pytest.raises(ValueError):
            Order("popularity")


class TestPartEnums:
    """Test the part enumerations."""

    def test_channel_parts(self) -> None:
        assert {p.value for p in ChannelPart} == {
            "auditDetails",
            "brandingSettings",
            "contentDetails",
            "contentOwnerDetails",
            "id",
            "localizations",
            "snippet",
            "statistics",
            "status",
            "topicDetails",
        }

    def test_search_parts(self) -> None:
        assert [p.value for p in SearchPart] == ["id", "snippet"]

    def test_video_parts_include_id_and_snippet(self) -> None:
        values = {p.value for p in VideoPart}
        assert {"id", "snippet", "statistics", "player", "suggestions"} <= values
        assert len(values) == 13
