"""
Pydantic models for YouTube Data API v3 list responses.

The models mirror the JSON resource shapes returned by channels.list,
search.list and videos.list. camelCase wire names are mapped to snake_case
fields through Pydantic's alias_generator; both spellings are accepted on
input and unknown fields are ignored.

References:
- YouTube Data API v3 Reference: https://developers.google.com/youtube/v3/docs
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from youtube_data.models.enums import ThumbnailKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Base Configuration
# =============================================================================


class BaseYouTubeModel(BaseModel):
    """
    Base model for all YouTube API response models.

    Configures:
    - populate_by_name: Allow both camelCase (API) and snake_case (Python)
    - alias_generator: Auto-convert snake_case fields to camelCase for API
    - extra='ignore': Ignore unexpected fields from API responses
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


def _parse_count(v: Any) -> Optional[int]:
    """Parse a statistics count, which the API sends as a string."""
    if v is None:
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        try:
            return int(v)
        except ValueError:
            return 0
    return 0


# =============================================================================
# Supporting Models
# =============================================================================


class Thumbnail(BaseYouTubeModel):
    """
    A single thumbnail image.

    Width and height are absent for some channel thumbnails.
    """

    url: str = Field(description="Thumbnail URL")
    width: Optional[int] = Field(default=None, description="Width in pixels")
    height: Optional[int] = Field(default=None, description="Height in pixels")


class Localization(BaseYouTubeModel):
    """Localized title and description for a resource."""

    title: str = Field(default="", description="Localized title")
    description: str = Field(default="", description="Localized description")


class PageInfo(BaseYouTubeModel):
    """Paging information for a result set."""

    total_results: int = Field(
        default=0,
        description="Approximate total number of results (capped at 1,000,000)",
    )
    results_per_page: int = Field(
        default=0, description="Number of results included in the response"
    )


class ResourceId(BaseYouTubeModel):
    """
    Identifies the resource a search result refers to.

    Exactly one of ``video_id``, ``channel_id`` or ``playlist_id`` is
    populated, selected by ``kind``.
    """

    kind: str = Field(description="Resource type (e.g., youtube#video)")
    video_id: Optional[str] = Field(
        default=None, description="Video ID if resource is a video"
    )
    channel_id: Optional[str] = Field(
        default=None, description="Channel ID if resource is a channel"
    )
    playlist_id: Optional[str] = Field(
        default=None, description="Playlist ID if resource is a playlist"
    )

    @property
    def value(self) -> Optional[str]:
        """Return the ID that matches ``kind``."""
        by_kind = {
            "youtube#video": self.video_id,
            "youtube#channel": self.channel_id,
            "youtube#playlist": self.playlist_id,
        }
        if self.kind in by_kind:
            return by_kind[self.kind]
        return self.video_id or self.channel_id or self.playlist_id


# =============================================================================
# Snippet Models
# =============================================================================


class SnippetBase(BaseYouTubeModel):
    """Fields shared by every snippet: a title, a description and thumbnails."""

    title: str = Field(default="", description="Resource title")
    description: str = Field(default="", description="Resource description")
    thumbnails: dict[ThumbnailKind, Thumbnail] = Field(
        default_factory=dict, description="Available thumbnails by quality"
    )

    @field_validator("thumbnails", mode="before")
    @classmethod
    def parse_thumbnails(cls, v: Any) -> dict[ThumbnailKind, Any]:
        """Parse the thumbnail map, dropping qualities the API may add later."""
        if not v or not isinstance(v, dict):
            return {}
        result: dict[ThumbnailKind, Any] = {}
        for key, thumb_data in v.items():
            try:
                kind = ThumbnailKind(key)
            except ValueError:
                logger.debug("Ignoring unknown thumbnail kind %r", key)
                continue
            result[kind] = thumb_data
        return result


class ChannelSnippet(SnippetBase):
    """Snippet data for a YouTube channel."""

    custom_url: Optional[str] = Field(
        default=None, description="Custom channel URL handle"
    )
    published_at: datetime = Field(description="Channel creation timestamp")
    default_language: Optional[str] = Field(
        default=None, description="Default language (BCP-47)"
    )
    localized: Optional[Localization] = Field(
        default=None, description="Localized title and description"
    )
    country: Optional[str] = Field(
        default=None, description="Country code (ISO 3166-1)"
    )


class VideoSnippet(SnippetBase):
    """Snippet data for a YouTube video."""

    published_at: datetime = Field(description="Video publish timestamp")
    channel_id: str = Field(description="ID of the channel")
    channel_title: str = Field(default="", description="Channel name")
    tags: Optional[list[str]] = Field(default=None, description="Video tags")
    category_id: Optional[str] = Field(
        default=None, description="YouTube category ID"
    )
    live_broadcast_content: Optional[str] = Field(
        default=None, description="Live broadcast status (none, live, upcoming)"
    )
    default_language: Optional[str] = Field(
        default=None, description="Default language (BCP-47)"
    )
    localized: Optional[Localization] = Field(
        default=None, description="Localized title and description"
    )
    default_audio_language: Optional[str] = Field(
        default=None, description="Default audio language (BCP-47)"
    )


class SearchSnippet(SnippetBase):
    """Snippet data for a search result (video, channel or playlist)."""

    published_at: datetime = Field(description="Resource creation timestamp")
    channel_id: str = Field(description="Publishing channel ID")
    channel_title: str = Field(default="", description="Publishing channel name")
    live_broadcast_content: Optional[str] = Field(
        default=None, description="Live broadcast status (none, live, upcoming)"
    )


# =============================================================================
# Statistics and Details Models
# =============================================================================


class ChannelStatistics(BaseYouTubeModel):
    """
    Statistics for a channel.

    Note: YouTube API returns counts as strings, so we convert to int.
    """

    view_count: int = Field(default=0, description="Total channel view count")
    subscriber_count: Optional[int] = Field(
        default=None, description="Subscriber count (may be hidden)"
    )
    hidden_subscriber_count: bool = Field(
        default=False, description="Whether subscriber count is hidden"
    )
    video_count: int = Field(default=0, description="Number of public videos")

    @field_validator("view_count", "subscriber_count", "video_count", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> Optional[int]:
        """Parse count from string or int."""
        return _parse_count(v)


class ChannelRelatedPlaylists(BaseYouTubeModel):
    """System playlists associated with a channel."""

    likes: Optional[str] = Field(default=None, description="Liked videos playlist")
    uploads: Optional[str] = Field(default=None, description="Uploads playlist")


class ChannelContentDetails(BaseYouTubeModel):
    """Content details for a channel."""

    related_playlists: Optional[ChannelRelatedPlaylists] = Field(
        default=None, description="Related system playlists"
    )


class VideoContentDetails(BaseYouTubeModel):
    """Technical information about a video."""

    duration: Optional[str] = Field(
        default=None, description="Duration in ISO 8601 format"
    )
    dimension: Optional[str] = Field(default=None, description="2d or 3d")
    definition: Optional[str] = Field(default=None, description="hd or sd")
    caption: Optional[str] = Field(
        default=None, description="Whether captions are available ('true'/'false')"
    )
    licensed_content: Optional[bool] = Field(
        default=None, description="Whether the video is licensed content"
    )
    projection: Optional[str] = Field(
        default=None, description="rectangular or 360"
    )


class VideoStatus(BaseYouTubeModel):
    """Upload, processing and privacy status of a video."""

    upload_status: str = Field(
        default="processed", description="Upload status (processed, uploaded, ...)"
    )
    failure_reason: Optional[str] = Field(
        default=None, description="Reason for upload failure if any"
    )
    rejection_reason: Optional[str] = Field(
        default=None, description="Reason for rejection if any"
    )
    privacy_status: Optional[str] = Field(
        default=None, description="Privacy status (public, unlisted, private)"
    )
    publish_at: Optional[datetime] = Field(
        default=None, description="Scheduled publish time"
    )
    license: Optional[str] = Field(
        default=None, description="Video license (youtube or creativeCommon)"
    )
    embeddable: bool = Field(default=True, description="Whether video is embeddable")
    public_stats_viewable: bool = Field(
        default=True, description="Whether stats are publicly visible"
    )
    made_for_kids: bool = Field(
        default=False, description="Whether the video is made for kids"
    )
    self_declared_made_for_kids: Optional[bool] = Field(
        default=None, description="Creator's made for kids declaration"
    )


class VideoStatistics(BaseYouTubeModel):
    """
    Statistics for a video.

    Note: YouTube API returns counts as strings, so we convert to int.
    Some stats may be hidden by the channel owner.
    """

    view_count: Optional[int] = Field(default=None, description="View count")
    like_count: Optional[int] = Field(
        default=None, description="Like count (may be hidden)"
    )
    dislike_count: Optional[int] = Field(
        default=None, description="Dislike count (only visible to the owner)"
    )
    favorite_count: int = Field(
        default=0, description="Favorite count (deprecated, always 0)"
    )
    comment_count: Optional[int] = Field(
        default=None, description="Comment count (may be hidden)"
    )

    @field_validator(
        "view_count", "like_count", "dislike_count", "favorite_count", "comment_count",
        mode="before"
    )
    @classmethod
    def parse_count(cls, v: Any) -> Optional[int]:
        """Parse count from string or int."""
        return _parse_count(v)


class VideoPlayer(BaseYouTubeModel):
    """Embedded player information for a video."""

    embed_html: Optional[str] = Field(
        default=None, description="<iframe> tag that embeds the player"
    )
    embed_height: Optional[int] = Field(default=None, description="Player height")
    embed_width: Optional[int] = Field(default=None, description="Player width")


class VideoLiveStreamingDetails(BaseYouTubeModel):
    """Metadata about a live video broadcast."""

    actual_start_time: Optional[datetime] = Field(
        default=None, description="When the broadcast actually started"
    )
    actual_end_time: Optional[datetime] = Field(
        default=None, description="When the broadcast actually ended"
    )
    scheduled_start_time: Optional[datetime] = Field(
        default=None, description="When the broadcast is scheduled to start"
    )
    scheduled_end_time: Optional[datetime] = Field(
        default=None, description="When the broadcast is scheduled to end"
    )
    concurrent_viewers: Optional[int] = Field(
        default=None, description="Viewers currently watching (live only)"
    )
    active_live_chat_id: Optional[str] = Field(
        default=None, description="ID of the active live chat"
    )

    @field_validator("concurrent_viewers", mode="before")
    @classmethod
    def parse_viewers(cls, v: Any) -> Optional[int]:
        """Parse viewer count from string or int."""
        return _parse_count(v)


# =============================================================================
# Resource Models
# =============================================================================


class ChannelResource(BaseYouTubeModel):
    """A channel item from channels.list."""

    kind: str = Field(default="youtube#channel", description="Resource type")
    etag: str = Field(default="", description="ETag of the resource")
    id: str = Field(description="Channel ID")
    snippet: Optional[ChannelSnippet] = Field(
        default=None, description="Basic channel metadata"
    )
    content_details: Optional[ChannelContentDetails] = Field(
        default=None, description="Related playlists"
    )
    statistics: Optional[ChannelStatistics] = Field(
        default=None, description="Channel statistics"
    )
    localizations: Optional[dict[str, Localization]] = Field(
        default=None, description="Localized metadata by language"
    )


class VideoResource(BaseYouTubeModel):
    """A video item from videos.list."""

    kind: str = Field(default="youtube#video", description="Resource type")
    etag: str = Field(default="", description="ETag of the resource")
    id: str = Field(description="Video ID")
    snippet: Optional[VideoSnippet] = Field(
        default=None, description="Basic video metadata"
    )
    content_details: Optional[VideoContentDetails] = Field(
        default=None, description="Technical video details"
    )
    status: Optional[VideoStatus] = Field(default=None, description="Video status")
    statistics: Optional[VideoStatistics] = Field(
        default=None, description="Video statistics"
    )
    player: Optional[VideoPlayer] = Field(default=None, description="Embed player")
    live_streaming_details: Optional[VideoLiveStreamingDetails] = Field(
        default=None, description="Live broadcast metadata"
    )
    localizations: Optional[dict[str, Localization]] = Field(
        default=None, description="Localized metadata by language"
    )


class SearchResult(BaseYouTubeModel):
    """A search result item from search.list."""

    kind: str = Field(default="youtube#searchResult", description="Resource type")
    etag: str = Field(default="", description="ETag of the resource")
    id: ResourceId = Field(description="Identifies the result resource")
    snippet: Optional[SearchSnippet] = Field(
        default=None, description="Search result metadata"
    )


# =============================================================================
# List Response Envelope
# =============================================================================


class ListResponse(BaseYouTubeModel, Generic[T]):
    """
    Envelope returned by every list endpoint.

    Holds one page of items together with the tokens needed to move to the
    neighbouring pages.
    """

    kind: str = Field(description="Response type (e.g., youtube#videoListResponse)")
    etag: str = Field(default="", description="ETag of the response")
    next_page_token: Optional[str] = Field(
        default=None, description="Token for the next page"
    )
    prev_page_token: Optional[str] = Field(
        default=None, description="Token for the previous page"
    )
    region_code: Optional[str] = Field(
        default=None, description="Region code used for the query (search only)"
    )
    page_info: PageInfo = Field(
        default_factory=PageInfo, description="Paging information"
    )
    items: list[T] = Field(default_factory=list, description="Page items")

    @model_validator(mode="after")
    def check_page_size(self) -> "ListResponse[T]":
        """A page never holds more items than it reports per page."""
        per_page = self.page_info.results_per_page
        if per_page > 0 and len(self.items) > per_page:
            raise ValueError(
                f"Response holds {len(self.items)} items but reports "
                f"{per_page} results per page"
            )
        return self


ChannelListResponse = ListResponse[ChannelResource]
SearchListResponse = ListResponse[SearchResult]
VideoListResponse = ListResponse[VideoResource]


__all__ = [
    # Base
    "BaseYouTubeModel",
    # Supporting models
    "Thumbnail",
    "Localization",
    "PageInfo",
    "ResourceId",
    # Snippet models
    "SnippetBase",
    "ChannelSnippet",
    "VideoSnippet",
    "SearchSnippet",
    # Details models
    "ChannelStatistics",
    "ChannelRelatedPlaylists",
    "ChannelContentDetails",
    "VideoContentDetails",
    "VideoStatus",
    "VideoStatistics",
    "VideoPlayer",
    "VideoLiveStreamingDetails",
    # Resource models
    "ChannelResource",
    "VideoResource",
    "SearchResult",
    # Envelope
    "ListResponse",
    "ChannelListResponse",
    "SearchListResponse",
    "VideoListResponse",
]
