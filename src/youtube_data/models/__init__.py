"""
Data models for youtube-data.

Response resources, the list envelope, upstream error bodies and the
enumerations used as request parameters.
"""

from __future__ import annotations

from youtube_data.models.api_errors import (
    YouTubeErrorBody,
    YouTubeErrorDetail,
    YouTubeErrorInfo,
)
from youtube_data.models.api_responses import (
    ChannelContentDetails,
    ChannelListResponse,
    ChannelRelatedPlaylists,
    ChannelResource,
    ChannelSnippet,
    ChannelStatistics,
    ListResponse,
    Localization,
    PageInfo,
    ResourceId,
    SearchListResponse,
    SearchResult,
    SearchSnippet,
    Thumbnail,
    VideoContentDetails,
    VideoListResponse,
    VideoLiveStreamingDetails,
    VideoPlayer,
    VideoResource,
    VideoSnippet,
    VideoStatistics,
    VideoStatus,
)
from youtube_data.models.enums import (
    ChannelPart,
    ChannelType,
    Chart,
    EventType,
    MyRating,
    Order,
    ResourceType,
    SafeSearch,
    SearchPart,
    ThumbnailKind,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoEmbeddable,
    VideoLicense,
    VideoPaidProductPlacement,
    VideoPart,
    VideoSyndicated,
    VideoType,
)

__all__ = [
    # Responses
    "ListResponse",
    "PageInfo",
    "Thumbnail",
    "Localization",
    "ResourceId",
    "ChannelResource",
    "ChannelSnippet",
    "ChannelStatistics",
    "ChannelContentDetails",
    "ChannelRelatedPlaylists",
    "ChannelListResponse",
    "VideoResource",
    "VideoSnippet",
    "VideoContentDetails",
    "VideoStatus",
    "VideoStatistics",
    "VideoPlayer",
    "VideoLiveStreamingDetails",
    "VideoListResponse",
    "SearchResult",
    "SearchSnippet",
    "SearchListResponse",
    # Errors
    "YouTubeErrorBody",
    "YouTubeErrorInfo",
    "YouTubeErrorDetail",
    # Enums
    "ThumbnailKind",
    "ChannelPart",
    "SearchPart",
    "VideoPart",
    "ChannelType",
    "EventType",
    "Order",
    "SafeSearch",
    "ResourceType",
    "VideoCaption",
    "VideoDefinition",
    "VideoDimension",
    "VideoDuration",
    "VideoEmbeddable",
    "VideoLicense",
    "VideoPaidProductPlacement",
    "VideoSyndicated",
    "VideoType",
    "Chart",
    "MyRating",
]
