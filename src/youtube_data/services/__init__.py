"""
Services module for youtube-data.

Contains the API client and the request builders for the channels, search
and videos list endpoints.
"""

from __future__ import annotations

from youtube_data.services.base import ListRequest, RequestParameters
from youtube_data.services.channels import ChannelListRequest
from youtube_data.services.search import SearchListRequest
from youtube_data.services.videos import VideoListRequest
from youtube_data.services.youtube_service import YouTubeDataClient

__all__: list[str] = [
    "YouTubeDataClient",
    "ListRequest",
    "RequestParameters",
    "ChannelListRequest",
    "SearchListRequest",
    "VideoListRequest",
]
