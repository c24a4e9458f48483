"""
Pytest configuration and fixtures for youtube-data tests.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from youtube_data.config.settings import Settings
from youtube_data.services.youtube_service import YouTubeDataClient

TEST_API_KEY = "test-api-key-123"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def api_key() -> str:
    """API key used by every test client."""
    return TEST_API_KEY


@pytest.fixture
def mock_settings() -> Settings:
    """Settings for testing, isolated from the environment's .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        youtube_api_key=TEST_API_KEY,
        log_level="DEBUG",
    )


@pytest.fixture
def client() -> YouTubeDataClient:
    """Client for builder tests; it never sends a request."""
    return YouTubeDataClient(api_key=TEST_API_KEY)


@pytest.fixture
def make_client() -> Callable[[Handler], YouTubeDataClient]:
    """Factory for clients whose requests are answered by a MockTransport handler."""

    def factory(handler: Handler) -> YouTubeDataClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return YouTubeDataClient(api_key=TEST_API_KEY, http_client=http_client)

    return factory


@pytest.fixture
def channel_list_payload() -> dict[str, Any]:
    """A channels.list response with one channel."""
    return {
        "kind": "youtube#channelListResponse",
        "etag": "etag-channels",
        "pageInfo": {"totalResults": 1, "resultsPerPage": 5},
        "items": [
            {
                "kind": "youtube#channel",
                "etag": "etag-channel",
                "id": "UC_x5XG1OV2P6uZZ5FSM9Ttw",
                "snippet": {
                    "title": "Google for Developers",
                    "description": "Subscribe to join a community of creative developers",
                    "customUrl": "@googledevelopers",
                    "publishedAt": "2007-08-23T00:34:43Z",
                    "thumbnails": {
                        "default": {
                            "url": "https://yt3.ggpht.com/default.jpg",
                            "width": 88,
                            "height": 88,
                        },
                        "medium": {"url": "https://yt3.ggpht.com/medium.jpg"},
                    },
                    "localized": {
                        "title": "Google for Developers",
                        "description": "Subscribe",
                    },
                    "country": "US",
                },
                "statistics": {
                    "viewCount": "253940153",
                    "subscriberCount": "2460000",
                    "hiddenSubscriberCount": False,
                    "videoCount": "6239",
                },
            }
        ],
    }


@pytest.fixture
def search_list_payload() -> dict[str, Any]:
    """A search.list response with a video and a channel result."""
    return {
        "kind": "youtube#searchListResponse",
        "etag": "etag-search",
        "nextPageToken": "CAUQAA",
        "regionCode": "US",
        "pageInfo": {"totalResults": 1000000, "resultsPerPage": 5},
        "items": [
            {
                "kind": "youtube#searchResult",
                "etag": "etag-result-1",
                "id": {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"},
                "snippet": {
                    "publishedAt": "2009-10-25T06:57:33Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                    "title": "Never Gonna Give You Up",
                    "description": "The official video",
                    "thumbnails": {
                        "default": {
                            "url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg",
                            "width": 120,
                            "height": 90,
                        }
                    },
                    "channelTitle": "Rick Astley",
                    "liveBroadcastContent": "none",
                },
            },
            {
                "kind": "youtube#searchResult",
                "etag": "etag-result-2",
                "id": {
                    "kind": "youtube#channel",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                },
                "snippet": {
                    "publishedAt": "2006-09-12T00:00:00Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                    "title": "Rick Astley",
                    "description": "",
                    "thumbnails": {},
                    "channelTitle": "Rick Astley",
                    "liveBroadcastContent": "none",
                },
            },
        ],
    }


@pytest.fixture
def video_list_payload() -> dict[str, Any]:
    """A videos.list response with one video."""
    return {
        "kind": "youtube#videoListResponse",
        "etag": "etag-videos",
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
        "items": [
            {
                "kind": "youtube#video",
                "etag": "etag-video",
                "id": "dQw4w9WgXcQ",
                "snippet": {
                    "publishedAt": "2009-10-25T06:57:33Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                    "title": "Never Gonna Give You Up",
                    "description": "The official video",
                    "thumbnails": {
                        "maxres": {
                            "url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
                            "width": 1280,
                            "height": 720,
                        }
                    },
                    "channelTitle": "Rick Astley",
                    "tags": ["rick astley", "never gonna give you up"],
                    "categoryId": "10",
                    "liveBroadcastContent": "none",
                },
                "contentDetails": {
                    "duration": "PT3M33S",
                    "dimension": "2d",
                    "definition": "hd",
                    "caption": "true",
                    "licensedContent": True,
                    "projection": "rectangular",
                },
                "statistics": {
                    "viewCount": "1500000000",
                    "likeCount": "17000000",
                    "favoriteCount": "0",
                    "commentCount": "2300000",
                },
            }
        ],
    }


@pytest.fixture
def error_payload() -> dict[str, Any]:
    """A 400 error body as returned by the API."""
    return {
        "error": {
            "code": 400,
            "message": "Request contains an invalid argument.",
            "errors": [
                {
                    "message": "Request contains an invalid argument.",
                    "domain": "global",
                    "reason": "badRequest",
                }
            ],
            "status": "INVALID_ARGUMENT",
        }
    }
