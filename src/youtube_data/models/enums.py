"""
Enums for youtube-data request parameters and response models.

Every member value is the exact token the YouTube Data API expects on the
wire, so ``member.value`` can be placed in a query string as-is.
"""

from __future__ import annotations

from enum import Enum


class ThumbnailKind(str, Enum):
    """Thumbnail quality levels keyed in a resource's thumbnail set."""

    DEFAULT = "default"
    MEDIUM = "medium"
    HIGH = "high"
    STANDARD = "standard"
    MAXRES = "maxres"


# =============================================================================
# Part Enums
# =============================================================================


class ChannelPart(str, Enum):
    """Resource parts that can be requested from channels.list."""

    AUDIT_DETAILS = "auditDetails"
    BRANDING_SETTINGS = "brandingSettings"
    CONTENT_DETAILS = "contentDetails"
    CONTENT_OWNER_DETAILS = "contentOwnerDetails"
    ID = "id"
    LOCALIZATIONS = "localizations"
    SNIPPET = "snippet"
    STATISTICS = "statistics"
    STATUS = "status"
    TOPIC_DETAILS = "topicDetails"


class SearchPart(str, Enum):
    """Resource parts that can be requested from search.list."""

    ID = "id"
    SNIPPET = "snippet"


class VideoPart(str, Enum):
    """Resource parts that can be requested from videos.list."""

    CONTENT_DETAILS = "contentDetails"
    FILE_DETAILS = "fileDetails"
    ID = "id"
    LIVE_STREAMING_DETAILS = "liveStreamingDetails"
    LOCALIZATIONS = "localizations"
    PLAYER = "player"
    PROCESSING_DETAILS = "processingDetails"
    RECORDING_DETAILS = "recordingDetails"
    SNIPPET = "snippet"
    STATISTICS = "statistics"
    STATUS = "status"
    SUGGESTIONS = "suggestions"
    TOPIC_DETAILS = "topicDetails"


# =============================================================================
# Search Filter Enums
# =============================================================================


class ChannelType(str, Enum):
    """Restricts a search to a particular type of channel."""

    ANY = "any"
    SHOW = "show"


class EventType(str, Enum):
    """Restricts a search to broadcast events (requires type=video)."""

    COMPLETED = "completed"
    LIVE = "live"
    UPCOMING = "upcoming"


class Order(str, Enum):
    """Sort order of search results."""

    DATE = "date"
    RATING = "rating"
    RELEVANCE = "relevance"  # API default
    TITLE = "title"
    VIDEO_COUNT = "videoCount"
    VIEW_COUNT = "viewCount"


class SafeSearch(str, Enum):
    """Restricted-content filtering level for search results."""

    MODERATE = "moderate"  # API default
    NONE = "none"
    STRICT = "strict"


class ResourceType(str, Enum):
    """Resource types a search can return (the ``type`` parameter)."""

    CHANNEL = "channel"
    PLAYLIST = "playlist"
    VIDEO = "video"


class VideoCaption(str, Enum):
    """Filter videos by caption availability."""

    ANY = "any"
    CLOSED_CAPTION = "closedCaption"
    NONE = "none"


class VideoDefinition(str, Enum):
    """Filter videos by HD or SD definition."""

    ANY = "any"
    HIGH = "high"
    STANDARD = "standard"


class VideoDimension(str, Enum):
    """Filter videos by 2D or 3D dimension."""

    ANY = "any"
    TWO_DIMENSIONAL = "2d"
    THREE_DIMENSIONAL = "3d"


class VideoDuration(str, Enum):
    """Filter videos by duration bucket."""

    ANY = "any"
    SHORT = "short"  # under four minutes
    MEDIUM = "medium"  # four to twenty minutes
    LONG = "long"  # over twenty minutes


class VideoEmbeddable(str, Enum):
    """Filter videos by whether they can be embedded."""

    ANY = "any"
    TRUE = "true"


class VideoLicense(str, Enum):
    """Filter videos by license."""

    ANY = "any"
    CREATIVE_COMMON = "creativeCommon"
    YOUTUBE = "youtube"


class VideoPaidProductPlacement(str, Enum):
    """Filter videos by paid product placement."""

    ANY = "any"
    TRUE = "true"


class VideoSyndicated(str, Enum):
    """Filter videos by whether they play outside youtube.com."""

    ANY = "any"
    TRUE = "true"


class VideoType(str, Enum):
    """Filter videos by type."""

    ANY = "any"
    EPISODE = "episode"
    MOVIE = "movie"


# =============================================================================
# Videos Filter Enums
# =============================================================================


class Chart(str, Enum):
    """Chart to retrieve from videos.list."""

    MOST_POPULAR = "mostPopular"


class MyRating(str, Enum):
    """Rating given by the authorized user (videos.list filter)."""

    DISLIKE = "dislike"
    LIKE = "like"
