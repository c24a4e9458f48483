"""
Request builder for the search.list endpoint.

https://developers.google.com/youtube/v3/docs/search/list
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Sequence

from youtube_data.exceptions import AuthorizationRequired, InvalidParameter
from youtube_data.models.api_responses import SearchListResponse, SearchResult
from youtube_data.models.enums import (
    ChannelType,
    EventType,
    Order,
    ResourceType,
    SafeSearch,
    SearchPart,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoEmbeddable,
    VideoLicense,
    VideoPaidProductPlacement,
    VideoSyndicated,
    VideoType,
)
from youtube_data.services.base import (
    ListRequest,
    RequestParameters,
    check_filter_group,
    clamp,
    insert_param,
    insert_params,
    invalid_argument,
)

if TYPE_CHECKING:
    from youtube_data.services.youtube_service import YouTubeDataClient

MAX_RESULTS_LOWER = 0
MAX_RESULTS_UPPER = 50

DEFAULT_RESOURCE_TYPES = (ResourceType.CHANNEL, ResourceType.PLAYLIST, ResourceType.VIDEO)

# ``video*`` filters, sent under their own camelCase names.
VIDEO_FILTER_PARAMETERS = (
    "video_caption",
    "video_category_id",
    "video_definition",
    "video_dimension",
    "video_duration",
    "video_embeddable",
    "video_license",
    "video_paid_product_placement",
    "video_syndicated",
    "video_type",
)

# Parameters the API only accepts when the search is restricted to videos.
VIDEO_ONLY_PARAMETERS = ("event_type", "location") + VIDEO_FILTER_PARAMETERS


def type_must_be_video(parameter: str) -> InvalidParameter:
    """Error for a video-only filter used without ``type=video``."""
    return invalid_argument(
        f"parameter `type` must be set to `video` when using `{parameter}`"
    )


class SearchListRequest(ListRequest[SearchResult]):
    """
    Builder for search.list.

    At most one of ``for_content_owner``, ``for_developer`` and
    ``for_mine`` may be given; all three need an authorized caller and are
    always rejected by this key-only client. The ``video_*`` filters,
    ``event_type`` and ``location`` require ``resource_type`` to be exactly
    ``[ResourceType.VIDEO]``.

    Examples
    --------
    >>> response = await (
    ...     client.search()
    ...     .q("surfing")
    ...     .resource_type([ResourceType.VIDEO])
    ...     .video_duration(VideoDuration.SHORT)
    ...     .execute()
    ... )
    """

    api_path: ClassVar[str] = "search"
    response_model = SearchListResponse
    default_part = SearchPart.SNIPPET

    def __init__(
        self, client: YouTubeDataClient, part: Optional[Sequence[SearchPart]] = None
    ) -> None:
        super().__init__(client, part)
        # filters (zero or one)
        self._for_content_owner: Optional[bool] = None
        self._for_developer: Optional[bool] = None
        self._for_mine: Optional[bool] = None
        # optional parameters
        self._channel_id: Optional[str] = None
        self._channel_type: Optional[ChannelType] = None
        self._event_type: Optional[EventType] = None
        self._location: Optional[str] = None
        self._location_radius: Optional[str] = None
        self._max_results: Optional[int] = None
        self._order: Optional[Order] = None
        self._page_token: Optional[str] = None
        self._published_after: Optional[datetime] = None
        self._published_before: Optional[datetime] = None
        self._q: Optional[str] = None
        self._region_code: Optional[str] = None
        self._relevance_language: Optional[str] = None
        self._safe_search: Optional[SafeSearch] = None
        self._topic_id: Optional[str] = None
        self._resource_type: list[ResourceType] = list(DEFAULT_RESOURCE_TYPES)
        self._video_caption: Optional[VideoCaption] = None
        self._video_category_id: Optional[str] = None
        self._video_definition: Optional[VideoDefinition] = None
        self._video_dimension: Optional[VideoDimension] = None
        self._video_duration: Optional[VideoDuration] = None
        self._video_embeddable: Optional[VideoEmbeddable] = None
        self._video_license: Optional[VideoLicense] = None
        self._video_paid_product_placement: Optional[VideoPaidProductPlacement] = None
        self._video_syndicated: Optional[VideoSyndicated] = None
        self._video_type: Optional[VideoType] = None

    def part(self, *part: SearchPart) -> SearchListRequest:
        """Replace the requested resource parts."""
        return self._set("_part", list(part))

    # -- filters ------------------------------------------------------------

    def for_content_owner(self, for_content_owner: bool = True) -> SearchListRequest:
        """Search the content owner's videos (requires authorization)."""
        return self._set("_for_content_owner", for_content_owner)

    def for_developer(self, for_developer: bool = True) -> SearchListRequest:
        """Search videos uploaded through the developer's app (requires authorization)."""
        return self._set("_for_developer", for_developer)

    def for_mine(self, for_mine: bool = True) -> SearchListRequest:
        """Search the authorized user's videos (requires authorization)."""
        return self._set("_for_mine", for_mine)

    # -- optional parameters ------------------------------------------------

    def channel_id(self, channel_id: str) -> SearchListRequest:
        return self._set("_channel_id", channel_id)

    def channel_type(self, channel_type: ChannelType) -> SearchListRequest:
        return self._set("_channel_type", channel_type)

    def event_type(self, event_type: EventType) -> SearchListRequest:
        """Restrict to broadcast events (video searches only)."""
        return self._set("_event_type", event_type)

    def location(self, location: str) -> SearchListRequest:
        """Circle centre as ``"latitude,longitude"``; needs ``location_radius``."""
        return self._set("_location", location)

    def location_radius(self, location_radius: str) -> SearchListRequest:
        """Circle radius such as ``"10km"``; needs ``location``."""
        return self._set("_location_radius", location_radius)

    def max_results(self, max_results: int) -> SearchListRequest:
        """Set the page size, clamped to 0..50."""
        return self._set(
            "_max_results", clamp(max_results, MAX_RESULTS_LOWER, MAX_RESULTS_UPPER)
        )

    def order(self, order: Order) -> SearchListRequest:
        return self._set("_order", order)

    def page_token(self, page_token: str) -> SearchListRequest:
        return self._set("_page_token", page_token)

    def published_after(self, published_after: datetime) -> SearchListRequest:
        """Only resources created at or after this time (naive means UTC)."""
        return self._set("_published_after", published_after)

    def published_before(self, published_before: datetime) -> SearchListRequest:
        """Only resources created before or at this time (naive means UTC)."""
        return self._set("_published_before", published_before)

    def q(self, q: str) -> SearchListRequest:
        """Query term; supports the API's ``|`` (OR) and ``-`` (NOT) operators."""
        return self._set("_q", q)

    def region_code(self, region_code: str) -> SearchListRequest:
        return self._set("_region_code", region_code)

    def relevance_language(self, relevance_language: str) -> SearchListRequest:
        return self._set("_relevance_language", relevance_language)

    def safe_search(self, safe_search: SafeSearch) -> SearchListRequest:
        return self._set("_safe_search", safe_search)

    def topic_id(self, topic_id: str) -> SearchListRequest:
        return self._set("_topic_id", topic_id)

    def resource_type(self, resource_type: Sequence[ResourceType]) -> SearchListRequest:
        """Restrict the resource types returned (the ``type`` parameter)."""
        return self._set("_resource_type", list(resource_type))

    def video_caption(self, video_caption: VideoCaption) -> SearchListRequest:
        return self._set("_video_caption", video_caption)

    def video_category_id(self, video_category_id: str) -> SearchListRequest:
        return self._set("_video_category_id", video_category_id)

    def video_definition(self, video_definition: VideoDefinition) -> SearchListRequest:
        return self._set("_video_definition", video_definition)

    def video_dimension(self, video_dimension: VideoDimension) -> SearchListRequest:
        return self._set("_video_dimension", video_dimension)

    def video_duration(self, video_duration: VideoDuration) -> SearchListRequest:
        return self._set("_video_duration", video_duration)

    def video_embeddable(self, video_embeddable: VideoEmbeddable) -> SearchListRequest:
        return self._set("_video_embeddable", video_embeddable)

    def video_license(self, video_license: VideoLicense) -> SearchListRequest:
        return self._set("_video_license", video_license)

    def video_paid_product_placement(
        self, video_paid_product_placement: VideoPaidProductPlacement
    ) -> SearchListRequest:
        return self._set("_video_paid_product_placement", video_paid_product_placement)

    def video_syndicated(self, video_syndicated: VideoSyndicated) -> SearchListRequest:
        return self._set("_video_syndicated", video_syndicated)

    def video_type(self, video_type: VideoType) -> SearchListRequest:
        return self._set("_video_type", video_type)

    # -- validation ---------------------------------------------------------

    def _option(self, name: str) -> Any:
        return getattr(self, f"_{name}")

    def _collect_params(self, params: RequestParameters) -> None:
        selected = check_filter_group(
            [
                ("for_content_owner", self._for_content_owner is not None),
                ("for_developer", self._for_developer is not None),
                ("for_mine", self._for_mine is not None),
            ],
            required=False,
        )
        if selected is not None:
            raise AuthorizationRequired(selected)

        video_only = self._resource_type == [ResourceType.VIDEO]
        for name in VIDEO_ONLY_PARAMETERS:
            if self._option(name) is not None and not video_only:
                raise type_must_be_video(name)

        if self._location is not None and self._location_radius is None:
            raise invalid_argument(
                "parameter `location_radius` must be specified when using `location`"
            )
        if self._location_radius is not None and self._location is None:
            raise invalid_argument(
                "parameter `location` must be specified when using `location_radius`"
            )

        insert_param(params, "channel_id", self._channel_id)
        insert_param(params, "channel_type", self._channel_type)
        insert_param(params, "event_type", self._event_type)
        insert_param(params, "location", self._location)
        insert_param(params, "location_radius", self._location_radius)
        insert_param(params, "max_results", self._max_results)
        insert_param(params, "order", self._order)
        insert_param(params, "page_token", self._page_token)
        insert_param(params, "published_after", self._published_after)
        insert_param(params, "published_before", self._published_before)
        insert_param(params, "q", self._q)
        insert_param(params, "region_code", self._region_code)
        insert_param(params, "relevance_language", self._relevance_language)
        insert_param(params, "safe_search", self._safe_search)
        insert_param(params, "topic_id", self._topic_id)
        insert_params(params, "resource_type", self._resource_type, key="type")
        for name in VIDEO_FILTER_PARAMETERS:
            insert_param(params, name, self._option(name))
