"""
Request builder for the videos.list endpoint.

https://developers.google.com/youtube/v3/docs/videos/list
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from youtube_data.exceptions import AuthorizationRequired
from youtube_data.models.api_responses import VideoListResponse, VideoResource
from youtube_data.models.enums import Chart, MyRating, VideoPart
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

MAX_RESULTS_LOWER = 1
MAX_RESULTS_UPPER = 50
MAX_HEIGHT_LOWER = 72
MAX_HEIGHT_UPPER = 4320
MAX_WIDTH_LOWER = 72
MAX_WIDTH_UPPER = 8192


class VideoListRequest(ListRequest[VideoResource]):
    """
    Builder for videos.list.

    Exactly one filter must be given: ``chart``, ``id`` or ``my_rating``.
    ``my_rating`` needs an authorized user and is always rejected.
    ``video_category_id`` only applies to chart requests.

    Examples
    --------
    >>> response = await (
    ...     client.videos([VideoPart.SNIPPET])
    ...     .chart(Chart.MOST_POPULAR)
    ...     .region_code("JP")
    ...     .max_results(10)
    ...     .execute()
    ... )
    """

    api_path: ClassVar[str] = "videos"
    response_model = VideoListResponse
    default_part = VideoPart.ID

    def __init__(
        self, client: YouTubeDataClient, part: Optional[Sequence[VideoPart]] = None
    ) -> None:
        super().__init__(client, part)
        # filters (exactly one)
        self._chart: Optional[Chart] = None
        self._id: Optional[list[str]] = None
        self._my_rating: Optional[MyRating] = None
        # optional parameters
        self._hl: Optional[str] = None
        self._max_height: Optional[int] = None
        self._max_results: Optional[int] = None
        self._max_width: Optional[int] = None
        self._page_token: Optional[str] = None
        self._region_code: Optional[str] = None
        self._video_category_id: Optional[str] = None

    def part(self, *part: VideoPart) -> VideoListRequest:
        """Replace the requested resource parts."""
        return self._set("_part", list(part))

    def chart(self, chart: Chart) -> VideoListRequest:
        """Select a chart, e.g. the most popular videos of a region."""
        return self._set("_chart", chart)

    def id(self, id: Sequence[str]) -> VideoListRequest:
        """Select videos by ID. The list must not be empty."""
        return self._set("_id", list(id))

    def my_rating(self, my_rating: MyRating) -> VideoListRequest:
        """Select videos the authorized user rated (requires authorization)."""
        return self._set("_my_rating", my_rating)

    def hl(self, hl: str) -> VideoListRequest:
        """Request localized snippet text in an application language."""
        return self._set("_hl", hl)

    def max_height(self, max_height: int) -> VideoListRequest:
        """Set the maximum embedded player height, clamped to 72..4320."""
        return self._set(
            "_max_height", clamp(max_height, MAX_HEIGHT_LOWER, MAX_HEIGHT_UPPER)
        )

    def max_results(self, max_results: int) -> VideoListRequest:
        """Set the page size, clamped to 1..50."""
        return self._set(
            "_max_results", clamp(max_results, MAX_RESULTS_LOWER, MAX_RESULTS_UPPER)
        )

    def max_width(self, max_width: int) -> VideoListRequest:
        """Set the maximum embedded player width, clamped to 72..8192."""
        return self._set(
            "_max_width", clamp(max_width, MAX_WIDTH_LOWER, MAX_WIDTH_UPPER)
        )

    def page_token(self, page_token: str) -> VideoListRequest:
        """Select a page using a token from a previous response."""
        return self._set("_page_token", page_token)

    def region_code(self, region_code: str) -> VideoListRequest:
        """Select the chart region (ISO 3166-1 alpha-2)."""
        return self._set("_region_code", region_code)

    def video_category_id(self, video_category_id: str) -> VideoListRequest:
        """Restrict a chart to one video category."""
        return self._set("_video_category_id", video_category_id)

    def _collect_params(self, params: RequestParameters) -> None:
        selected = check_filter_group(
            [
                ("chart", self._chart is not None),
                ("id", self._id is not None),
                ("my_rating", self._my_rating is not None),
            ],
            required=True,
        )
        if selected == "my_rating":
            raise AuthorizationRequired("my_rating")
        if selected == "id" and not self._id:
            raise invalid_argument("parameter `id` must contain at least one video ID")
        if self._video_category_id and selected != "chart":
            raise invalid_argument(
                "parameter `chart` must be specified when using `video_category_id`"
            )

        insert_param(params, "chart", self._chart)
        insert_params(params, "id", self._id)
        insert_param(params, "video_category_id", self._video_category_id)

        insert_param(params, "hl", self._hl)
        insert_param(params, "max_height", self._max_height)
        insert_param(params, "max_results", self._max_results)
        insert_param(params, "max_width", self._max_width)
        insert_param(params, "page_token", self._page_token)
        insert_param(params, "region_code", self._region_code)
