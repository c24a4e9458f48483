"""
Request builder for the channels.list endpoint.

https://developers.google.com/youtube/v3/docs/channels/list
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from youtube_data.exceptions import AuthorizationRequired
from youtube_data.models.api_responses import ChannelListResponse, ChannelResource
from youtube_data.models.enums import ChannelPart
from youtube_data.services.base import (
    ListRequest,
    RequestParameters,
    check_filter_group,
    clamp,
    insert_param,
    invalid_argument,
)

if TYPE_CHECKING:
    from youtube_data.services.youtube_service import YouTubeDataClient

MAX_RESULTS_LOWER = 0
MAX_RESULTS_UPPER = 50


class ChannelListRequest(ListRequest[ChannelResource]):
    """
    Builder for channels.list.

    Exactly one filter must be given: ``for_username``, ``id``,
    ``managed_by_me`` or ``mine``. The last two need an authorized user and
    are always rejected by this key-only client.

    Examples
    --------
    >>> response = await client.channels([ChannelPart.SNIPPET]).id("UC_x5XG1OV2P6uZZ5FSM9Ttw").execute()
    >>> response.items[0].snippet.title
    'Google for Developers'
    """

    api_path: ClassVar[str] = "channels"
    response_model = ChannelListResponse
    default_part = ChannelPart.ID

    def __init__(
        self, client: YouTubeDataClient, part: Optional[Sequence[ChannelPart]] = None
    ) -> None:
        super().__init__(client, part)
        # filters (exactly one)
        self._for_username: Optional[str] = None
        self._id: Optional[str] = None
        self._managed_by_me: Optional[bool] = None
        self._mine: Optional[bool] = None
        # optional parameters
        self._hl: Optional[str] = None
        self._max_results: Optional[int] = None
        self._page_token: Optional[str] = None

    def part(self, *part: ChannelPart) -> ChannelListRequest:
        """Replace the requested resource parts."""
        return self._set("_part", list(part))

    def for_username(self, for_username: str) -> ChannelListRequest:
        """Select the channel of a legacy YouTube username."""
        return self._set("_for_username", for_username)

    def id(self, id: str) -> ChannelListRequest:
        """Select channels by a comma-separated list of channel IDs."""
        return self._set("_id", id)

    def managed_by_me(self, managed_by_me: bool = True) -> ChannelListRequest:
        """Select channels managed by the content owner (requires authorization)."""
        return self._set("_managed_by_me", managed_by_me)

    def mine(self, mine: bool = True) -> ChannelListRequest:
        """Select the authorized user's channels (requires authorization)."""
        return self._set("_mine", mine)

    def hl(self, hl: str) -> ChannelListRequest:
        """Request localized snippet text in an application language."""
        return self._set("_hl", hl)

    def max_results(self, max_results: int) -> ChannelListRequest:
        """Set the page size, clamped to 0..50."""
        return self._set(
            "_max_results", clamp(max_results, MAX_RESULTS_LOWER, MAX_RESULTS_UPPER)
        )

    def page_token(self, page_token: str) -> ChannelListRequest:
        """Select a page using a token from a previous response."""
        return self._set("_page_token", page_token)

    def _collect_params(self, params: RequestParameters) -> None:
        selected = check_filter_group(
            [
                ("for_username", self._for_username is not None),
                ("id", self._id is not None),
                ("managed_by_me", self._managed_by_me is not None),
                ("mine", self._mine is not None),
            ],
            required=True,
        )
        if selected in ("managed_by_me", "mine"):
            raise AuthorizationRequired(selected)
        if selected in ("for_username", "id") and not getattr(self, f"_{selected}"):
            raise invalid_argument(f"parameter `{selected}` must not be empty")

        insert_param(params, "for_username", self._for_username)
        insert_param(params, "id", self._id)

        insert_param(params, "hl", self._hl)
        insert_param(params, "max_results", self._max_results)
        insert_param(params, "page_token", self._page_token)
