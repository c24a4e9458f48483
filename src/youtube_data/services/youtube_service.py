"""
YouTube Data API client.

Holds the API key and endpoint configuration shared by every request
builder, and performs the single HTTP round trip behind each builder's
``execute()``.

Classes
-------
YouTubeDataClient
    Async client that creates request builders and sends list requests.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Optional, Sequence, TypeVar

import httpx
from pydantic import ValidationError

from youtube_data.config.settings import DEFAULT_BASE_URL, Settings, get_settings
from youtube_data.exceptions import (
    ClientError,
    ResponseDecodeError,
    ServerError,
    TransportError,
    YouTubeAPIError,
    redact_url,
)
from youtube_data.models.api_errors import YouTubeErrorBody
from youtube_data.models.api_responses import ListResponse
from youtube_data.models.enums import ChannelPart, SearchPart, VideoPart
from youtube_data.services.base import RequestParameters
from youtube_data.services.channels import ChannelListRequest
from youtube_data.services.search import SearchListRequest
from youtube_data.services.videos import VideoListRequest

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=ListResponse[Any])

_REQUEST_TIMEOUT_SECONDS = 30.0


class YouTubeDataClient:
    """
    Async client for the YouTube Data API v3 list endpoints.

    The client is read-only after construction, so any number of builders
    may be created from it and executed concurrently.

    Parameters
    ----------
    api_key : str
        API key sent as the ``key`` query parameter.
    user_agent : str | None, optional
        Value of the ``User-Agent`` header (default: httpx's own).
    base_url : str, optional
        Endpoint base; paths such as ``channels`` are appended to it.
    timeout : float, optional
        Request timeout in seconds (default: 30.0).
    http_client : httpx.AsyncClient | None, optional
        Client to send requests with. When given, the caller owns it and
        ``aclose()`` leaves it open.

    Examples
    --------
    >>> async with YouTubeDataClient(api_key="...") as client:
    ...     response = await client.videos().id(["dQw4w9WgXcQ"]).execute()
    ...     print(response.items[0].id)
    """

    def __init__(
        self,
        api_key: str,
        user_agent: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = _REQUEST_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self._api_key = api_key
        self._user_agent = user_agent
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = timeout
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> YouTubeDataClient:
        """
        Build a client from application settings.

        Parameters
        ----------
        settings : Settings | None, optional
            Settings to use (default: loaded from the environment).
        http_client : httpx.AsyncClient | None, optional
            Client to send requests with.

        Raises
        ------
        ValueError
            If no API key is configured.
        """
        settings = settings or get_settings()
        return cls(
            api_key=settings.youtube_api_key,
            user_agent=settings.user_agent,
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    @property
    def api_key(self) -> str:
        """API key sent with every request."""
        return self._api_key

    @property
    def base_url(self) -> str:
        """Endpoint base URL, always ending with '/'."""
        return self._base_url

    @property
    def user_agent(self) -> Optional[str]:
        return self._user_agent

    # -- builders -----------------------------------------------------------

    def channels(self, part: Optional[Sequence[ChannelPart]] = None) -> ChannelListRequest:
        """Start a channels.list request (default part: ``id``)."""
        return ChannelListRequest(self, part)

    def search(self, part: Optional[Sequence[SearchPart]] = None) -> SearchListRequest:
        """Start a search.list request (default part: ``snippet``)."""
        return SearchListRequest(self, part)

    def videos(self, part: Optional[Sequence[VideoPart]] = None) -> VideoListRequest:
        """Start a videos.list request (default part: ``id``)."""
        return VideoListRequest(self, part)

    # -- transport ----------------------------------------------------------

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        return headers

    async def get_list(
        self,
        path: str,
        params: RequestParameters,
        model: type[ResponseT],
    ) -> ResponseT:
        """
        Send a GET request to a list endpoint and parse the envelope.

        Parameters
        ----------
        path : str
            Endpoint path relative to ``base_url`` (e.g., ``"videos"``).
        params : RequestParameters
            Validated query parameters, ``key`` included.
        model : type[ListResponse]
            Envelope model to parse a successful body into.

        Returns
        -------
        ListResponse
            The parsed envelope.

        Raises
        ------
        TransportError
            If the request could not be sent or no response was received.
        ClientError
            If the API answered with a 4xx status.
        ServerError
            If the API answered with a 5xx status.
        ResponseDecodeError
            If a successful body is not a valid envelope.
        """
        url = httpx.URL(self._base_url + path, params=params)
        redacted = redact_url(url)
        logger.debug("GET %s", redacted)

        try:
            response = await self._get_http_client().get(
                url, headers=self._headers(), timeout=self._timeout
            )
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", redacted, type(e).__name__)
            raise TransportError(url=url, original_error=e) from e

        if not response.is_success:
            raise self._api_error(response, url)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "Could not decode %s response from %s", model.__name__, redacted
            )
            raise ResponseDecodeError(url=url, original_error=e) from e

    def _api_error(self, response: httpx.Response, url: httpx.URL) -> YouTubeAPIError:
        """Map a non-2xx response onto the matching API error."""
        body: Optional[YouTubeErrorBody]
        try:
            body = YouTubeErrorBody.model_validate_json(response.content)
        except ValidationError:
            body = None

        error_cls: type[YouTubeAPIError] = YouTubeAPIError
        if response.is_client_error:
            error_cls = ClientError
        elif response.is_server_error:
            error_cls = ServerError

        error = error_cls(response.status_code, body=body, url=url)
        logger.warning("%s (reason: %s)", error, error.error_reason)
        return error

    # -- lifecycle ----------------------------------------------------------

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> YouTubeDataClient:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"YouTubeDataClient(base_url={self._base_url!r})"
