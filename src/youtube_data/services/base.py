"""
Base request builder for YouTube Data API list endpoints.

Provides the parameter-map helpers and the validation primitives shared by
the channels, search and videos builders. A builder is a mutable
accumulator: configuration methods store a value and return the builder,
``build_params()`` validates and serializes, and ``execute()`` sends the
request exactly once.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Iterable, Optional, Sequence, TypeVar

from pydantic.alias_generators import to_camel

from youtube_data.exceptions import (
    AuthorizationRequired,
    BuilderError,
    IncompatibleParameters,
    InvalidParameter,
    MissingRequiredParameter,
)
from youtube_data.models.api_responses import ListResponse

if TYPE_CHECKING:
    from youtube_data.services.youtube_service import YouTubeDataClient

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")

RequestParameters = dict[str, str]


def wire_name(name: str) -> str:
    """Map a snake_case parameter name to its camelCase wire key."""
    return to_camel(name)


def format_value(value: Any) -> str:
    """
    Render a single parameter value the way the API expects it.

    Enums use their wire token, booleans are lower-case and datetimes are
    RFC 3339 in UTC.
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return str(value)


def insert_param(
    params: RequestParameters, name: str, value: Any, *, key: Optional[str] = None
) -> None:
    """
    Insert a scalar parameter, skipping None and empty strings.

    Parameters
    ----------
    params : RequestParameters
        The map being built.
    name : str
        snake_case parameter name; mapped to camelCase unless ``key`` is given.
    value : Any
        The value to insert.
    key : str | None, optional
        Explicit wire key, for names that are not a plain camelCase mapping.
    """
    if value is None:
        return
    rendered = format_value(value)
    if rendered == "":
        return
    params[key or wire_name(name)] = rendered


def insert_params(
    params: RequestParameters,
    name: str,
    values: Optional[Iterable[Any]],
    *,
    key: Optional[str] = None,
) -> None:
    """Insert a list parameter as a comma-joined string, skipping empty lists."""
    if values is None:
        return
    rendered = ",".join(format_value(value) for value in values)
    if rendered == "":
        return
    params[key or wire_name(name)] = rendered


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp a documented numeric bound instead of rejecting it."""
    return max(lower, min(upper, value))


def check_filter_group(
    selectors: Sequence[tuple[str, bool]], *, required: bool
) -> Optional[str]:
    """
    Enforce a mutually exclusive filter group.

    Parameters
    ----------
    selectors : Sequence[tuple[str, bool]]
        ``(name, is_set)`` pairs in declaration order.
    required : bool
        True for exactly-one-of groups, False for zero-or-one-of groups.

    Returns
    -------
    str | None
        Name of the single selector that is set, or None if none is.

    Raises
    ------
    MissingRequiredParameter
        If ``required`` and no selector is set.
    IncompatibleParameters
        If two or more selectors are set.
    """
    chosen = [name for name, is_set in selectors if is_set]
    if len(chosen) > 1:
        raise IncompatibleParameters(chosen)
    if not chosen:
        if required:
            raise MissingRequiredParameter([name for name, _ in selectors])
        return None
    return chosen[0]


def invalid_argument(detail: str) -> InvalidParameter:
    """Build an InvalidParameter using the API's own wording."""
    return InvalidParameter(f"Request contains an invalid argument: {detail}")


class ListRequest(ABC, Generic[ItemT]):
    """
    Base class for list-endpoint request builders.

    Subclasses declare the endpoint path, the response envelope model and the
    default part, and implement ``_collect_params`` to validate their
    parameters and add them to the map.
    """

    api_path: ClassVar[str]
    response_model: ClassVar[type[ListResponse[Any]]]
    default_part: ClassVar[Enum]

    def __init__(self, client: YouTubeDataClient, part: Optional[Sequence[Enum]] = None) -> None:
        self._client = client
        self._part: list[Enum] = list(part) if part else [self.default_part]
        self._on_behalf_of_content_owner: Optional[str] = None
        self._consumed = False

    def _check_open(self) -> None:
        if self._consumed:
            raise RuntimeError(
                f"{type(self).__name__} has already been executed; build a new request"
            )

    def _set(self, attribute: str, value: Any) -> Any:
        """Store a configuration value and return the builder for chaining."""
        self._check_open()
        setattr(self, attribute, value)
        return self

    def on_behalf_of_content_owner(self, content_owner: str) -> Any:
        """Act for a YouTube content partner (requires authorization)."""
        return self._set("_on_behalf_of_content_owner", content_owner)

    @property
    def url(self) -> str:
        """Absolute endpoint URL of this request."""
        return self._client.base_url + self.api_path

    def build_params(self) -> RequestParameters:
        """
        Validate the configured parameters and produce the query map.

        Calling it again re-runs the same checks on the same state.

        Returns
        -------
        RequestParameters
            Wire parameter name to string value, ``key`` and ``part`` included.

        Raises
        ------
        BuilderError
            If the configuration violates a documented parameter constraint.
        """
        params: RequestParameters = {}
        insert_param(params, "key", self._client.api_key)
        insert_params(params, "part", self._part or [self.default_part])
        try:
            self._collect_params(params)
            if self._on_behalf_of_content_owner:
                raise AuthorizationRequired("on_behalf_of_content_owner")
        except BuilderError as e:
            logger.debug("%s rejected: %s", type(self).__name__, e)
            raise
        return params

    @abstractmethod
    def _collect_params(self, params: RequestParameters) -> None:
        """Validate endpoint parameters and insert them into ``params``."""

    async def execute(self) -> ListResponse[ItemT]:
        """
        Build, send and parse the request.

        Returns
        -------
        ListResponse[ItemT]
            The fully parsed response envelope.

        Raises
        ------
        BuilderError
            If the parameters are invalid; nothing is sent.
        TransportError, ResponseDecodeError, YouTubeAPIError
            If the exchange with the API fails.
        """
        self._check_open()
        params = self.build_params()
        self._consumed = True
        result: ListResponse[ItemT] = await self._client.get_list(
            self.api_path, params, self.response_model
        )
        return result
