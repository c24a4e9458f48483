"""
Custom exceptions for the youtube-data client.

Every error the client raises derives from ``YouTubeDataError`` and carries
a ``kind`` tag, so callers can either catch a specific subclass or branch on
``error.kind``:

- builder errors are detected while building the request and never reach
  the network;
- transport errors wrap network-level failures raised by httpx;
- decode errors mean a 2xx body could not be parsed into the envelope;
- API errors carry the structured error body of a non-2xx response.

URLs attached to errors are always redacted with ``redact_url`` first.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

import httpx

from youtube_data.models.api_errors import YouTubeErrorBody

API_KEY_PLACEHOLDER = "[API_KEY]"
_SENSITIVE_QUERY_PARAMS = frozenset({"key"})


class ErrorKind(str, Enum):
    """Tag identifying which stage of a request failed."""

    BUILDER = "builder"
    TRANSPORT = "transport"
    DECODE = "decode"
    API = "api"
    CLIENT = "client"
    SERVER = "server"


class BuilderErrorKind(str, Enum):
    """Tag identifying which request-building rule was violated."""

    INVALID_PARAMETER = "invalid_parameter"
    INCOMPATIBLE_PARAMETERS = "incompatible_parameters"
    MISSING_REQUIRED_PARAMETER = "missing_required_parameter"
    AUTHORIZATION_REQUIRED = "authorization_required"


def redact_url(url: Union[str, httpx.URL]) -> str:
    """
    Render a request URL for diagnostics without leaking the API key.

    Only the path and query are kept. The value of the ``key`` query
    parameter is replaced with ``[API_KEY]`` and the remaining parameters
    are sorted so the output is the same whatever the insertion order.

    Parameters
    ----------
    url : str | httpx.URL
        The request URL.

    Returns
    -------
    str
        ``"<path>?<k1=v1&k2=v2...>"``.

    Examples
    --------
    >>> redact_url("https://www.googleapis.com/youtube/v3/channels?part=id&key=SECRET123")
    '/youtube/v3/channels?key=[API_KEY]&part=id'
    """
    parsed = httpx.URL(url) if isinstance(url, str) else url
    pairs = sorted(
        (key, API_KEY_PLACEHOLDER if key in _SENSITIVE_QUERY_PARAMS else value)
        for key, value in parsed.params.multi_items()
    )
    query = "&".join(f"{key}={value}" for key, value in pairs)
    return f"{parsed.path}?{query}"


class YouTubeDataError(Exception):
    """
    Base exception for all youtube-data errors.

    Attributes
    ----------
    message : str
        Human-readable error message.
    kind : ErrorKind
        Stage of the request that failed.
    url : str | None
        Redacted path and query of the failed request, when one was sent.
    original_error : Exception | None
        The underlying exception, for errors that wrap one.
    """

    kind: ErrorKind = ErrorKind.BUILDER
    original_error: Optional[Exception] = None

    def __init__(
        self,
        message: str,
        url: Union[str, httpx.URL, None] = None,
    ) -> None:
        """
        Initialize YouTubeDataError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        url : str | httpx.URL | None, optional
            URL of the failed request; it is redacted before being stored.
        """
        self.message = message
        self.url: Optional[str] = redact_url(url) if url is not None else None
        super().__init__(message)

    def _with_url(self, text: str) -> str:
        if self.url is not None:
            text += f' for url ("{self.url}")'
        return text


# =============================================================================
# Builder Errors
# =============================================================================


class BuilderError(YouTubeDataError):
    """
    Raised when a request cannot be built from the configured parameters.

    These errors are raised before any network call is made.

    Examples
    --------
    >>> try:
    ...     await client.videos().execute()
    ... except BuilderError as e:
    ...     print(e.builder_kind, e.message)
    """

    kind = ErrorKind.BUILDER
    builder_kind: BuilderErrorKind = BuilderErrorKind.INVALID_PARAMETER

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f'builder error: "{self.message}"'


class InvalidParameter(BuilderError):
    """The request specifies an invalid parameter value or combination."""

    builder_kind = BuilderErrorKind.INVALID_PARAMETER


class IncompatibleParameters(BuilderError):
    """
    The request specifies two or more parameters that cannot be combined.

    Attributes
    ----------
    parameters : list[str]
        The conflicting parameter names, in declaration order.
    """

    builder_kind = BuilderErrorKind.INCOMPATIBLE_PARAMETERS

    def __init__(self, parameters: list[str]) -> None:
        self.parameters = list(parameters)
        super().__init__(
            "Incompatible parameters specified in the request: "
            + ", ".join(self.parameters)
        )


class MissingRequiredParameter(BuilderError):
    """
    The request is missing a required parameter.

    Attributes
    ----------
    expected : list[str]
        Parameters of which one must be given.
    """

    builder_kind = BuilderErrorKind.MISSING_REQUIRED_PARAMETER

    def __init__(self, expected: list[str]) -> None:
        self.expected = list(expected)
        super().__init__(
            "No filter selected. Expected one of: " + ", ".join(self.expected)
        )


class AuthorizationRequired(BuilderError):
    """
    The request uses a parameter that needs an authorized caller.

    The client only holds an API key, so parameters that refer to the
    calling user or content owner can never be sent.

    Attributes
    ----------
    parameter : str
        The parameter that requires authorization.
    """

    builder_kind = BuilderErrorKind.AUTHORIZATION_REQUIRED

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(
            f"The request uses the `{parameter}` parameter but is not properly authorized"
        )


# =============================================================================
# Transport and Decode Errors
# =============================================================================


class TransportError(YouTubeDataError):
    """
    Raised when the HTTP exchange itself fails (connection, timeout, protocol).

    The text only names the exception class: httpx messages can embed the
    full request URL, key included.

    Attributes
    ----------
    original_error : Exception | None
        The httpx exception that caused this error.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str = "transport error",
        url: Union[str, httpx.URL, None] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        self.original_error = original_error
        super().__init__(message, url=url)

    def __str__(self) -> str:
        text = self._with_url(self.message)
        if self.original_error is not None:
            text += f": {type(self.original_error).__name__}"
        return text


class ResponseDecodeError(YouTubeDataError):
    """
    Raised when a successful response body is not a valid list envelope.

    Attributes
    ----------
    original_error : Exception | None
        The JSON or validation error raised while parsing.
    """

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str = "decode error",
        url: Union[str, httpx.URL, None] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        self.original_error = original_error
        super().__init__(message, url=url)

    def __str__(self) -> str:
        text = self._with_url(self.message)
        if self.original_error is not None:
            text += f": {self.original_error}"
        return text


# =============================================================================
# API Errors
# =============================================================================


class YouTubeAPIError(YouTubeDataError):
    """
    Raised when the YouTube Data API answers with a non-2xx status.

    Attributes
    ----------
    status_code : int
        HTTP status code returned by the API.
    body : YouTubeErrorBody | None
        Parsed error body, or None when the body was not the documented shape.

    Examples
    --------
    >>> try:
    ...     await client.search().channel_id("bad").execute()
    ... except YouTubeAPIError as e:
    ...     print(e.status_code, e.error_reason)
    """

    kind = ErrorKind.API
    label = "api error"

    def __init__(
        self,
        status_code: int,
        body: Optional[YouTubeErrorBody] = None,
        url: Union[str, httpx.URL, None] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        message = body.error.message if body is not None else ""
        super().__init__(message or httpx.codes.get_reason_phrase(status_code), url=url)

    @property
    def error_reason(self) -> Optional[str]:
        """Reason of the first detail record (e.g., ``quotaExceeded``)."""
        if self.body is None or not self.body.error.errors:
            return None
        return self.body.error.errors[0].reason

    def __str__(self) -> str:
        text = self._with_url(self.label)
        if self.body is not None:
            text += f": {self.body}"
        else:
            phrase = httpx.codes.get_reason_phrase(self.status_code)
            text += f": {self.status_code} {phrase}".rstrip()
        return text


class ClientError(YouTubeAPIError):
    """The API rejected the request (4xx)."""

    kind = ErrorKind.CLIENT
    label = "client error"


class ServerError(YouTubeAPIError):
    """The API failed to process the request (5xx)."""

    kind = ErrorKind.SERVER
    label = "server error"


# Exit codes for CLI integration
EXIT_CODE_REQUEST_FAILED = 1
EXIT_CODE_INVALID_ARGS = 2
