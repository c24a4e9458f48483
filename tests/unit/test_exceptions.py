"""
Tests for the youtube-data exception hierarchy.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from youtube_data.exceptions import (
    API_KEY_PLACEHOLDER,
    AuthorizationRequired,
    BuilderError,
    BuilderErrorKind,
    ClientError,
    ErrorKind,
    IncompatibleParameters,
    InvalidParameter,
    MissingRequiredParameter,
    ResponseDecodeError,
    ServerError,
    TransportError,
    YouTubeAPIError,
    YouTubeDataError,
    redact_url,
)
from youtube_data.models.api_errors import YouTubeErrorBody


class TestRedactUrl:
    """Test API key redaction."""

    def test_key_is_replaced(self) -> None:
        redacted = redact_url(
            "https://www.googleapis.com/youtube/v3/channels?part=id&key=SECRET123"
        )

        assert redacted == "/youtube/v3/channels?key=[API_KEY]&part=id"
        assert "SECRET123" not in redacted

    def test_pairs_are_sorted(self) -> None:
        redacted = redact_url(
            "https://www.googleapis.com/youtube/v3/search"
            "?part=snippet&type=channel,playlist,video&key=k&channelId=UC1"
        )

        assert redacted == (
            "/youtube/v3/search?channelId=UC1&key=[API_KEY]"
            "&part=snippet&type=channel,playlist,video"
        )

    def test_accepts_httpx_url(self) -> None:
        url = httpx.URL(
            "https://www.googleapis.com/youtube/v3/videos",
            params={"key": "SECRET", "id": "a,b"},
        )

        assert redact_url(url) == f"/youtube/v3/videos?id=a,b&key={API_KEY_PLACEHOLDER}"


class TestBuilderErrors:
    """Test builder error kinds and messages."""

    def test_invalid_parameter(self) -> None:
        error = InvalidParameter("bad value")

        assert isinstance(error, BuilderError)
        assert isinstance(error, YouTubeDataError)
        assert error.kind is ErrorKind.BUILDER
        assert error.builder_kind is BuilderErrorKind.INVALID_PARAMETER
        assert str(error) == 'builder error: "bad value"'

    def test_incompatible_parameters(self) -> None:
        error = IncompatibleParameters(["for_username", "id"])

        assert error.parameters == ["for_username", "id"]
        assert error.builder_kind is BuilderErrorKind.INCOMPATIBLE_PARAMETERS
        assert error.message == (
            "Incompatible parameters specified in the request: for_username, id"
        )

    def test_missing_required_parameter(self) -> None:
        error = MissingRequiredParameter(["chart", "id", "my_rating"])

        assert error.builder_kind is BuilderErrorKind.MISSING_REQUIRED_PARAMETER
        assert str(error) == (
            'builder error: "No filter selected. Expected one of: chart, id, my_rating"'
        )

    def test_authorization_required(self) -> None:
        error = AuthorizationRequired("for_mine")

        assert error.parameter == "for_mine"
        assert error.builder_kind is BuilderErrorKind.AUTHORIZATION_REQUIRED
        assert error.message == (
            "The request uses the `for_mine` parameter but is not properly authorized"
        )

    def test_builder_errors_have_no_url(self) -> None:
        assert InvalidParameter("x").url is None


class TestTransportAndDecodeErrors:
    """Test errors raised around the HTTP exchange."""

    def test_transport_error_hides_original_message(self) -> None:
        original = httpx.ConnectError("failed to connect to host?key=SECRET")
        error = TransportError(
            url="https://www.googleapis.com/youtube/v3/videos?key=SECRET&part=id",
            original_error=original,
        )

        assert error.kind is ErrorKind.TRANSPORT
        assert "SECRET" not in str(error)
        assert str(error) == (
            'transport error for url ("/youtube/v3/videos?key=[API_KEY]&part=id"): '
            "ConnectError"
        )

    def test_decode_error(self) -> None:
        error = ResponseDecodeError(
            url="https://www.googleapis.com/youtube/v3/videos?key=SECRET&part=id",
            original_error=ValueError("boom"),
        )

        assert error.kind is ErrorKind.DECODE
        assert str(error).startswith('decode error for url ("/youtube/v3/videos?')
        assert str(error).endswith(": boom")


class TestAPIErrors:
    """Test errors for non-2xx responses."""

    @pytest.fixture
    def body(self, error_payload: dict[str, Any]) -> YouTubeErrorBody:
        return YouTubeErrorBody.model_validate(error_payload)

    def test_client_error_display(self, body: YouTubeErrorBody) -> None:
        error = ClientError(
            400,
            body=body,
            url=(
                "https://www.googleapis.com/youtube/v3/search?part=snippet"
                "&type=channel,playlist,video&channelId=UC1&key=SECRET"
            ),
        )

        assert isinstance(error, YouTubeAPIError)
        assert error.kind is ErrorKind.CLIENT
        assert error.status_code == 400
        assert error.error_reason == "badRequest"
        assert error.message == "Request contains an invalid argument."
        assert str(error) == (
            'client error for url ("/youtube/v3/search?channelId=UC1&key=[API_KEY]'
            '&part=snippet&type=channel,playlist,video"): 400 Bad Request '
            'status: "INVALID_ARGUMENT" message: "Request contains an invalid argument." '
            '[message: "Request contains an invalid argument.", domain: "global", '
            'reason: "badRequest"]'
        )

    def test_other_status_has_api_kind(self) -> None:
        error = YouTubeAPIError(304)

        assert error.kind is ErrorKind.API
        assert str(error) == "api error: 304 Not Modified"

    def test_server_error_without_body(self) -> None:
        error = ServerError(503)

        assert error.kind is ErrorKind.SERVER
        assert error.body is None
        assert error.error_reason is None
        assert error.message == "Service Unavailable"
        assert str(error) == "server error: 503 Service Unavailable"
