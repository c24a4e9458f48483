"""
Tests for the upstream error body models.
"""

from __future__ import annotations

from typing import Any

from youtube_data.models.api_errors import (
    YouTubeErrorBody,
    YouTubeErrorDetail,
    YouTubeErrorInfo,
)


class TestYouTubeErrorBody:
    """Test parsing and rendering error bodies."""

    def test_parses_body(self, error_payload: dict[str, Any]) -> None:
        body = YouTubeErrorBody.model_validate(error_payload)

        assert body.error.code == 400
        assert body.error.status == "INVALID_ARGUMENT"
        assert body.error.reasons == ["badRequest"]

    def test_str_reproduces_upstream_wording(
        self, error_payload: dict[str, Any]
    ) -> None:
        body = YouTubeErrorBody.model_validate(error_payload)

        assert str(body) == (
            '400 Bad Request status: "INVALID_ARGUMENT" '
            'message: "Request contains an invalid argument." '
            '[message: "Request contains an invalid argument.", '
            'domain: "global", reason: "badRequest"]'
        )

    def test_str_joins_every_detail(self) -> None:
        info = YouTubeErrorInfo(
            code=403,
            message="quota",
            errors=[
                YouTubeErrorDetail(message="a", domain="youtube.quota", reason="quotaExceeded"),
                YouTubeErrorDetail(message="b", domain="usageLimits", reason="dailyLimitExceeded"),
            ],
        )

        assert str(info) == (
            '403 Forbidden message: "quota" '
            '[message: "a", domain: "youtube.quota", reason: "quotaExceeded", '
            'message: "b", domain: "usageLimits", reason: "dailyLimitExceeded"]'
        )

    def test_detail_location(self) -> None:
        detail = YouTubeErrorDetail.model_validate(
            {
                "message": "Invalid value",
                "domain": "youtube.parameter",
                "reason": "invalidParameter",
                "location": "type",
                "locationType": "parameter",
            }
        )

        assert detail.location_type == "parameter"
        assert str(detail) == (
            'message: "Invalid value", domain: "youtube.parameter", '
            'reason: "invalidParameter", location: "type", '
            'location_type: "parameter"'
        )

    def test_body_without_details(self) -> None:
        body = YouTubeErrorBody.model_validate(
            {"error": {"code": 500, "message": "Backend Error"}}
        )

        assert body.error.errors == []
        assert str(body) == '500 Internal Server Error message: "Backend Error" []'
