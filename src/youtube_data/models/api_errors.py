"""
Pydantic models for the error body returned by the YouTube Data API.

A failed request answers with a non-2xx status and a body shaped like::

    {
        "error": {
            "code": 400,
            "message": "Request contains an invalid argument.",
            "errors": [
                {"message": "...", "domain": "global", "reason": "badRequest"}
            ],
            "status": "INVALID_ARGUMENT"
        }
    }

The string forms reproduce the upstream wording verbatim so they can be
shown to users and matched in logs.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import Field

from youtube_data.models.api_responses import BaseYouTubeModel


class YouTubeErrorDetail(BaseYouTubeModel):
    """One violation record inside an error response."""

    message: str = Field(default="", description="Violation message")
    domain: str = Field(default="", description="Error domain (e.g., youtube.parameter)")
    reason: str = Field(default="", description="Machine-readable reason")
    location: Optional[str] = Field(
        default=None, description="Offending parameter or header"
    )
    location_type: Optional[str] = Field(
        default=None, description="Kind of location (parameter, header)"
    )

    def __str__(self) -> str:
        text = (
            f'message: "{self.message}", domain: "{self.domain}", '
            f'reason: "{self.reason}"'
        )
        if self.location is not None:
            text += f', location: "{self.location}"'
        if self.location_type is not None:
            text += f', location_type: "{self.location_type}"'
        return text


class YouTubeErrorInfo(BaseYouTubeModel):
    """The object under the top-level ``error`` key."""

    code: int = Field(description="HTTP status code")
    message: str = Field(default="", description="Top-level error message")
    errors: list[YouTubeErrorDetail] = Field(
        default_factory=list, description="Per-violation detail records"
    )
    status: Optional[str] = Field(
        default=None, description="Canonical status (e.g., INVALID_ARGUMENT)"
    )

    @property
    def reasons(self) -> list[str]:
        """Reasons of every detail record, in order."""
        return [detail.reason for detail in self.errors]

    def __str__(self) -> str:
        phrase = httpx.codes.get_reason_phrase(self.code)
        text = f"{self.code} {phrase}" if phrase else str(self.code)
        if self.status is not None:
            text += f' status: "{self.status}"'
        text += f' message: "{self.message}"'
        details = ", ".join(str(detail) for detail in self.errors)
        return f"{text} [{details}]"


class YouTubeErrorBody(BaseYouTubeModel):
    """Full error response body."""

    error: YouTubeErrorInfo = Field(description="Error information")

    def __str__(self) -> str:
        return str(self.error)


__all__ = ["YouTubeErrorDetail", "YouTubeErrorInfo", "YouTubeErrorBody"]
