"""
Application settings and configuration management.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="WARNING")

    # YouTube API
    youtube_api_key: str = Field(default="")
    user_agent: Optional[str] = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL)

    # Performance
    request_timeout: float = Field(default=30.0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are joined onto the base, so it must end with '/'."""
        return v if v.endswith("/") else v + "/"

    @field_validator("user_agent", mode="before")
    @classmethod
    def blank_user_agent_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty USER_AGENT variable as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
