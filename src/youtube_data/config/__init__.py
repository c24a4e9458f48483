"""
Configuration management module for youtube-data.

Handles the API key, user agent, endpoint base URL and other
environment-driven parameters.
"""

from __future__ import annotations

from youtube_data.config.settings import Settings, get_settings

__all__: list[str] = ["Settings", "get_settings"]
