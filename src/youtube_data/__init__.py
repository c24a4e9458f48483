"""
youtube-data - Typed async client for the YouTube Data API v3.

Builds validated list requests for the channels, search and videos
endpoints and parses the responses into pydantic models.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "youtube-data"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__license__"]
