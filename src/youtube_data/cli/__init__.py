"""
CLI interface module for youtube-data.

Provides a Typer-based command-line interface over the channels, search and
videos list endpoints.
"""

from __future__ import annotations

__all__: list[str] = []
