"""
Error display helpers for CLI commands.

Provides:
- Rich panel wrappers for error display
- Exit code mapping for library errors

Error Format:
    Title -> Problem -> Hint (optional)
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from youtube_data.exceptions import (
    EXIT_CODE_INVALID_ARGS,
    EXIT_CODE_REQUEST_FAILED,
    BuilderError,
    ErrorKind,
    YouTubeDataError,
)

# Module-level console for CLI error display
console = Console()


_TITLES = {
    ErrorKind.BUILDER: "Invalid Request",
    ErrorKind.TRANSPORT: "Network Error",
    ErrorKind.DECODE: "Unexpected Response",
    ErrorKind.API: "API Error",
    ErrorKind.CLIENT: "API Error",
    ErrorKind.SERVER: "API Error",
}


def get_exit_code_for_error(error: Exception) -> int:
    """
    Map an error to the CLI exit code.

    Examples
    --------
    >>> get_exit_code_for_error(InvalidParameter("bad"))
    2
    """
    if isinstance(error, (BuilderError, ValueError)):
        return EXIT_CODE_INVALID_ARGS
    return EXIT_CODE_REQUEST_FAILED


def format_error(message: str, hint: Optional[str] = None) -> str:
    """Format an error message, with an optional hint line."""
    lines = [f"Error: {message}"]
    if hint is not None:
        lines.append(f"   Hint: {hint}")
    return "\n".join(lines)


def display_error_panel(
    message: str,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """
    Display a formatted error in a red Rich panel.

    Parameters
    ----------
    message : str
        Human-readable error description.
    hint : Optional[str]
        Actionable suggestion for resolution.
    title : str
        Panel title (default: "Error").
    """
    console.print(
        Panel(
            Text(format_error(message, hint)),
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
        )
    )


def display_request_error(error: YouTubeDataError) -> None:
    """Display a library error with a title matching its kind."""
    hint = None
    if error.kind is ErrorKind.TRANSPORT:
        hint = "Check your network connection and try again."
    elif error.kind is ErrorKind.CLIENT and error.url is not None:
        hint = "Check the request parameters and the YOUTUBE_API_KEY setting."
    display_error_panel(str(error), hint=hint, title=_TITLES[error.kind])
