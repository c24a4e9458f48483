"""
Main CLI entry point for youtube-data.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from youtube_data import __version__
from youtube_data.cli.errors import (
    display_error_panel,
    display_request_error,
    get_exit_code_for_error,
)
from youtube_data.config.settings import Settings, get_settings
from youtube_data.exceptions import YouTubeDataError
from youtube_data.models.api_responses import (
    ChannelResource,
    ListResponse,
    SearchResult,
    VideoResource,
)
from youtube_data.models.enums import (
    ChannelPart,
    Chart,
    EventType,
    Order,
    ResourceType,
    SafeSearch,
    SearchPart,
    VideoDuration,
    VideoPart,
)
from youtube_data.services.base import ListRequest
from youtube_data.services.youtube_service import YouTubeDataClient

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="youtube-data",
    help="Query the YouTube Data API v3 from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_log_handler: Optional[logging.Handler] = None


def _setup_logging(verbose: bool, log_level: str) -> None:
    """
    Attach a console handler to the ``youtube_data`` logger.

    Parameters
    ----------
    verbose : bool
        If True, log at DEBUG regardless of the configured level.
    log_level : str
        Configured level name (e.g., "WARNING").
    """
    global _log_handler

    level = logging.DEBUG if verbose else getattr(logging, log_level, logging.WARNING)
    package_logger = logging.getLogger("youtube_data")

    # Replace the handler from a previous invocation in the same process
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _log_handler = handler


def create_client(settings: Settings) -> YouTubeDataClient:
    """Create the API client used by the commands."""
    return YouTubeDataClient.from_settings(settings)


def _execute(
    build: Callable[[YouTubeDataClient], ListRequest[Any]], verbose: bool
) -> ListResponse[Any]:
    """
    Build and execute one request, exiting with an error panel on failure.

    Parameters
    ----------
    build : Callable[[YouTubeDataClient], ListRequest]
        Configures a request builder on the given client.
    verbose : bool
        Enable DEBUG logging.

    Returns
    -------
    ListResponse
        The parsed response envelope.
    """
    settings = get_settings()
    _setup_logging(verbose, settings.log_level)

    try:
        client = create_client(settings)
    except ValueError as e:
        display_error_panel(
            str(e),
            hint="Set YOUTUBE_API_KEY in the environment or in a .env file.",
            title="Configuration Error",
        )
        raise typer.Exit(get_exit_code_for_error(e))

    async def fetch() -> ListResponse[Any]:
        async with client:
            return await build(client).execute()

    try:
        return asyncio.run(fetch())
    except YouTubeDataError as e:
        logger.debug("Command failed with %s error", e.kind.value)
        display_request_error(e)
        raise typer.Exit(get_exit_code_for_error(e))


def _print_page_info(response: ListResponse[Any]) -> None:
    """Print totals and the page tokens below a result table."""
    console.print(
        f"[dim]{len(response.items)} of {response.page_info.total_results} results[/dim]"
    )
    if response.prev_page_token:
        console.print(f"Previous page: [cyan]{response.prev_page_token}[/cyan]")
    if response.next_page_token:
        console.print(f"Next page: [cyan]{response.next_page_token}[/cyan]")


def _format_count(count: Optional[int]) -> str:
    return f"{count:,}" if count is not None else "-"


def _render_channels(response: ListResponse[ChannelResource]) -> None:
    table = Table(title="Channels", show_header=True)
    table.add_column("ID", style="cyan", overflow="fold")
    table.add_column("Title", style="green")
    table.add_column("Subscribers", justify="right")
    table.add_column("Videos", justify="right")

    for channel in response.items:
        stats = channel.statistics
        table.add_row(
            channel.id,
            channel.snippet.title if channel.snippet else "",
            _format_count(stats.subscriber_count) if stats else "-",
            _format_count(stats.video_count) if stats else "-",
        )

    console.print(table)
    _print_page_info(response)


def _render_search(response: ListResponse[SearchResult]) -> None:
    table = Table(title="Search Results", show_header=True)
    table.add_column("Kind", style="yellow")
    table.add_column("ID", style="cyan", overflow="fold")
    table.add_column("Title", style="green")
    table.add_column("Channel")

    for result in response.items:
        snippet = result.snippet
        table.add_row(
            result.id.kind.removeprefix("youtube#"),
            result.id.value or "",
            snippet.title if snippet else "",
            snippet.channel_title if snippet else "",
        )

    console.print(table)
    _print_page_info(response)


def _render_videos(response: ListResponse[VideoResource]) -> None:
    table = Table(title="Videos", show_header=True)
    table.add_column("ID", style="cyan", overflow="fold")
    table.add_column("Title", style="green")
    table.add_column("Channel")
    table.add_column("Views", justify="right")

    for video in response.items:
        snippet = video.snippet
        table.add_row(
            video.id,
            snippet.title if snippet else "",
            snippet.channel_title if snippet else "",
            _format_count(video.statistics.view_count) if video.statistics else "-",
        )

    console.print(table)
    _print_page_info(response)


@app.command()
def channels(
    channel_id: Optional[str] = typer.Option(
        None, "--id", help="Comma-separated channel IDs"
    ),
    for_username: Optional[str] = typer.Option(
        None, "--for-username", help="Legacy YouTube username"
    ),
    part: Optional[list[ChannelPart]] = typer.Option(
        None, "--part", "-p", help="Resource part to request (repeatable)"
    ),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", "-n", help="Page size (0-50)"
    ),
    hl: Optional[str] = typer.Option(None, "--hl", help="Localization language"),
    page_token: Optional[str] = typer.Option(None, "--page-token", help="Page to fetch"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """List channels by ID or legacy username."""

    def build(client: YouTubeDataClient) -> ListRequest[Any]:
        request = client.channels(part or [ChannelPart.ID, ChannelPart.SNIPPET])
        if channel_id is not None:
            request.id(channel_id)
        if for_username is not None:
            request.for_username(for_username)
        if max_results is not None:
            request.max_results(max_results)
        if hl is not None:
            request.hl(hl)
        if page_token is not None:
            request.page_token(page_token)
        return request

    _render_channels(_execute(build, verbose))


@app.command()
def search(
    q: Optional[str] = typer.Option(None, "--q", "-q", help="Query term"),
    resource_type: Optional[list[ResourceType]] = typer.Option(
        None, "--type", "-t", help="Resource type to return (repeatable)"
    ),
    order: Optional[Order] = typer.Option(None, "--order", help="Result ordering"),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", "-n", help="Page size (0-50)"
    ),
    channel_id: Optional[str] = typer.Option(
        None, "--channel-id", help="Only results from this channel"
    ),
    event_type: Optional[EventType] = typer.Option(
        None, "--event-type", help="Broadcast state (requires --type video)"
    ),
    video_duration: Optional[VideoDuration] = typer.Option(
        None, "--video-duration", help="Video length bucket (requires --type video)"
    ),
    safe_search: Optional[SafeSearch] = typer.Option(
        None, "--safe-search", help="Restricted content filtering"
    ),
    published_after: Optional[datetime] = typer.Option(
        None, "--published-after", help="Only resources created after this time (UTC)"
    ),
    region_code: Optional[str] = typer.Option(
        None, "--region-code", help="Region (ISO 3166-1 alpha-2)"
    ),
    page_token: Optional[str] = typer.Option(None, "--page-token", help="Page to fetch"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Search for channels, playlists and videos."""

    def build(client: YouTubeDataClient) -> ListRequest[Any]:
        request = client.search([SearchPart.SNIPPET])
        if q is not None:
            request.q(q)
        if resource_type:
            request.resource_type(resource_type)
        if order is not None:
            request.order(order)
        if max_results is not None:
            request.max_results(max_results)
        if channel_id is not None:
            request.channel_id(channel_id)
        if event_type is not None:
            request.event_type(event_type)
        if video_duration is not None:
            request.video_duration(video_duration)
        if safe_search is not None:
            request.safe_search(safe_search)
        if published_after is not None:
            request.published_after(published_after)
        if region_code is not None:
            request.region_code(region_code)
        if page_token is not None:
            request.page_token(page_token)
        return request

    _render_search(_execute(build, verbose))


@app.command()
def videos(
    video_ids: Optional[list[str]] = typer.Option(
        None, "--id", help="Video ID (repeatable or comma-separated)"
    ),
    chart: Optional[Chart] = typer.Option(None, "--chart", help="Chart to list"),
    part: Optional[list[VideoPart]] = typer.Option(
        None, "--part", "-p", help="Resource part to request (repeatable)"
    ),
    region_code: Optional[str] = typer.Option(
        None, "--region-code", help="Chart region (ISO 3166-1 alpha-2)"
    ),
    video_category_id: Optional[str] = typer.Option(
        None, "--video-category-id", help="Chart category (requires --chart)"
    ),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", "-n", help="Page size (1-50)"
    ),
    page_token: Optional[str] = typer.Option(None, "--page-token", help="Page to fetch"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """List videos by ID or from a chart."""

    def build(client: YouTubeDataClient) -> ListRequest[Any]:
        request = client.videos(
            part or [VideoPart.ID, VideoPart.SNIPPET, VideoPart.STATISTICS]
        )
        if video_ids:
            request.id([v.strip() for raw in video_ids for v in raw.split(",") if v.strip()])
        if chart is not None:
            request.chart(chart)
        if region_code is not None:
            request.region_code(region_code)
        if video_category_id is not None:
            request.video_category_id(video_category_id)
        if max_results is not None:
            request.max_results(max_results)
        if page_token is not None:
            request.page_token(page_token)
        return request

    _render_videos(_execute(build, verbose))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]youtube-data[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    youtube-data - Query the YouTube Data API v3.

    Reads YOUTUBE_API_KEY from the environment or a .env file.
    """
    if version:
        console.print(f"youtube-data v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'youtube-data --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
