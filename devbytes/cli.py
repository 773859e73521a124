"""CLI for the DevBytes video cache."""

import asyncio
import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from devbytes.core.config import Settings, get_settings_with_yaml
from devbytes.core.exceptions import DevBytesError
from devbytes.core.http_session import create_client
from devbytes.core.logging_config import setup_logging
from devbytes.core.models import Video
from devbytes.database import InMemoryVideoStore, MongoVideoStore, VideoStore, as_domain_model
from devbytes.network import DevByteService
from devbytes.repository import VideosRepository

app = typer.Typer(help="DevBytes - keep the DevBytes playlist cached offline")
console = Console()


def _load_settings(config: Path | None, verbose: bool) -> Settings:
    settings = get_settings_with_yaml(config)
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_path)
    return settings


@asynccontextmanager
async def _open_store(settings: Settings, no_db: bool) -> AsyncGenerator[VideoStore, None]:
    """Open the configured store, or a throwaway in-memory one."""
    if no_db:
        yield InMemoryVideoStore()
        return

    async with MongoVideoStore(settings) as store:
        yield store


async def _refresh(settings: Settings, no_db: bool) -> list[Video]:
    async with create_client(
        base_url=settings.devbytes_base_url,
        timeout=settings.http_timeout,
    ) as http:
        async with _open_store(settings, no_db) as store:
            repository = VideosRepository(store, DevByteService(http))
            await repository.refresh_videos()
            return repository.videos.value or []


async def _cached(settings: Settings) -> list[Video]:
    async with MongoVideoStore(settings) as store:
        return as_domain_model(store.get_live_videos().value or [])


@app.command()
def refresh(
    no_db: bool = typer.Option(False, help="Keep the cache in memory instead of MongoDB"),
    config: Path | None = typer.Option(None, help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
):
    """Fetch the playlist and update the local cache."""
    settings = _load_settings(config, verbose)

    try:
        videos = asyncio.run(_refresh(settings, no_db))
    except DevBytesError as e:
        rprint(f"[red]✗ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    rprint(f"[green]✓ Cache refreshed ({len(videos)} videos)[/green]")
    _display_videos(videos)


@app.command()
def videos(
    as_json: bool = typer.Option(False, "--json", help="Print videos as JSON"),
    config: Path | None = typer.Option(None, help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
):
    """List cached videos without touching the network."""
    settings = _load_settings(config, verbose)

    try:
        cached = asyncio.run(_cached(settings))
    except DevBytesError as e:
        rprint(f"[red]✗ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if as_json:
        console.print_json(json.dumps([video.to_dict() for video in cached]))
        return

    if not cached:
        rprint("[yellow]No cached videos. Run 'devbytes refresh' first.[/yellow]")
        return

    _display_videos(cached)


def _display_videos(videos: list[Video]):
    """Display videos as a table."""
    table = Table(title="DevBytes")
    table.add_column("Title", style="cyan")
    table.add_column("Updated", style="dim")
    table.add_column("Description", style="white")

    for video in videos:
        table.add_row(
            escape(video.title),
            video.updated,
            escape(video.short_description),
        )

    console.print(table)


def main():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
