"""np-enhancer CLI - main application entry point."""

import asyncio
import json
from typing import Annotated

import typer

from np_enhancer import __version__
from np_enhancer.config import (
    configure_stdlib_logging,
    get_logger,
    settings,
    setup_loguru_logger,
)
from np_enhancer.infrastructure.cache import InMemoryFetchCache
from np_enhancer.infrastructure.cli.ui import command_error_handler, console, render_track
from np_enhancer.infrastructure.factories import get_current_track

logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎵 np-enhancer v{__version__} - Enrich ListenBrainz now playing with MusicBrainz",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)


@app.command(name="now-playing")
@command_error_handler
def now_playing(
    user: Annotated[str, typer.Argument(help="ListenBrainz username")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the raw JSON track record")
    ] = False,
) -> None:
    """Show what a user is listening to right now."""
    track = asyncio.run(get_current_track(user, InMemoryFetchCache()))

    if as_json:
        console.print_json(json.dumps(track.to_dict(), ensure_ascii=False))
    else:
        console.print(render_track(track))


@app.command()
def serve(
    host: Annotated[str | None, typer.Option(help="Bind address")] = None,
    port: Annotated[int | None, typer.Option(help="Bind port")] = None,
) -> None:
    """Serve the now-playing JSON endpoint over HTTP."""
    import uvicorn

    from np_enhancer.infrastructure.web import create_app

    configure_stdlib_logging()
    uvicorn.run(
        create_app(),
        host=host or settings.server.host,
        port=port or settings.server.port,
        log_config=None,
    )


@app.command(name="version")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎵 np-enhancer[/bold bright_blue] [dim]v{__version__}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize np-enhancer CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_loguru_logger(verbose)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
