"""UI helpers for CLI interaction.

Keeps presentation (Rich rendering, error display) separate from the
resolution logic the commands invoke.
"""

from collections.abc import Callable
import functools

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
import typer

from np_enhancer.config import get_logger
from np_enhancer.domain.entities import Track

# Initialize console and logger
console = Console()
logger = get_logger(__name__)


def command_error_handler[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs failures with Loguru, prints a short Rich message and converts the
    exception into a non-zero ``typer.Exit``.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except (typer.Exit, typer.Abort):
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def render_track(track: Track) -> Panel:
    """Render a Track as a Rich panel."""
    status = "[green]matched[/green]" if track.matched else "[yellow]unmatched[/yellow]"

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Track", track.name)
    table.add_row("Recording", track.mbid or "[dim]-[/dim]")
    table.add_row("Release", track.release.name or "[dim]-[/dim]")
    table.add_row("Release MBID", track.release.mbid or "[dim]-[/dim]")

    credited = "".join(
        artist.name + (artist.join_phrase if i < len(track.artists) - 1 else "")
        for i, artist in enumerate(track.artists)
    )
    table.add_row("Artists", credited)

    return Panel(table, title=f"🎵 Now playing ({status})", expand=False)
