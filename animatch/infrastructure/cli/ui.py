"""UI helpers for CLI interaction.

Keeps presentation (Rich tables, error display) separate from matching logic.
"""

from collections.abc import Callable
import functools

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from animatch.config import get_logger
from animatch.domain.entities import MediaRecord
from animatch.domain.matching import MatchResult

console = Console()
logger = get_logger(__name__)


def command_error_handler[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs unexpected errors with Loguru, prints a short Rich message and
    converts them to ``typer.Exit(code=1)``.
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
                console.print(f"[bold red]✗ Error during {operation}:[/bold red] {escape(str(e))}")
                raise typer.Exit(code=1) from e

    return wrapper


def render_match_table(match: MatchResult[MediaRecord]) -> Table:
    """Build a two-column table describing a match."""
    record = match.result
    table = Table(title="Best match", show_header=False, title_style="bold green")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Method", f"{match.method.value} (tier {match.method.rank})")
    table.add_row("Similarity", f"{match.similarity:.4f}")
    table.add_row(
        "Matched title" if match.title is not None else "Normalized title",
        match.matched_title or "",
    )
    if match.year is not None:
        table.add_row("Year", str(match.year))
    if match.episodes is not None:
        table.add_row("Episodes", str(match.episodes))

    table.add_row("Record id", "" if record.id is None else str(record.id))
    for title in record.titles:
        table.add_row("Title", title)
    return table
