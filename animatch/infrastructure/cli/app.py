"""Animatch CLI - main application entry point."""

from enum import StrEnum
import json
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from animatch import __version__
from animatch.config import get_logger, settings, setup_loguru_logger
from animatch.domain.entities import MediaRecord
from animatch.domain.matching import (
    MatchThresholds,
    clean_title,
    find_best_match,
    jaro_winkler_distance,
    sanitize_title,
)
from animatch.infrastructure.catalog import load_catalog
from animatch.infrastructure.cli.ui import command_error_handler, render_match_table

console = Console()
logger = get_logger(__name__)


class OutputFormat(StrEnum):
    """Output formats for match results."""

    TABLE = "table"
    JSON = "json"


app = typer.Typer(
    help=f"Animatch v{__version__} - resolve anime titles against a catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize Animatch CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_loguru_logger(verbose)


@app.command(name="match", rich_help_panel="Matching")
@command_error_handler
def match_command(
    title: Annotated[str, typer.Argument(help="Title to resolve")],
    catalog: Annotated[
        Path,
        typer.Option("--catalog", "-c", help="JSON catalog of candidate records"),
    ],
    year: Annotated[
        int | None, typer.Option("--year", "-y", help="Release year")
    ] = None,
    episodes: Annotated[
        int | None, typer.Option("--episodes", "-e", help="Episode count")
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Find the catalog record that best matches a title."""
    candidates = load_catalog(catalog)
    query = MediaRecord.from_string_title(title, year=year, episodes=episodes)
    match = find_best_match(query, candidates)

    if match is None:
        if output_format is OutputFormat.JSON:
            typer.echo(json.dumps(None))
        else:
            console.print(f"[yellow]No match found for[/yellow] {escape(repr(title))}")
        raise typer.Exit(code=1)

    if output_format is OutputFormat.JSON:
        typer.echo(
            json.dumps(
                match.as_dict(MediaRecord.as_dict), indent=2, ensure_ascii=False
            )
        )
    else:
        console.print(render_match_table(match))


@app.command(name="normalize", rich_help_panel="Matching")
def normalize_command(
    title: Annotated[str, typer.Argument(help="Title to normalize")],
) -> None:
    """Show the cleaned and sanitized forms of a title."""
    table = Table(show_header=False)
    table.add_column("Form", style="cyan")
    table.add_column("Value")
    table.add_row("Clean", clean_title(title) or "")
    table.add_row("Sanitize", sanitize_title(title) or "")
    console.print(table)


@app.command(name="score", rich_help_panel="Matching")
def score_command(
    first: Annotated[str, typer.Argument(help="First title")],
    second: Annotated[str, typer.Argument(help="Second title")],
    prefix_scale: Annotated[
        float | None,
        typer.Option("--prefix-scale", "-p", help="Winkler prefix scale (0-0.25)"),
    ] = None,
    sanitize: Annotated[
        bool,
        typer.Option("--sanitize/--raw", help="Sanitize both titles before scoring"),
    ] = True,
) -> None:
    """Print the Jaro-Winkler similarity of two titles."""
    if sanitize:
        first, second = sanitize_title(first) or "", sanitize_title(second) or ""
    scale = settings.matching.prefix_scale if prefix_scale is None else prefix_scale
    console.print(f"{jaro_winkler_distance(first, second, scale):.4f}")


@app.command(name="thresholds", rich_help_panel="System")
def thresholds_command() -> None:
    """Show the configured similarity thresholds."""
    thresholds = MatchThresholds()
    table = Table(title="Fuzzy tier thresholds")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("loose", f"{thresholds.loose:.2f}")
    table.add_row("last_resort", f"{thresholds.last_resort:.2f}")
    table.add_row("minimum", f"{thresholds.minimum:.2f}")
    table.add_row("prefix_scale", f"{thresholds.prefix_scale:.2f}")
    console.print(table)


@app.command(name="version", rich_help_panel="System")
def version_command() -> None:
    """Show version information."""
    console.print(f"[bold bright_blue]Animatch[/bold bright_blue] [dim]v{__version__}[/dim]")


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
