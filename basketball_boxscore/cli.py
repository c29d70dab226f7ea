"""CLI entrypoint using Typer.

Thin front end over the normalization core for local JSON files: normalize
a provider feed to canonical JSON, check which feed a source maps to, and
report consistency problems in a box score.

Example:
    $ basketball-boxscore --help
    $ basketball-boxscore normalize boxscore.json --feed nba
    $ basketball-boxscore validate boxscore.json --source https://live.euroleague.net/api/Boxscore
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from basketball_boxscore import __version__
from basketball_boxscore.config import get_settings
from basketball_boxscore.derived import shooting_percentage
from basketball_boxscore.feeds import (
    detect_feed_kind,
    normalize_box_score,
    normalize_from_source,
)
from basketball_boxscore.logging import FAIL, SUCCESS, get_logger, setup_logging
from basketball_boxscore.models import BoxScore
from basketball_boxscore.types import BoxScoreError
from basketball_boxscore.validation import BoxScoreValidator

# Initialize console for rich output
console = Console()
logger = get_logger(__name__)

app = typer.Typer(
    name="basketball-boxscore",
    help="Normalize NBA and Euroleague box score feeds",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(
            f"[bold blue]basketball-boxscore[/bold blue] version {__version__}"
        )
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """Basketball box score normalizer.

    Reads NBA or Euroleague box score JSON and writes the canonical,
    provider-independent box score.
    """
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(
        level=log_level,
        log_dir=settings.log_dir_obj,
        serialize=settings.log_serialize,
    )


# =============================================================================
# Helpers
# =============================================================================


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(1)


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        raise _fail(f"File not found: {path}") from None
    except json.JSONDecodeError as e:
        raise _fail(f"Invalid JSON in {path}: {e}") from None
    except UnicodeDecodeError as e:
        raise _fail(f"Not UTF-8 text: {path} ({e.reason})") from None
    except OSError as e:
        raise _fail(f"Cannot read {path}: {e.strerror or e}") from None


def _load_box_score(path: Path, feed: str | None, source: str | None) -> BoxScore:
    """Read a payload file and normalize it with the requested feed kind."""
    if feed and source:
        raise _fail("Use either --feed or --source, not both")

    raw = _read_json(path)
    try:
        if source:
            return normalize_from_source(raw, source)
        return normalize_box_score(raw, feed or get_settings().default_feed_kind)
    except BoxScoreError as e:
        logger.error(f"{FAIL} Could not normalize {path}: {e}")
        raise _fail(str(e)) from None


FeedOption = Annotated[
    str | None,
    typer.Option(
        "--feed",
        "-f",
        help="Feed kind: nba, euroleague or generic",
    ),
]
SourceOption = Annotated[
    str | None,
    typer.Option(
        "--source",
        "-s",
        help="Source URL or label to detect the feed kind from",
    ),
]


# =============================================================================
# Commands
# =============================================================================


@app.command("normalize")
def normalize(
    path: Annotated[Path, typer.Argument(help="Raw box score JSON file")],
    feed: FeedOption = None,
    source: SourceOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write canonical JSON here instead of stdout",
        ),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option(
            "--indent",
            help="JSON indentation (0 for compact output)",
            min=0,
            max=8,
        ),
    ] = None,
) -> None:
    """Normalize a raw feed file to canonical box score JSON."""
    box = _load_box_score(path, feed, source)

    if indent is None:
        indent = get_settings().json_indent
    text = box.model_dump_json(by_alias=True, indent=indent or None)

    if output is None:
        typer.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    logger.info(f"{SUCCESS} Normalized {path} to {output}")
    console.print(f"[green]Wrote canonical box score to {output}[/green]")


@app.command("detect")
def detect(
    source: Annotated[str, typer.Argument(help="Source URL or label")],
) -> None:
    """Show which feed kind a source identifier maps to."""
    kind = detect_feed_kind(source)
    console.print(f"[bold]Feed kind:[/bold] {kind.value}")


@app.command("validate")
def validate(
    path: Annotated[Path, typer.Argument(help="Raw box score JSON file")],
    feed: FeedOption = None,
    source: SourceOption = None,
) -> None:
    """Normalize a feed file and report consistency problems."""
    box = _load_box_score(path, feed, source)
    result = BoxScoreValidator().validate(box)

    if box.is_live:
        status = "live"
    elif box.is_finished:
        status = "final"
    else:
        status = "pre-game"

    table = Table(title=f"Box score ({status})")
    table.add_column("Team", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Players", justify="right")
    table.add_column("FG%", justify="right")
    table.add_column("3P%", justify="right")
    table.add_column("FT%", justify="right")

    for team in box.teams:
        totals = team.totals
        table.add_row(
            escape(team.name),
            str(team.score),
            str(len(team.players)),
            f"{totals.fg_pct:.1f}" if totals else "-",
            f"{totals.three_pct:.1f}" if totals else "-",
            f"{totals.ft_pct:.1f}" if totals else "-",
        )
    console.print(table)

    for error in result.errors:
        console.print(f"  [red]- {escape(error)}[/red]")
    for warning in result.warnings:
        console.print(f"  [yellow]- {escape(warning)}[/yellow]")

    if not result.valid:
        console.print(
            Panel(
                f"{len(result.errors)} errors, {len(result.warnings)} warnings",
                title="[red]Invalid[/red]",
            )
        )
        raise typer.Exit(1)

    console.print(
        f"[green]Valid[/green] ({len(result.warnings)} warnings)"
    )


@app.command("pct")
def pct(
    made: Annotated[int, typer.Argument(help="Shots made")],
    attempted: Annotated[int, typer.Argument(help="Shots attempted")],
) -> None:
    """Print a shooting percentage rounded to one decimal."""
    try:
        value = shooting_percentage(made, attempted)
    except ValueError as e:
        raise _fail(str(e)) from None
    console.print(f"{value:.1f}")


if __name__ == "__main__":
    app()
