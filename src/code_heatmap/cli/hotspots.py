"""Hotspots CLI command -- table of the most expensive lines."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..exceptions import HeatmapError
from ..hotspots import hottest_lines
from ..logging_config import setup_logging
from ..models import load_report
from . import app
from ._common import console, format_seconds


@app.command()
def hotspots(
    report_file: Path = typer.Argument(
        ...,
        help="Profile report (JSON) to inspect",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    top: int = typer.Option(
        10,
        "--top",
        "-n",
        help="Number of lines to show",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """
    Print the lines that consumed the most time.

    [bold cyan]Examples:[/bold cyan]

      code-heatmap hotspots profile.json --top 20
    """
    logger = setup_logging("verbose" if verbose else "normal")

    try:
        report = load_report(report_file)
    except HeatmapError as e:
        logger.debug("Loading report failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    lines = hottest_lines(report, limit=top)
    if not lines:
        console.print("[yellow]No executed lines in report.[/yellow]")
        return

    table = Table(title=f"Hottest lines (total {format_seconds(report.total_run_time)})")
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Line", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Source", overflow="ellipsis", no_wrap=True)

    for hotspot in lines:
        table.add_row(
            Text(hotspot.file),
            str(hotspot.line_number),
            format_seconds(hotspot.run_time),
            f"{hotspot.percentage:.1f}",
            str(hotspot.run_count),
            Text(hotspot.source),
            style="red" if hotspot.percentage >= 10 else None,
        )

    console.print(table)
