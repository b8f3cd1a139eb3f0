"""Render CLI command -- write an interactive HTML heatmap."""

import webbrowser
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import HeatmapError
from ..logging_config import setup_logging
from ..models import load_report
from ..visualization import write_page
from . import app
from ._common import console, format_seconds, resolve_config


@app.command()
def render(
    report_file: Path = typer.Argument(
        ...,
        help="Profile report (JSON) to render",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        Path("code-heatmap.html"),
        "--output",
        "-o",
        help="Output HTML file path",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Source language used for syntax highlighting",
    ),
    open_browser: bool = typer.Option(
        False,
        "--open",
        help="Open the written page in a web browser",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Render a profile report as a self-contained HTML heatmap.

    Each source line is shaded by the time it consumed; hover a line to see
    its time, share of the total run and execution count.

    [bold cyan]Examples:[/bold cyan]

      code-heatmap render profile.json

      code-heatmap render profile.json --output heatmap.html --open
    """
    try:
        settings = resolve_config(config=config, language=language, verbose=verbose)
    except HeatmapError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger = setup_logging(settings.verbosity)

    try:
        report = load_report(report_file)
        page_path = write_page(report, output, settings)
    except HeatmapError as e:
        logger.debug("Render failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except OSError as e:
        logger.debug("Writing page failed", exc_info=True)
        console.print(f"[red]Error:[/red] cannot write {escape(str(output))}: {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"Rendered {len(report.files)} file(s), total run time "
        f"{format_seconds(report.total_run_time)}"
    )
    console.print(f"Heatmap saved to: [bold green]{page_path}[/bold green]")

    if open_browser:
        webbrowser.open(Path(page_path).as_uri())
