"""CLI entry point -- registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="code-heatmap",
    help="code-heatmap - per-line execution profile heatmaps",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"code-heatmap {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Render profiler line reports as interactive heatmaps."""


# Import subcommands to register them
from .render import render as _render  # noqa: F401, E402
from .hotspots import hotspots as _hotspots  # noqa: F401, E402
