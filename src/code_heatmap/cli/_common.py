"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import HeatmapConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    language: Optional[str] = None,
    verbose: bool = False,
) -> HeatmapConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if language is not None:
        overrides["language"] = language
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)


def format_seconds(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f} s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    return f"{seconds * 1e6:.1f} µs"
