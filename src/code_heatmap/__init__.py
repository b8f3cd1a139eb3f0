"""
code-heatmap - per-line execution profile heatmaps

Projects a profiler's per-line timing report onto colored source listings:
each line is shaded by the time it consumed on a logarithmic scale, and
hovering a line shows its exact time, share of the run and execution count.
"""

__version__ = "0.1.0"

from .models import FileReport, Line, Report, Skip, load_report
from .visualization import CodeHeatmap, build_page, render, write_page

__all__ = [
    "Report",
    "FileReport",
    "Line",
    "Skip",
    "load_report",
    "render",  # Main entry point
    "CodeHeatmap",
    "build_page",
    "write_page",
]
