"""Visualization layer: colored line heatmaps with hover tooltips."""

from .colors import LogColorScale
from .dom import Element, PointerEvent
from .heatmap import CodeHeatmap, render
from .page import build_page, write_page
from .reindex import RenderedFile, reindex_file

__all__ = [
    "CodeHeatmap",
    "Element",
    "LogColorScale",
    "PointerEvent",
    "RenderedFile",
    "build_page",
    "reindex_file",
    "render",
    "write_page",
]
