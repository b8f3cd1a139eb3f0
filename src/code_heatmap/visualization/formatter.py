"""Formatting of a single source line into a heatmap row."""

from typing import Callable, Optional

from .colors import LogColorScale
from .dom import Element
from .highlight import highlight

ROW_NORMAL = "heatmap-src-line-normal"
ROW_HIGHLIGHT = "heatmap-src-line-highlight"
SKIP_MARKER = "heatmap-skip-line"


class LineFormatter:
    """Build row elements for source lines.

    Each call returns fresh elements and touches no shared state, so lines
    and files can be formatted in any order.
    """

    def __init__(
        self,
        color_scale: LogColorScale,
        language: str = "python",
        highlighter: Callable[[str, str], str] = highlight,
    ):
        self.color_scale = color_scale
        self.language = language
        self._highlight = highlighter

    def format_line(self, line_number: int, code_line: str, run_time: Optional[float]) -> Element:
        """Row with a line-number cell, a highlighted code cell and a heat color.

        Lines without a recorded (positive) run time get no background.
        """
        colored = run_time is not None and run_time > 0
        style = {"background-color": self.color_scale(run_time)} if colored else {}
        row = Element("div", ROW_NORMAL, style=style)
        row.append("div", "heatmap-src-line-number", text=str(line_number))
        row.append("div", "heatmap-src-line-code", html=self._highlight(self.language, code_line))
        return row

    def format_skip(self, count: int) -> Element:
        return Element("div", SKIP_MARKER, text=f"{count} lines skipped")
