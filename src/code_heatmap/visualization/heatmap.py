"""Code heatmap rendering.

Renders a profile report into an element tree: a help banner, a list of
inspected modules, one block of colored source rows per file and a shared
tooltip wired to row hover events.
"""

import logging
from typing import List, Optional

from ..config import DEFAULT_CONFIG, HeatmapConfig
from ..models import Report
from .colors import LogColorScale
from .dom import Element
from .formatter import ROW_NORMAL, LineFormatter
from .interaction import HoverBinder, Tooltip
from .reindex import RenderedFile, reindex_file

logger = logging.getLogger(__name__)


class CodeHeatmap:
    """Heatmap of one report, attached under ``parent``.

    After :meth:`render`, ``tooltip`` is the page's single tooltip and
    ``rendered_files`` holds one :class:`RenderedFile` per report file, in
    report order.
    """

    def __init__(self, parent: Element, report: Report, config: Optional[HeatmapConfig] = None):
        self.parent = parent
        self.report = report
        self.config = config or DEFAULT_CONFIG
        self.color_scale = LogColorScale(
            max_run_time=report.total_run_time,
            min_run_time=self.config.min_run_time,
            min_color=self.config.min_run_color,
            max_color=self.config.max_run_color,
        )
        self.formatter = LineFormatter(self.color_scale, language=self.config.language)
        self.tooltip: Optional[Tooltip] = None
        self.rendered_files: List[RenderedFile] = []

    def render(self) -> None:
        self._render_help()

        page_container = self.parent.append("div", attrs={"id": "heatmap-layout"})

        module_list = page_container.append("div", "heatmap-module-list")
        module_list.append("div", "heatmap-module-header", text="Inspected modules")
        for file_report in self.report.files:
            link = module_list.append("a", attrs={"href": f"#{file_report.name}"})
            link.append("div", "heatmap-module-name").append("text", text=file_report.name)

        code_container = page_container.append("div", "heatmap-code-container")
        file_containers = []
        for file_report in self.report.files:
            file_container = code_container.append("div", "heatmap-src-file")
            header = file_container.append(
                "a",
                "heatmap-src-code-header",
                attrs={"href": f"#{file_report.name}", "id": file_report.name},
            )
            header.append("text", text=file_report.name)
            file_containers.append(file_container)

        # Every file is reindexed before any rows go into the tree
        self.rendered_files = [self._render_code(file_report) for file_report in self.report.files]

        code_bodies = []
        for file_container, rendered in zip(file_containers, self.rendered_files):
            code_body = file_container.append("div", "heatmap-src-code").append("text")
            code_body.extend(rendered.rows)
            code_bodies.append(code_body)

        self.tooltip = Tooltip(page_container.append("div"))

        binder = HoverBinder(self.tooltip, self.report.total_run_time)
        for code_body, rendered in zip(code_bodies, self.rendered_files):
            binder.bind(code_body.select_all(ROW_NORMAL), rendered)

    def _render_code(self, file_report) -> RenderedFile:
        rendered = reindex_file(file_report, self.formatter)
        logger.debug(
            "Rendered %s: %d visible rows, %d entries",
            file_report.name,
            rendered.row_count,
            len(rendered.rows),
        )
        return rendered

    def _render_help(self) -> None:
        self.parent.append("div", "tabhelp inactive-tabhelp", html=self.config.help_message)


def render(report: Report, parent: Element, config: Optional[HeatmapConfig] = None) -> None:
    """Render ``report`` as an interactive heatmap attached to ``parent``.

    Calling it twice on the same parent renders the view twice.
    """
    CodeHeatmap(parent, report, config).render()
