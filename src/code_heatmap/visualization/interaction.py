"""Hover interaction: row highlighting and the shared timing tooltip."""

import functools

from ..models import LineStats
from .dom import Element, PointerEvent
from .formatter import ROW_HIGHLIGHT, ROW_NORMAL
from .reindex import RenderedFile

TOOLTIP_VISIBLE = "content-tooltip content-tooltip-visible"
TOOLTIP_INVISIBLE = "content-tooltip content-tooltip-invisible"


def tooltip_markup(stats: LineStats, total_run_time: float) -> str:
    return (
        f"<p><b>Time spent: </b>{stats.run_time} s</p>"
        f"<p><b>Total running time: </b>{total_run_time} s</p>"
        f"<p><b>Percentage: </b>{stats.percentage(total_run_time)}%</p>"
        f"<p><b>Run count: </b>{stats.run_count}</p>"
    )


class Tooltip:
    """The single floating tooltip of a rendered page.

    It is created hidden, once per render, and repopulated and moved on
    every hover instead of being recreated.
    """

    def __init__(self, element: Element):
        self.element = element
        self.hide()

    @property
    def visible(self) -> bool:
        return self.element.has_class("content-tooltip-visible")

    @property
    def content(self) -> str:
        return self.element.html or ""

    def show(self, content: str, page_x: float, page_y: float) -> None:
        self.element.class_name = TOOLTIP_VISIBLE
        self.element.html = content
        self.element.style["left"] = f"{page_x}px"
        self.element.style["top"] = f"{page_y}px"

    def hide(self) -> None:
        self.element.class_name = TOOLTIP_INVISIBLE


class HoverBinder:
    """Attach hover-enter/hover-exit handlers to a file's interactive rows.

    Handlers receive the row's position explicitly and only read from the
    file's :class:`RenderedFile` tables; the tooltip is the only state they
    write, besides the hovered row's own class.
    """

    def __init__(self, tooltip: Tooltip, total_run_time: float):
        self.tooltip = tooltip
        self.total_run_time = total_run_time

    def bind(self, rows, rendered: RenderedFile) -> None:
        for position, row in enumerate(rows):
            row.on("mouseover", functools.partial(self.hover_enter, rendered, position))
            row.on("mouseout", self.hover_exit)

    def hover_enter(
        self, rendered: RenderedFile, position: int, row: Element, pointer: PointerEvent
    ) -> None:
        stats = rendered.stats_at(position)
        if stats is None:
            return
        row.class_name = ROW_HIGHLIGHT
        self.tooltip.show(
            tooltip_markup(stats, self.total_run_time), pointer.page_x, pointer.page_y
        )

    def hover_exit(self, row: Element, pointer: PointerEvent) -> None:
        row.class_name = ROW_NORMAL
        self.tooltip.hide()
