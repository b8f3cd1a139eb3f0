"""Reindexing of a file's source entries into dense row positions.

Rows are addressed by their position among the visible lines of a file
(0, 1, 2, ...), which is also the order they appear in the rendered tree.
Statistics in a :class:`~code_heatmap.models.FileReport` are keyed by the
original, sparse line number; the translation happens here, once per
render.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..models import FileReport, Line, LineStats, Skip, stats_for
from .dom import Element
from .formatter import LineFormatter


@dataclass(frozen=True)
class RenderedFile:
    """Rows of one file plus position-keyed lookup tables.

    ``rows`` holds visible rows and skip markers in file order.  The
    record itself is frozen but the rows are the live elements attached to
    the page, so a hover that re-classes a row shows up in :attr:`markup`.
    ``time_map`` and ``count_map`` have one key per visible row,
    ``0..row_count - 1``; the value is ``None`` for a line without a
    recorded statistic.
    """

    name: str
    rows: Tuple[Element, ...]
    time_map: Mapping[int, Optional[float]]
    count_map: Mapping[int, Optional[int]]

    @property
    def row_count(self) -> int:
        return len(self.time_map)

    @property
    def markup(self) -> str:
        return "".join(row.to_html() for row in self.rows)

    def stats_at(self, position: int) -> Optional[LineStats]:
        """Statistics behind the row at ``position``, or ``None`` if it never ran."""
        return stats_for(self.time_map.get(position), self.count_map.get(position))

    def lookup_tables(self) -> Dict[str, list]:
        """JSON-ready tables, index = row position."""
        positions = range(self.row_count)
        return {
            "time": [self.time_map[i] for i in positions],
            "count": [self.count_map[i] for i in positions],
        }


def reindex_file(file_report: FileReport, formatter: LineFormatter) -> RenderedFile:
    """Format every entry of ``file_report`` and index its visible lines.

    Skip entries become a single marker row and take no position.

    Raises
    ------
    TypeError
        If an entry is neither :class:`Line` nor :class:`Skip`.
    """
    rows = []
    time_map: Dict[int, Optional[float]] = {}
    count_map: Dict[int, Optional[int]] = {}
    position = 0

    for entry in file_report.source_entries:
        if isinstance(entry, Line):
            run_time = file_report.heatmap.get(entry.line_number)
            rows.append(formatter.format_line(entry.line_number, entry.text, run_time))
            time_map[position] = run_time
            count_map[position] = file_report.execution_count.get(entry.line_number)
            position += 1
        elif isinstance(entry, Skip):
            rows.append(formatter.format_skip(entry.count))
        else:
            raise TypeError(f"unexpected source entry {entry!r} in {file_report.name}")

    return RenderedFile(
        name=file_report.name,
        rows=tuple(rows),
        time_map=MappingProxyType(time_map),
        count_map=MappingProxyType(count_map),
    )
