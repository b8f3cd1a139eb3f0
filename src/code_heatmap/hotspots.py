"""Ranking of the most expensive lines across a report."""

from dataclasses import dataclass
from typing import List, Optional

from .models import LineStats, Report


@dataclass(frozen=True)
class Hotspot:
    file: str
    line_number: int
    run_time: float
    run_count: int
    percentage: float  # of the report's total run time
    source: str


def hottest_lines(report: Report, limit: Optional[int] = 10) -> List[Hotspot]:
    """Executed lines sorted by time spent, most expensive first.

    Only lines shown in the report (not skipped) with a recorded run count
    are ranked.  Ties keep report order.
    """
    hotspots = []
    for file_report in report.files:
        for entry in file_report.visible_lines:
            count = file_report.execution_count.get(entry.line_number)
            if not count:
                continue
            run_time = file_report.heatmap.get(entry.line_number) or 0.0
            percentage = LineStats(run_time, count).percentage(report.total_run_time)
            hotspots.append(
                Hotspot(
                    file=file_report.name,
                    line_number=entry.line_number,
                    run_time=run_time,
                    run_count=count,
                    percentage=percentage,
                    source=entry.text.strip(),
                )
            )

    # sorted() is stable, so equal times keep file/line order
    hotspots = sorted(hotspots, key=lambda h: h.run_time, reverse=True)
    return hotspots if limit is None else hotspots[:limit]
