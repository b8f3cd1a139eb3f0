"""Data models for a profiled run: the report consumed by the heatmap view.

A report is produced by the profiler and is trusted as-is.  The only
parsing done here is at the JSON boundary (:func:`load_report`), where an
entry tag other than ``line`` or ``skip`` is treated as fatal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .exceptions import ReportFormatError, UnknownEntryError


@dataclass(frozen=True)
class Line:
    """A source line to render."""

    line_number: int
    text: str


@dataclass(frozen=True)
class Skip:
    """``count`` consecutive source lines omitted from display."""

    count: int


SourceEntry = Union[Line, Skip]


@dataclass(frozen=True)
class FileReport:
    """Per-file profile: source entries plus statistics keyed by line number.

    ``heatmap`` maps an original line number to the cumulative time spent
    on it and ``execution_count`` to how many times it ran.  Lines missing
    from either mapping never executed.
    """

    name: str
    source_entries: Tuple[SourceEntry, ...] = ()
    heatmap: Mapping[int, float] = field(default_factory=dict)
    execution_count: Mapping[int, int] = field(default_factory=dict)

    @property
    def visible_lines(self) -> List[Line]:
        return [entry for entry in self.source_entries if isinstance(entry, Line)]


@dataclass(frozen=True)
class Report:
    """Complete input of one heatmap render.

    ``total_run_time`` is the maximum run time observed across all files and
    is the upper bound of the color domain.
    """

    total_run_time: float
    files: Tuple[FileReport, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<report>") -> "Report":
        """Build a report from the profiler's JSON document.

        Expected shape::

            {
                "runTime": 10.0,
                "heatmaps": [
                    {
                        "name": "app/main.py",
                        "srcCode": [["line", 1, "a = 1"], ["skip", 3]],
                        "heatmap": {"1": 0.5},
                        "executionCount": {"1": 4}
                    }
                ]
            }

        Raises
        ------
        ReportFormatError
            If a required key is missing or has the wrong type.
        UnknownEntryError
            If a ``srcCode`` entry is tagged with anything but
            ``line``/``skip``.
        """
        if not isinstance(data, dict):
            raise ReportFormatError(source, "top level must be an object")
        try:
            run_time = float(data["runTime"])
            heatmaps = data["heatmaps"]
        except KeyError as e:
            raise ReportFormatError(source, f"missing key {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise ReportFormatError(source, f"runTime is not a number: {e}") from e

        if not isinstance(heatmaps, list):
            raise ReportFormatError(source, "heatmaps must be a list")

        return cls(
            total_run_time=run_time,
            files=tuple(_file_from_dict(item, source) for item in heatmaps),
        )


@dataclass(frozen=True)
class LineStats:
    """Timing detail of one executed line, as shown in the tooltip."""

    run_time: float
    run_count: int

    def percentage(self, total_run_time: float) -> float:
        """Share of ``total_run_time``; 0.0 when the report has no run time."""
        if total_run_time <= 0:
            return 0.0
        return 100 * (self.run_time / total_run_time)


def stats_for(time: Optional[float], count: Optional[int]) -> Optional[LineStats]:
    """Pair up recorded statistics; a line with no recorded run count has none."""
    if not count:
        return None
    return LineStats(run_time=time or 0.0, run_count=count)


def load_report(path: Union[str, Path]) -> Report:
    """Read a profile report JSON file.

    Raises
    ------
    ReportFormatError
        If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReportFormatError(str(path), f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise ReportFormatError(str(path), f"invalid JSON: {e}") from e
    return Report.from_dict(data, source=str(path))


# ── Private helpers ──────────────────────────────────────────────────


def _file_from_dict(item: Any, source: str) -> FileReport:
    if not isinstance(item, dict):
        raise ReportFormatError(source, "each heatmap must be an object")
    try:
        name = str(item["name"])
        src_code = item["srcCode"]
    except KeyError as e:
        raise ReportFormatError(source, f"heatmap missing key {e.args[0]!r}") from e
    if not isinstance(src_code, list):
        raise ReportFormatError(source, "srcCode must be a list")

    return FileReport(
        name=name,
        source_entries=tuple(_entry_from_list(entry, source) for entry in src_code),
        heatmap=_line_keyed(item.get("heatmap") or {}, float, source),
        execution_count=_line_keyed(item.get("executionCount") or {}, int, source),
    )


def _entry_from_list(entry: Any, source: str) -> SourceEntry:
    if not isinstance(entry, (list, tuple)) or not entry:
        raise ReportFormatError(source, f"source entry must be a tagged list, got {entry!r}")

    tag = entry[0]
    try:
        if tag == "line":
            return Line(line_number=int(entry[1]), text=str(entry[2]))
        if tag == "skip":
            return Skip(count=int(entry[1]))
    except (IndexError, TypeError, ValueError) as e:
        raise ReportFormatError(source, f"bad {tag} entry {entry!r}") from e
    raise UnknownEntryError(source, tag)


def _line_keyed(values: Any, cast, source: str) -> Dict[int, Any]:
    # JSON object keys arrive as strings
    if not isinstance(values, dict):
        raise ReportFormatError(source, "per-line statistics must be an object")
    try:
        return {int(k): cast(v) for k, v in values.items()}
    except (TypeError, ValueError) as e:
        raise ReportFormatError(source, f"bad per-line statistic: {e}") from e
