"""Exception hierarchy for code-heatmap."""

from .base import HeatmapError
from .config import ConfigurationError, InvalidConfigError
from .report import ReportFormatError, UnknownEntryError

__all__ = [
    "HeatmapError",
    "ReportFormatError",
    "UnknownEntryError",
    "ConfigurationError",
    "InvalidConfigError",
]
