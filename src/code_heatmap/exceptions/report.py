"""Report loading errors: unreadable documents and malformed entries."""

from .base import HeatmapError


class ReportFormatError(HeatmapError):
    """Raised when a profile report document cannot be turned into a Report."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Malformed profile report: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class UnknownEntryError(ReportFormatError):
    """Raised for a source entry whose tag is neither ``line`` nor ``skip``."""

    def __init__(self, source: str, tag: object):
        super().__init__(source, f"unknown source entry tag {tag!r}")
        self.tag = tag
