"""Logarithmic time-to-color scale for line heatmaps.

Per-line run times are heavy-tailed: most lines cost microseconds while a
handful dominate the run.  Interpolating on ``log10(time)`` keeps cheap
lines distinguishable from each other instead of collapsing them all onto
the light endpoint.
"""

from typing import Tuple

import numpy as np

MIN_RUN_TIME = 0.000001
MIN_RUN_COLOR = "#ebfaeb"
MAX_RUN_COLOR = "#47d147"


def parse_hex_color(color: str) -> Tuple[int, int, int]:
    """``'#47d147'`` -> ``(71, 209, 71)``."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected #rrggbb color, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class LogColorScale:
    """Map a positive run time onto a color between two endpoints.

    The domain is ``[min_run_time, max_run_time]`` and times outside it are
    clamped to the nearest endpoint color.  When the domain is empty
    (``max_run_time <= min_run_time``) every time maps to ``min_color``.

    Zero or absent times are never colored; callers branch on them before
    calling the scale.
    """

    def __init__(
        self,
        max_run_time: float,
        min_run_time: float = MIN_RUN_TIME,
        min_color: str = MIN_RUN_COLOR,
        max_color: str = MAX_RUN_COLOR,
    ):
        if min_run_time <= 0:
            raise ValueError("min_run_time must be positive")
        self.min_run_time = min_run_time
        self.max_run_time = max_run_time
        self._log_low = float(np.log10(min_run_time))
        self._log_high = float(np.log10(max_run_time)) if max_run_time > 0 else self._log_low
        self._low_rgb = np.array(parse_hex_color(min_color), dtype=float)
        self._high_rgb = np.array(parse_hex_color(max_color), dtype=float)

    @property
    def degenerate(self) -> bool:
        return self._log_high <= self._log_low

    def fraction(self, run_time: float) -> float:
        """Position of ``run_time`` along the scale, in ``[0, 1]``."""
        if run_time <= 0:
            raise ValueError(f"run time must be positive, got {run_time!r}")
        if self.degenerate:
            return 0.0
        t = (np.log10(run_time) - self._log_low) / (self._log_high - self._log_low)
        return float(np.clip(t, 0.0, 1.0))

    def rgb(self, run_time: float) -> Tuple[int, int, int]:
        t = self.fraction(run_time)
        channels = np.rint(self._low_rgb + (self._high_rgb - self._low_rgb) * t)
        r, g, b = (int(c) for c in channels)
        return r, g, b

    def __call__(self, run_time: float) -> str:
        return "rgb(%d, %d, %d)" % self.rgb(run_time)
