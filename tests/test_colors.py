"""Tests for the logarithmic time-to-color scale."""

import numpy as np
import pytest

from code_heatmap.visualization.colors import (
    MAX_RUN_COLOR,
    MIN_RUN_COLOR,
    LogColorScale,
    parse_hex_color,
)

LIGHT = "rgb(235, 250, 235)"
SATURATED = "rgb(71, 209, 71)"


def relative_luminance(rgb):
    # WCAG relative luminance, 0 = black, 1 = white
    srgb = np.array(rgb, dtype=float) / 255.0
    linear = np.where(srgb <= 0.03928, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4)
    return float(np.dot(linear, [0.2126, 0.7152, 0.0722]))


class TestParseHexColor:
    def test_endpoints(self):
        assert parse_hex_color(MIN_RUN_COLOR) == (235, 250, 235)
        assert parse_hex_color(MAX_RUN_COLOR) == (71, 209, 71)

    def test_rejects_short_form(self):
        with pytest.raises(ValueError):
            parse_hex_color("#fff")


class TestLogColorScale:
    def test_domain_endpoints(self):
        scale = LogColorScale(10.0)
        assert scale(0.000001) == LIGHT
        assert scale(10.0) == SATURATED

    def test_fraction_is_logarithmic(self):
        scale = LogColorScale(10.0)
        # log10 domain is [-6, 1]; 0.001 sits at -3
        assert scale.fraction(0.001) == pytest.approx(3 / 7)
        assert scale.fraction(0.5) == pytest.approx((6 - 0.30103) / 7, abs=1e-5)

    def test_out_of_domain_times_clamp(self):
        scale = LogColorScale(10.0)
        assert scale(1e-9) == LIGHT
        assert scale(1000.0) == SATURATED

    def test_monotonic_darkening(self):
        scale = LogColorScale(10.0)
        times = [1e-5, 1e-4, 1e-3, 1e-2, 1e-1, 1.0, 10.0]
        luminances = [relative_luminance(scale.rgb(t)) for t in times]
        assert all(a > b for a, b in zip(luminances, luminances[1:]))

    def test_heavy_tail_stays_distinguishable(self):
        scale = LogColorScale(10.0)
        # Linear interpolation would render both of these as the light color
        assert scale(0.0001) != scale(0.01)

    def test_degenerate_domain_returns_light_endpoint(self):
        scale = LogColorScale(0.000001)
        assert scale.degenerate
        assert scale(0.000001) == LIGHT
        assert scale(5.0) == LIGHT

    def test_zero_total_time_is_degenerate(self):
        scale = LogColorScale(0.0)
        assert scale.degenerate
        assert scale(1.0) == LIGHT

    def test_non_positive_time_rejected(self):
        scale = LogColorScale(10.0)
        with pytest.raises(ValueError):
            scale(0.0)
        with pytest.raises(ValueError):
            scale(-1.0)

    def test_custom_colors(self):
        scale = LogColorScale(1.0, min_color="#ffffff", max_color="#000000")
        assert scale(1.0) == "rgb(0, 0, 0)"
        assert scale(0.000001) == "rgb(255, 255, 255)"

    def test_invalid_min_run_time(self):
        with pytest.raises(ValueError):
            LogColorScale(1.0, min_run_time=0.0)
