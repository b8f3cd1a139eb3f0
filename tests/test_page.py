"""Tests for the standalone HTML page writer."""

import json
import re

from code_heatmap.config import HeatmapConfig
from code_heatmap.visualization.page import build_page, write_page


def _embedded_data(html):
    match = re.search(r"const DATA = (\{.*?\});\n", html)
    assert match is not None
    return json.loads(match.group(1))


class TestBuildPage:
    def test_document_shell(self, small_report):
        html = build_page(small_report)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Code heatmap</title>" in html
        assert "Inspected modules" in html

    def test_embeds_lookup_tables(self, two_file_report):
        data = _embedded_data(build_page(two_file_report))
        assert data == {
            "runTime": 10.0,
            "files": [
                {"time": [0.5, None], "count": [4, None]},
                {"time": [0.001, 2.5], "count": [1, 1000]},
            ],
        }

    def test_rows_and_skip_marker(self, small_report):
        html = build_page(small_report)
        assert html.count('class="heatmap-src-line-normal"') == 2
        assert html.count("3 lines skipped") == 1

    def test_tooltip_starts_hidden(self, small_report):
        html = build_page(small_report)
        assert html.count('class="content-tooltip content-tooltip-invisible"') == 1

    def test_highlight_styles_included(self, small_report):
        html = build_page(small_report, HeatmapConfig(pygments_style="monokai"))
        assert ".heatmap-src-line-code .k" in html

    def test_title_is_escaped(self, small_report):
        html = build_page(small_report, HeatmapConfig(title="a <b> c"))
        assert "<title>a &lt;b&gt; c</title>" in html

    def test_source_text_is_escaped(self, small_report):
        from code_heatmap.models import FileReport, Line, Report

        report = Report(
            total_run_time=1.0,
            files=(FileReport("s.py", (Line(1, 'x = "</script>"'),)),),
        )
        html = build_page(report)
        assert html.count("</script>") == 1


class TestWritePage:
    def test_writes_file(self, small_report, tmp_path):
        result = write_page(small_report, tmp_path / "out.html")
        assert result == str((tmp_path / "out.html").resolve())
        content = (tmp_path / "out.html").read_text(encoding="utf-8")
        assert "const DATA = " in content
