"""Tests for the code-heatmap command line."""

import json

import pytest
from typer.testing import CliRunner

from code_heatmap import __version__
from code_heatmap.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestRenderCommand:
    def test_writes_page(self, runner, report_path, tmp_path, isolated_config):
        output = tmp_path / "heatmap.html"
        result = runner.invoke(app, ["render", str(report_path), "--output", str(output)])
        assert result.exit_code == 0, result.output
        assert output.exists()
        assert "Heatmap saved to" in result.output
        assert "3 lines skipped" in output.read_text(encoding="utf-8")

    def test_language_option(self, runner, report_path, tmp_path, isolated_config):
        output = tmp_path / "heatmap.html"
        result = runner.invoke(
            app, ["render", str(report_path), "-o", str(output), "--language", "text"]
        )
        assert result.exit_code == 0, result.output
        assert '<span class="k">' not in output.read_text(encoding="utf-8")

    def test_malformed_report(self, runner, tmp_path, isolated_config):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"runTime": 1.0}), encoding="utf-8")
        result = runner.invoke(app, ["render", str(bad), "-o", str(tmp_path / "x.html")])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (tmp_path / "x.html").exists()

    def test_missing_report_file(self, runner, tmp_path, isolated_config):
        result = runner.invoke(app, ["render", str(tmp_path / "absent.json")])
        assert result.exit_code != 0

    def test_invalid_config(self, runner, report_path, tmp_path, isolated_config):
        config = tmp_path / "bad.toml"
        config.write_text('min_run_color = "green"\n', encoding="utf-8")
        result = runner.invoke(app, ["render", str(report_path), "--config", str(config)])
        assert result.exit_code == 1
        assert "min_run_color" in result.output


class TestHotspotsCommand:
    def test_prints_table(self, runner, report_path, isolated_config):
        result = runner.invoke(app, ["hotspots", str(report_path), "--top", "5"])
        assert result.exit_code == 0, result.output
        assert "Hottest lines" in result.output

    def test_no_executed_lines(self, runner, tmp_path, isolated_config):
        path = tmp_path / "idle.json"
        path.write_text(
            json.dumps(
                {"runTime": 1.0, "heatmaps": [{"name": "a.py", "srcCode": [["line", 1, "x"]]}]}
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["hotspots", str(path)])
        assert result.exit_code == 0
        assert "No executed lines" in result.output


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
