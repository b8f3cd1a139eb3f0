"""Shared test fixtures for code-heatmap."""

import json
import os

import pytest

from code_heatmap.models import FileReport, Line, Report, Skip


@pytest.fixture
def plain_highlighter():
    """Deterministic stand-in for Pygments output."""
    return lambda language, code_line: f"<code>{code_line}</code>"


@pytest.fixture
def small_file():
    """Two visible lines around a skipped block; only line 1 ran."""
    return FileReport(
        name="app/main.py",
        source_entries=(Line(1, "a=1"), Skip(3), Line(5, "b=2")),
        heatmap={1: 0.5},
        execution_count={1: 4},
    )


@pytest.fixture
def small_report(small_file):
    return Report(total_run_time=10.0, files=(small_file,))


@pytest.fixture
def two_file_report(small_file):
    """Second file has no skips and every line executed."""
    helper = FileReport(
        name="app/helper.py",
        source_entries=(Line(1, "def f(x):"), Line(2, "    return x * 2")),
        heatmap={1: 0.001, 2: 2.5},
        execution_count={1: 1, 2: 1000},
    )
    return Report(total_run_time=10.0, files=(small_file, helper))


@pytest.fixture
def report_document():
    """Profiler JSON document matching ``small_report``."""
    return {
        "runTime": 10.0,
        "heatmaps": [
            {
                "name": "app/main.py",
                "srcCode": [["line", 1, "a=1"], ["skip", 3], ["line", 5, "b=2"]],
                "heatmap": {"1": 0.5},
                "executionCount": {"1": 4},
            }
        ],
    }


@pytest.fixture
def report_path(tmp_path, report_document):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(report_document), encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and CODE_HEATMAP_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("CODE_HEATMAP_"):
            monkeypatch.delenv(key)
    return work
