"""CLI and entrypoint tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from leapnav.cli import app, run_scan
from leapnav.memory_host import MemoryHost, MemoryView
from leapnav.models.options import BIDIRECTIONAL, SearchOptions
from leapnav.models.text import Position

runner = CliRunner()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text("foo bar foo baz\n  bar food\n", encoding="utf-8")
    return path


def test_labels_command() -> None:
    result = runner.invoke(app, ["labels", "3"])
    assert result.exit_code == 0
    assert result.output.split() == ["0", "aa", "1", "ba", "2", "ca"]


def test_scan_lists_labels(sample_file: Path) -> None:
    result = runner.invoke(app, ["scan", str(sample_file), "fo"])
    assert result.exit_code == 0
    assert "a    1:1  foo bar foo baz" in result.output
    assert "b    1:9  foo bar foo baz" in result.output
    assert "c    2:7  bar food" in result.output
    assert "3 match(es)" in result.output


def test_scan_reports_a_jump(sample_file: Path) -> None:
    result = runner.invoke(app, ["scan", str(sample_file), "foc"])
    assert result.exit_code == 0
    assert result.output.strip() == "jump 2:7  bar food"


def test_scan_respects_direction(sample_file: Path) -> None:
    result = runner.invoke(
        app, ["scan", str(sample_file), "fo", "--line", "0", "--column", "5", "--no-backward"]
    )
    assert result.exit_code == 0
    assert "2 match(es)" in result.output


def test_scan_json_report(sample_file: Path) -> None:
    result = runner.invoke(app, ["scan", str(sample_file), "ba", "--json"])
    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["anchor"] == "ba"
    assert [m["column"] for m in report["matches"]] == [4, 12, 2]
    assert report["jumped_to"] is None


def test_scan_needs_a_direction(sample_file: Path) -> None:
    result = runner.invoke(
        app, ["scan", str(sample_file), "fo", "--no-forward", "--no-backward"]
    )
    assert result.exit_code == 2


def test_edit_invokes_run_app(monkeypatch, sample_file: Path) -> None:
    called: dict[str, object] = {}

    def fake_run_app(config, paths, compare=None, *, verbose=False) -> None:  # type: ignore[no-untyped-def]
        called["paths"] = paths
        called["compare"] = compare
        called["verbose"] = verbose

    monkeypatch.setattr("leapnav.ui.app.run_app", fake_run_app)
    result = runner.invoke(app, ["edit", str(sample_file), "--verbose"])
    assert result.exit_code == 0
    assert called["paths"] == [sample_file]
    assert called["compare"] is None
    assert called["verbose"] is True


def test_edit_with_comparison(monkeypatch, sample_file: Path, tmp_path: Path) -> None:
    called: dict[str, object] = {}
    other = tmp_path / "other.txt"
    other.write_text("foo\n", encoding="utf-8")

    def fake_run_app(config, paths, compare=None, *, verbose=False) -> None:  # type: ignore[no-untyped-def]
        called["compare"] = compare

    monkeypatch.setattr("leapnav.ui.app.run_app", fake_run_app)
    result = runner.invoke(
        app,
        ["edit", str(sample_file), "--original", str(sample_file), "--modified", str(other)],
    )
    assert result.exit_code == 0
    assert called["compare"] == (sample_file, other)

    half = runner.invoke(app, ["edit", str(sample_file), "--original", str(sample_file)])
    assert half.exit_code == 2


@pytest.mark.asyncio
async def test_run_scan_case_sensitive_anchor() -> None:
    host = MemoryHost.single(MemoryView("v", "Foo foo", caret=Position(0, 0)))
    report = await run_scan(host, BIDIRECTIONAL, "Fo")
    assert report.case_sensitive
    assert report.jumped_to is not None
    assert report.jumped_to.column == 0

    forced = await run_scan(
        MemoryHost.single(MemoryView("v", "Foo foo")),
        BIDIRECTIONAL | SearchOptions.CASE_SENSITIVE,
        "fo",
    )
    assert forced.jumped_to is not None
    assert forced.jumped_to.column == 4
