# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the luals-check command line."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from luals_check.cli.app import app

POINT = {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 0}}


def _report(project: Path, *entries: dict[str, Any]) -> dict[str, Any]:
    return {(project / "a.lua").as_uri(): list(entries)}


def test_check_fails_on_errors(fake_analyzer, project_dir: Path) -> None:
    script = fake_analyzer(_report(project_dir, {"range": POINT, "severity": 1, "message": "bad"}))

    result = CliRunner().invoke(app, [str(project_dir), "-c", str(script), "--no-color"])

    assert result.exit_code == 1
    assert "Initializing lua-language-server" in result.output
    assert "a.lua:0:0" in result.output
    assert "error: bad" in result.output
    assert "lua-language-server found 1 problems" in result.output


def test_check_passes_below_fail_threshold(fake_analyzer, project_dir: Path) -> None:
    script = fake_analyzer(_report(project_dir, {"range": POINT, "severity": 2, "message": "meh"}))

    result = CliRunner().invoke(app, [str(project_dir), "-c", str(script), "--fail", "error"])

    assert result.exit_code == 0
    assert "warning: meh" in result.output
    assert "problems" not in result.output


def test_show_threshold_hides_weaker_diagnostics(fake_analyzer, project_dir: Path) -> None:
    script = fake_analyzer(_report(project_dir, {"range": POINT, "severity": 2, "message": "meh"}))

    result = CliRunner().invoke(
        app,
        [str(project_dir), "-c", str(script), "--fail", "error", "--show", "error"],
    )

    assert result.exit_code == 0
    assert "meh" not in result.output


def test_analyzer_exit_status_is_reported(fake_analyzer, project_dir: Path) -> None:
    script = fake_analyzer(_report(project_dir), exit_code=1)

    result = CliRunner().invoke(app, [str(project_dir), "-c", str(script)])

    assert result.exit_code == 2
    assert "lua-language-server failed: exit status 1" in result.output


def test_missing_report_file_is_reported(fake_analyzer, project_dir: Path, tmp_path: Path) -> None:
    missing = tmp_path / "nowhere.json"
    script = fake_analyzer(trailer=f"Diagnosis completed, see {missing}")

    result = CliRunner().invoke(app, [str(project_dir), "-c", str(script)])

    assert result.exit_code == 2
    assert "diagnostics file doesn't exist" in result.output


def test_missing_executable_is_reported(project_dir: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(app, [str(project_dir), "-c", str(tmp_path / "no-such-luals")])

    assert result.exit_code == 2
    assert "Failed to start" in result.output


def test_unknown_severity_is_a_usage_error(project_dir: Path) -> None:
    result = CliRunner().invoke(app, [str(project_dir), "--fail", "fatal"])

    assert result.exit_code == 2


def test_help_lists_options() -> None:
    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    for option in ("--fail", "--show", "--lua-language-server"):
        assert option in result.output


def test_missing_working_directory_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def missing_cwd() -> Path:
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(Path, "cwd", missing_cwd)

    result = CliRunner().invoke(app, ["."])

    assert result.exit_code == 2
    assert "Failed to resolve project path" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
