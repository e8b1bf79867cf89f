# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FakeAnalyzerFactory = Callable[..., Path]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory inside ``tmp_path``."""
    project = tmp_path / "proj"
    project.mkdir()
    return project


@pytest.fixture
def fake_analyzer(tmp_path: Path) -> FakeAnalyzerFactory:
    """Return a factory writing an executable stand-in for lua-language-server.

    The script prints a progress line, the arguments it received and then a
    trailer whose last token is the report path, exactly like ``--check``.
    """
    if sys.platform == "win32":
        pytest.skip("fake analyzer relies on a shebang script")

    def _factory(
        report: dict[str, Any] | None = None,
        *,
        exit_code: int = 0,
        trailer: str | None = None,
    ) -> Path:
        report_path = tmp_path / "check.json"
        if report is not None:
            report_path.write_text(json.dumps(report), encoding="utf-8")
        last_line = trailer if trailer is not None else f"Diagnosis completed, see {report_path}"
        script = tmp_path / "fake-luals"
        script.write_text(
            "\n".join(
                [
                    f"#!{sys.executable}",
                    "import sys",
                    "print('Initializing lua-language-server', flush=True)",
                    "print('args: ' + ' '.join(sys.argv[1:]), flush=True)",
                    f"print({last_line!r}, flush=True)",
                    f"sys.exit({exit_code})",
                    "",
                ],
            ),
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _factory
