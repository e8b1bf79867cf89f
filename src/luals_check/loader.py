# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate and load the diagnostics report written by the analyzer."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from .errors import EmptyOutput, MalformedReport, NoPathToken, ReadFailure, ReportFileMissing
from .models import DiagnosticsReport, parse_report

LOGGER = logging.getLogger(__name__)

# ASCII whitespace only; str.split() would also split on Unicode spaces.
_ASCII_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[\t\n\x0c\r ]+")


def extract_report_path(output: str) -> Path:
    """Return the report path named by the last token of the last output line.

    ``lua-language-server --check`` finishes by printing a line such as
    ``Diagnosis completed, 3 problems found, see /tmp/check.json``.

    Args:
        output: Decoded standard output of the analyzer.

    Returns:
        Path: Path token exactly as printed; the filesystem is not consulted.

    Raises:
        EmptyOutput: If ``output`` contains no lines.
        NoPathToken: If the last line is empty or whitespace only.
    """

    lines = output.splitlines()
    if not lines:
        raise EmptyOutput(output)
    last_line = lines[-1]
    tokens = [token for token in _ASCII_WHITESPACE.split(last_line) if token]
    if not tokens:
        raise NoPathToken(last_line)
    return Path(tokens[-1])


def load_report(path: Path) -> DiagnosticsReport:
    """Read and validate the diagnostics report at ``path``.

    Raises:
        ReportFileMissing: If ``path`` does not exist.
        ReadFailure: If the file cannot be read as UTF-8 text.
        MalformedReport: If the content is not a valid diagnostics report.
    """

    if not path.exists():
        raise ReportFileMissing(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailure(path, str(exc)) from exc
    try:
        report = parse_report(content)
    except ValidationError as exc:
        raise MalformedReport(path, exc) from exc
    LOGGER.debug("Loaded %d report entries from %s", len(report), path)
    return report


def load_report_from_output(output: str) -> DiagnosticsReport:
    """Locate the report through :func:`extract_report_path` and load it."""

    path = extract_report_path(output)
    LOGGER.debug("Diagnostics report path: %s", path)
    return load_report(path)


__all__ = ["extract_report_path", "load_report", "load_report_from_output"]
