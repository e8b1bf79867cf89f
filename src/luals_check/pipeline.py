# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Coordinate an analyzer run from process launch to the final outcome."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from rich.console import Console
from rich.text import Text

from .config import CheckConfig, ThresholdConfig, build_analyzer_command
from .console import get_console_manager
from .errors import AggregateFailure, UriConversionError
from .filesystem.paths import is_within_project, to_relative_path
from .loader import load_report_from_output
from .models import Diagnostic
from .process import decode_output, run_analyzer
from .reporting.render import DiagnosticRenderer
from .severity import Severity, is_at_least

LOGGER = logging.getLogger(__name__)


def should_show(severity: Severity | None, thresholds: ThresholdConfig) -> bool:
    """Return ``True`` unless ``severity`` is weaker than the ``show`` level.

    Diagnostics without a severity are always shown.
    """

    return severity is None or is_at_least(severity, thresholds.show)


def counts_as_failure(severity: Severity | None, thresholds: ThresholdConfig) -> bool:
    """Return ``True`` when ``severity`` is at or stronger than the ``fail`` level.

    Diagnostics without a severity never count.
    """

    return severity is not None and is_at_least(severity, thresholds.fail)


@dataclass(frozen=True, slots=True)
class RenderedDiagnostic:
    """A diagnostic that passed the filters together with its rendered text."""

    path: str
    diagnostic: Diagnostic
    text: Text
    counted: bool


@dataclass(frozen=True, slots=True)
class ReportOutcome:
    """Rendered diagnostics in output order and the number of failures."""

    rendered: tuple[RenderedDiagnostic, ...]
    failures: int

    @property
    def ok(self) -> bool:
        """Return ``True`` when no diagnostic met the fail threshold."""

        return self.failures == 0

    def plain_text(self) -> str:
        """Return the uncoloured report exactly as :func:`emit_report` prints it."""

        body = "".join(f"\n{entry.text.plain}\n" for entry in self.rendered)
        return body + "\n" if self.failures else body


def _display_path(uri: str, project_root: Path) -> str:
    try:
        return to_relative_path(uri, project_root).as_posix()
    except UriConversionError:
        return uri


def build_report(
    report: Mapping[str, Sequence[Diagnostic]],
    *,
    project_root: Path,
    thresholds: ThresholdConfig,
    renderer: DiagnosticRenderer,
) -> ReportOutcome:
    """Filter and render ``report`` in URI order.

    Args:
        report: Diagnostics keyed by file URI.
        project_root: Absolute root used for relativisation and membership.
        thresholds: Effective fail/show cutoffs.
        renderer: Renderer producing the text for each shown diagnostic.

    Returns:
        ReportOutcome: Rendered diagnostics and the failure count.

    Raises:
        InvalidUri: If a report key is not an absolute URI.
        UnsupportedUriScheme: If a report key is not a ``file`` URI.
    """

    rendered: list[RenderedDiagnostic] = []
    failures = 0
    for uri in sorted(report):
        path = _display_path(uri, project_root)
        if not is_within_project(uri, project_root):
            LOGGER.debug("Ignoring diagnostics in out-of-project path %s", path)
            continue
        for diagnostic in report[uri]:
            if not should_show(diagnostic.severity, thresholds):
                continue
            counted = counts_as_failure(diagnostic.severity, thresholds)
            if counted:
                failures += 1
            rendered.append(
                RenderedDiagnostic(
                    path=path,
                    diagnostic=diagnostic,
                    text=renderer.render(path, diagnostic),
                    counted=counted,
                ),
            )
    LOGGER.debug("Rendered %d diagnostics, %d failing", len(rendered), failures)
    return ReportOutcome(rendered=tuple(rendered), failures=failures)


def emit_report(outcome: ReportOutcome, console: Console) -> None:
    """Print ``outcome`` to ``console``, one blank line before each diagnostic."""

    for entry in outcome.rendered:
        console.print()
        console.print(entry.text)
    if outcome.failures:
        console.print()


def run_check(
    config: CheckConfig,
    *,
    console: Console | None = None,
    echo: IO[bytes] | None = None,
) -> ReportOutcome:
    """Run the analyzer for ``config`` and report its diagnostics.

    Args:
        config: Validated run configuration.
        console: Destination for the rendered report. Defaults to the shared
            stdout console.
        echo: Binary stream receiving the analyzer's live output.

    Returns:
        ReportOutcome: Outcome of a run with no failing diagnostics.

    Raises:
        AggregateFailure: If any diagnostic met the fail threshold.
        LualsCheckError: For every other failure along the way.
    """

    output = run_analyzer(build_analyzer_command(config), echo=echo)
    report = load_report_from_output(decode_output(output.stdout))
    renderer = DiagnosticRenderer(project_root=config.project_root, color=config.color, width=config.width)
    outcome = build_report(
        report,
        project_root=config.project_root,
        thresholds=config.thresholds,
        renderer=renderer,
    )
    target = console if console is not None else get_console_manager().get(color=config.color)
    emit_report(outcome, target)
    if outcome.failures:
        raise AggregateFailure(outcome.failures)
    return outcome


__all__ = [
    "RenderedDiagnostic",
    "ReportOutcome",
    "build_report",
    "counts_as_failure",
    "emit_report",
    "run_check",
    "should_show",
]
