# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and normalisation for the check command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import CheckConfig, ThresholdConfig
from ..console import detect_tty
from ..severity import Severity

PROJECT_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Path to the project to check.", show_default=True),
]
EXECUTABLE_OPTION = Annotated[
    str,
    typer.Option(
        "--lua-language-server",
        "-c",
        help="Path to the lua-language-server executable.",
    ),
]
FAIL_OPTION = Annotated[
    Severity,
    typer.Option(
        "--fail",
        help="Error if any diagnostics at or greater than this severity are found.",
        case_sensitive=False,
    ),
]
SHOW_OPTION = Annotated[
    Severity,
    typer.Option(
        "--show",
        help="Display diagnostics at or greater than this severity.",
        case_sensitive=False,
    ),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Colour output when writing to a terminal."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in failure messages."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log debug details to stderr."),
]


@dataclass(slots=True)
class CheckCLIOptions:
    """Normalised CLI inputs for the check command."""

    project: Path
    executable: str
    fail: Severity
    show: Severity
    color: bool
    emoji: bool
    verbose: bool

    def to_config(self, *, cwd: Path | None = None) -> CheckConfig:
        """Return the :class:`CheckConfig` described by these options.

        Colour is only kept when stdout is a terminal.
        """

        return CheckConfig.for_project(
            self.project,
            cwd=cwd,
            executable=self.executable,
            thresholds=ThresholdConfig(fail=self.fail, show=self.show),
            color=self.color and detect_tty(),
        )


__all__ = [
    "COLOR_OPTION",
    "CheckCLIOptions",
    "EMOJI_OPTION",
    "EXECUTABLE_OPTION",
    "FAIL_OPTION",
    "PROJECT_ARGUMENT",
    "SHOW_OPTION",
    "VERBOSE_OPTION",
]
