# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import DEFAULT_EXECUTABLE, DEFAULT_FAIL, DEFAULT_SHOW
from ..errors import LualsCheckError
from ..logging import configure_verbose_logging, fail, verbose_from_env
from ..pipeline import run_check
from .options import (
    COLOR_OPTION,
    EMOJI_OPTION,
    EXECUTABLE_OPTION,
    FAIL_OPTION,
    PROJECT_ARGUMENT,
    SHOW_OPTION,
    VERBOSE_OPTION,
    CheckCLIOptions,
)

app = typer.Typer(
    name="luals-check",
    help="Check project diagnostics using lua-language-server.",
    add_completion=False,
)


@app.command()
def check(
    project: PROJECT_ARGUMENT = Path("."),
    lua_language_server: EXECUTABLE_OPTION = DEFAULT_EXECUTABLE,
    fail_level: FAIL_OPTION = DEFAULT_FAIL,
    show_level: SHOW_OPTION = DEFAULT_SHOW,
    color: COLOR_OPTION = True,
    emoji: EMOJI_OPTION = False,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Check project diagnostics using lua-language-server."""

    options = CheckCLIOptions(
        project=project,
        executable=lua_language_server,
        fail=fail_level,
        show=show_level,
        color=color,
        emoji=emoji,
        verbose=verbose or verbose_from_env(),
    )
    configure_verbose_logging(options.verbose)
    try:
        run_check(options.to_config())
    except LualsCheckError as exc:
        fail(str(exc), use_emoji=options.emoji, use_color=options.color)
        raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["app"]
