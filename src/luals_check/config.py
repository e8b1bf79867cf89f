# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for a single analyzer run."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .filesystem.paths import resolve_project_root
from .severity import WEAKEST_SEVERITY, Severity, max_severity

DEFAULT_EXECUTABLE: Final[str] = "lua-language-server"
DEFAULT_FAIL: Final[Severity] = Severity.WARNING
DEFAULT_SHOW: Final[Severity] = Severity.HINT


class ThresholdConfig(BaseModel):
    """Severity cutoffs for failing the run and for displaying diagnostics.

    ``show`` is never stronger than ``fail``: anything that fails the run is
    also displayed.
    """

    model_config = ConfigDict(frozen=True)

    fail: Severity = DEFAULT_FAIL
    show: Severity = DEFAULT_SHOW

    @model_validator(mode="before")
    @classmethod
    def _coerce_show(cls, data: Any) -> Any:
        """Widen ``show`` to ``fail`` when ``fail`` is the weaker level."""
        if not isinstance(data, Mapping):
            return data
        fail = Severity(data.get("fail", DEFAULT_FAIL))
        show = Severity(data.get("show", DEFAULT_SHOW))
        return {**data, "fail": fail, "show": max_severity(show, fail)}


class CheckConfig(BaseModel):
    """Inputs for one ``lua-language-server --check`` run."""

    model_config = ConfigDict(frozen=True)

    executable: str = DEFAULT_EXECUTABLE
    project: Path = Path(".")
    project_root: Path
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    check_level: Severity = WEAKEST_SEVERITY
    color: bool = False
    width: int | None = Field(default=None, gt=0)

    @classmethod
    def for_project(
        cls,
        project: Path,
        *,
        cwd: Path | None = None,
        **overrides: Any,
    ) -> CheckConfig:
        """Build a configuration whose root is ``project`` resolved against ``cwd``.

        Args:
            project: Project path exactly as the user supplied it.
            cwd: Base directory for relative paths. Defaults to ``Path.cwd()``.
            **overrides: Remaining :class:`CheckConfig` fields.

        Returns:
            CheckConfig: Validated configuration.
        """

        return cls(project=project, project_root=resolve_project_root(project, cwd), **overrides)


def build_analyzer_command(config: CheckConfig) -> list[str]:
    """Return the argument vector that starts the analyzer for ``config``."""

    return [
        config.executable,
        "--check",
        str(config.project),
        "--checklevel",
        config.check_level.check_level,
    ]


__all__ = [
    "CheckConfig",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_FAIL",
    "DEFAULT_SHOW",
    "ThresholdConfig",
    "build_analyzer_command",
]
