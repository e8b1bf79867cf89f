# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Diagnostic severity levels, strongest first.

    Member values are the spellings accepted on the command line. Ordering is
    defined by :attr:`rank` (the LSP numeric convention), never by the string
    value.
    """

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "info"
    HINT = "hint"

    @property
    def rank(self) -> int:
        """Return the LSP numeric value (1 = error ... 4 = hint)."""

        return _LSP_VALUES[self]

    @property
    def label(self) -> str:
        """Return the label shown in front of rendered messages."""

        return self.value

    @property
    def check_level(self) -> str:
        """Return the spelling ``lua-language-server --checklevel`` expects."""

        return _CHECK_LEVELS[self]

    @classmethod
    def from_lsp(cls, value: int) -> Severity:
        """Return the member matching the LSP numeric ``value``.

        Args:
            value: Numeric severity as written in a diagnostics report.

        Returns:
            Severity: Matching severity member.

        Raises:
            ValueError: If ``value`` is not one of the four LSP severities.
        """

        for member, number in _LSP_VALUES.items():
            if number == value:
                return member
        raise ValueError(f"unknown diagnostic severity {value!r}; expected 1-4")


_LSP_VALUES: Final[dict[Severity, int]] = {
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFORMATION: 3,
    Severity.HINT: 4,
}

_CHECK_LEVELS: Final[dict[Severity, str]] = {
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
    Severity.INFORMATION: "Information",
    Severity.HINT: "Hint",
}

SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.ERROR: "bold bright_red",
    Severity.WARNING: "bright_yellow",
    Severity.INFORMATION: "bright_white",
    Severity.HINT: "bright_cyan",
}

WEAKEST_SEVERITY: Final[Severity] = Severity.HINT


def compare_severity(a: Severity, b: Severity) -> int:
    """Return ``-1``, ``0`` or ``1`` as ``a`` is stronger, equal or weaker than ``b``."""

    return (a.rank > b.rank) - (a.rank < b.rank)


def max_severity(a: Severity, b: Severity) -> Severity:
    """Return whichever of ``a`` and ``b`` sorts later, i.e. the weaker level."""

    return a if a.rank >= b.rank else b


def is_at_least(severity: Severity, threshold: Severity) -> bool:
    """Return ``True`` when ``severity`` is at or stronger than ``threshold``."""

    return severity.rank <= threshold.rank


def severity_style(severity: Severity) -> str:
    """Return the rich style used to highlight ``severity``."""

    return SEVERITY_STYLES[severity]


__all__ = [
    "SEVERITY_STYLES",
    "Severity",
    "WEAKEST_SEVERITY",
    "compare_severity",
    "is_at_least",
    "max_severity",
    "severity_style",
]
