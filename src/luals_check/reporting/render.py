# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for rendering a single diagnostic as terminal text."""

from __future__ import annotations

import shutil
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rich.text import Text

from ..errors import UriError
from ..filesystem.paths import to_relative_path
from ..models import Diagnostic, Location, Position, Range, RelatedInformation
from ..severity import severity_style

INDENT: Final[str] = "    "
RELATED_BULLET: Final[str] = f"{INDENT}• "
CODE_STYLE: Final[str] = "bold"
DEFAULT_TERMINAL_WIDTH: Final[int] = 80
MIN_WRAP_WIDTH: Final[int] = 20


def format_position(position: Position) -> str:
    """Return ``line:character`` for ``position``."""

    return f"{position.line}:{position.character}"


def format_range(range_: Range) -> str:
    """Return a single position for point ranges, otherwise ``start-end``."""

    if range_.is_point:
        return format_position(range_.start)
    return f"{format_position(range_.start)}-{format_position(range_.end)}"


def terminal_width() -> int:
    """Return the active terminal width, honouring ``COLUMNS``."""

    return shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns


def wrap_width(columns: int) -> int:
    """Return the wrap width for a terminal ``columns`` wide."""

    return max(columns - len(INDENT), MIN_WRAP_WIDTH)


def wrap_message(message: str, width: int) -> str:
    """Wrap ``message`` to ``width`` with :data:`INDENT` on every line.

    Embedded newlines are kept; each source line is wrapped on its own. Tabs
    are passed through unchanged.
    """

    wrapped = [
        textwrap.fill(
            line,
            width=width,
            initial_indent=INDENT,
            subsequent_indent=INDENT,
            expand_tabs=False,
            replace_whitespace=False,
        )
        or INDENT
        for line in message.splitlines() or [""]
    ]
    return "\n".join(wrapped)


def is_redundant_related(information: RelatedInformation, diagnostic: Diagnostic) -> bool:
    """Return ``True`` when ``information`` only restates ``diagnostic``."""

    return information.location.range == diagnostic.range and (
        not information.message or information.message == diagnostic.message
    )


def format_location(location: Location, project_root: Path) -> str:
    """Return ``path:range`` for ``location``, falling back to the raw URI."""

    try:
        display = to_relative_path(location.uri, project_root).as_posix()
    except UriError:
        display = location.uri
    return f"{display}:{format_range(location.range)}"


@dataclass(frozen=True, slots=True)
class DiagnosticRenderer:
    """Render diagnostics as rich :class:`Text`, styled only when ``color`` is set.

    ``Text.plain`` of every rendered block is identical whether colour is on
    or off.
    """

    project_root: Path
    color: bool = False
    width: int | None = None

    def render(self, path: str, diagnostic: Diagnostic) -> Text:
        """Return the header, message and related-location lines for ``diagnostic``.

        Args:
            path: Display path of the file the diagnostic belongs to.
            diagnostic: Diagnostic to render.

        Returns:
            Text: Multi-line block without a trailing newline.
        """

        text = Text(f"{path}:{format_range(diagnostic.range)}")
        if diagnostic.code is not None:
            text.append(" [")
            text.append(str(diagnostic.code), style=self._style(CODE_STYLE))
            text.append("]")
        text.append("\n")

        width = self.width if self.width is not None else wrap_width(terminal_width())
        label = diagnostic.severity.label if diagnostic.severity is not None else ""
        message_start = len(text) + len(INDENT)
        text.append(wrap_message(f"{label}: {diagnostic.message}", width))
        if diagnostic.severity is not None and self.color:
            text.stylize(severity_style(diagnostic.severity), message_start, message_start + len(label))

        for information in diagnostic.related_information or ():
            if is_redundant_related(information, diagnostic):
                continue
            text.append("\n")
            text.append(RELATED_BULLET)
            text.append(format_location(information.location, self.project_root))
            if information.message:
                text.append(f": {information.message}")
        return text

    def _style(self, style: str) -> str | None:
        return style if self.color else None


__all__ = [
    "DiagnosticRenderer",
    "INDENT",
    "format_location",
    "format_position",
    "format_range",
    "is_redundant_related",
    "terminal_width",
    "wrap_message",
    "wrap_width",
]
