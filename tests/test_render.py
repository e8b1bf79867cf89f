# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for diagnostic rendering."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

from luals_check.models import Diagnostic, Range
from luals_check.reporting.render import (
    INDENT,
    DiagnosticRenderer,
    format_range,
    is_redundant_related,
    wrap_message,
    wrap_width,
)

ROOT = Path("/proj")


def _range(start: tuple[int, int], end: tuple[int, int] | None = None) -> dict[str, Any]:
    end = end or start
    return {
        "start": {"line": start[0], "character": start[1]},
        "end": {"line": end[0], "character": end[1]},
    }


def _diagnostic(**fields: Any) -> Diagnostic:
    payload: dict[str, Any] = {"range": _range((0, 0)), "severity": 1, "message": "bad"}
    payload.update(fields)
    return Diagnostic.model_validate(payload)


def _renderer(*, color: bool = False, width: int = 76) -> DiagnosticRenderer:
    return DiagnosticRenderer(project_root=ROOT, color=color, width=width)


def test_point_range_renders_single_position() -> None:
    assert format_range(Range.model_validate(_range((3, 7)))) == "3:7"


def test_span_range_renders_start_and_end() -> None:
    assert format_range(Range.model_validate(_range((3, 7), (4, 0)))) == "3:7-4:0"


def test_render_basic_diagnostic() -> None:
    text = _renderer().render("a.lua", _diagnostic())
    assert text.plain == "a.lua:0:0\n    error: bad"


def test_render_includes_code() -> None:
    diagnostic = _diagnostic(range=_range((1, 6), (1, 7)), severity=2, code="unused-local", message="Unused local `x`.")
    text = _renderer().render("src/a.lua", diagnostic)
    assert text.plain == "src/a.lua:1:6-1:7 [unused-local]\n    warning: Unused local `x`."


def test_render_numeric_code() -> None:
    assert _renderer().render("a.lua", _diagnostic(code=42)).plain.startswith("a.lua:0:0 [42]\n")


def test_render_without_severity_has_empty_label() -> None:
    text = _renderer().render("a.lua", _diagnostic(severity=None, message="odd"))
    assert text.plain.splitlines()[1] == "    : odd"


def test_redundant_related_information_is_omitted() -> None:
    diagnostic = _diagnostic(
        relatedInformation=[
            {"location": {"uri": "file:///proj/a.lua", "range": _range((0, 0))}, "message": ""},
            {"location": {"uri": "file:///proj/a.lua", "range": _range((0, 0))}, "message": "bad"},
        ],
    )
    assert all(is_redundant_related(info, diagnostic) for info in diagnostic.related_information or ())
    assert _renderer().render("a.lua", diagnostic).plain == "a.lua:0:0\n    error: bad"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX file URIs")
def test_related_information_is_rendered() -> None:
    diagnostic = _diagnostic(
        relatedInformation=[
            {"location": {"uri": "file:///proj/a.lua", "range": _range((0, 0))}, "message": "also here"},
            {"location": {"uri": "file:///proj/lib/b.lua", "range": _range((5, 1), (5, 9))}, "message": ""},
            {"location": {"uri": "untitled:Untitled-1", "range": _range((2, 0))}, "message": "scratch"},
        ],
    )
    lines = _renderer().render("a.lua", diagnostic).plain.splitlines()
    assert lines[2:] == [
        "    • a.lua:0:0: also here",
        "    • lib/b.lua:5:1-5:9",
        "    • untitled:Untitled-1:2:0: scratch",
    ]


def test_long_messages_are_wrapped_with_indent() -> None:
    message = "word " * 30
    text = _renderer(width=30).render("a.lua", _diagnostic(message=message.strip()))
    body = text.plain.splitlines()[1:]
    assert len(body) > 1
    assert all(line.startswith(INDENT) and len(line) <= 30 for line in body)
    assert body[0].startswith("    error: word")


def test_wrap_keeps_embedded_newlines() -> None:
    assert wrap_message("error: first\nsecond", 40) == "    error: first\n    second"


def test_wrap_keeps_tabs() -> None:
    text = _renderer().render("a.lua", _diagnostic(severity=2, message="a\tb"))
    assert text.plain == "a.lua:0:0\n    warning: a\tb"


def test_wrap_width_subtracts_indent_with_floor() -> None:
    assert wrap_width(80) == 76
    assert wrap_width(10) == 20


def test_color_is_a_pure_overlay() -> None:
    diagnostic = _diagnostic(code="undefined-global")
    plain = _renderer(color=False).render("a.lua", diagnostic)
    colored = _renderer(color=True).render("a.lua", diagnostic)

    assert colored.plain == plain.plain
    assert not plain.spans
    styles = {str(span.style) for span in colored.spans}
    assert "bold bright_red" in styles
    assert "bold" in styles
    label_span = next(span for span in colored.spans if str(span.style) == "bold bright_red")
    assert colored.plain[label_span.start : label_span.end] == "error"
