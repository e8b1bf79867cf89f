# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostics report data models.

The report is a JSON object keyed by ``file://`` URI whose values are arrays
of LSP diagnostics. Fields the renderer does not use (``source``, ``tags``,
``data``) are accepted and ignored.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .severity import Severity


class Position(BaseModel):
    """Zero-based line/character position."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(BaseModel):
    """Start/end positions; equal positions denote a point location."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @property
    def is_point(self) -> bool:
        """Return ``True`` when the range is zero-width."""

        return self.start == self.end


class Location(BaseModel):
    """URI plus range pointing at a secondary source location."""

    model_config = ConfigDict(frozen=True)

    uri: str
    range: Range


class RelatedInformation(BaseModel):
    """Secondary location attached to a diagnostic."""

    model_config = ConfigDict(frozen=True)

    location: Location
    message: str


class Diagnostic(BaseModel):
    """Single issue reported by the analyzer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range: Range
    severity: Severity | None = None
    code: int | str | None = None
    message: str
    related_information: tuple[RelatedInformation, ...] | None = Field(
        default=None,
        alias="relatedInformation",
    )

    @field_validator("severity", mode="before")
    @classmethod
    def _severity_from_lsp(cls, value: object) -> object:
        """Translate the numeric LSP convention into :class:`Severity`."""
        if isinstance(value, int) and not isinstance(value, bool):
            return Severity.from_lsp(value)
        return value


DiagnosticsReport: TypeAlias = dict[str, tuple[Diagnostic, ...]]

_REPORT_ADAPTER: TypeAdapter[DiagnosticsReport] = TypeAdapter(DiagnosticsReport)


def parse_report(text: str | bytes) -> DiagnosticsReport:
    """Validate a JSON document into a :data:`DiagnosticsReport`.

    Args:
        text: Raw JSON content of a diagnostics report.

    Returns:
        DiagnosticsReport: Mapping of URI to diagnostics in file order.

    Raises:
        pydantic.ValidationError: If the document is not valid JSON or does
            not match the report shape.
    """

    return _REPORT_ADAPTER.validate_json(text)


__all__ = [
    "Diagnostic",
    "DiagnosticsReport",
    "Location",
    "Position",
    "Range",
    "RelatedInformation",
    "parse_report",
]
