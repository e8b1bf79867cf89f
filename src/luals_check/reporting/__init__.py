# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: diagnostic rendering for terminal output."""

from .render import (
    INDENT,
    DiagnosticRenderer,
    format_location,
    format_position,
    format_range,
    is_redundant_related,
    terminal_width,
    wrap_message,
    wrap_width,
)

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
