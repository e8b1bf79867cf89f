# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem utilities for URI and path handling."""

from __future__ import annotations

from .paths import (
    is_within_project,
    relative_display_path,
    resolve_project_root,
    to_relative_path,
    uri_to_path,
)

__all__ = [
    "is_within_project",
    "relative_display_path",
    "resolve_project_root",
    "to_relative_path",
    "uri_to_path",
]
