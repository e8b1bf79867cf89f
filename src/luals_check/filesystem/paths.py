# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for mapping report URIs onto paths under the project root."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import Final
from urllib.parse import urlsplit
from urllib.request import url2pathname

from ..errors import InvalidUri, ProjectRootError, UnsupportedUriScheme, UriConversionError

_Pathish = str | PathLike[str] | Path
FILE_SCHEME: Final[str] = "file"
_LOCAL_HOSTS: Final[frozenset[str]] = frozenset({"", "localhost"})


def resolve_project_root(project: _Pathish, cwd: _Pathish | None = None) -> Path:
    """Return ``project`` as an absolute, lexically normalised path.

    Symlinks are not resolved so that report URIs, which the analyzer builds
    from the path it was given, still share a prefix with the root.

    Args:
        project: Project path as supplied by the caller.
        cwd: Directory relative paths are anchored to. Defaults to
            ``Path.cwd()``.

    Returns:
        Path: Absolute project root.

    Raises:
        ProjectRootError: If ``project`` is relative and the current working
            directory cannot be determined.

    """

    raw = Path(project).expanduser()
    if raw.is_absolute():
        candidate = raw
    elif cwd is not None:
        candidate = Path(cwd) / raw
    else:
        try:
            candidate = Path.cwd() / raw
        except OSError as exc:
            raise ProjectRootError(raw, exc.strerror or str(exc)) from exc
    return Path(os.path.normpath(candidate))


def uri_to_path(uri: str) -> Path:
    """Convert a ``file`` URI into an absolute filesystem path.

    Args:
        uri: URI key taken from a diagnostics report.

    Returns:
        Path: Local filesystem path named by ``uri``, with ``.`` and ``..``
        segments removed.

    Raises:
        InvalidUri: If ``uri`` is not an absolute URI.
        UnsupportedUriScheme: If the scheme is not ``file``.
        UriConversionError: If the URI names a remote host or a relative path.

    """

    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise InvalidUri(uri) from exc
    if not parts.scheme:
        raise InvalidUri(uri)
    if parts.scheme.lower() != FILE_SCHEME:
        raise UnsupportedUriScheme(uri, parts.scheme)
    if parts.netloc.lower() not in _LOCAL_HOSTS:
        raise UriConversionError(uri)
    path = Path(os.path.normpath(url2pathname(parts.path)))
    if not path.is_absolute():
        raise UriConversionError(uri)
    return path


def relative_display_path(path: _Pathish, root: _Pathish) -> Path:
    """Return ``path`` relative to ``root`` when the two can be related.

    Args:
        path: Absolute path to present.
        root: Project root used for relativisation.

    Returns:
        Path: Relative path (possibly with ``..`` components) or the original
        absolute path when no relative form exists, e.g. across drives.

    """

    candidate = Path(path)
    base = Path(root)
    try:
        return candidate.relative_to(base)
    except ValueError:
        try:
            return Path(os.path.relpath(candidate, base))
        except ValueError:
            return candidate


def to_relative_path(uri: str, root: _Pathish) -> Path:
    """Return the display path for ``uri`` relative to ``root``.

    Raises:
        UriError: If ``uri`` cannot be converted to a local path.
    """

    return relative_display_path(uri_to_path(uri), root)


def is_within_project(uri: str, root: _Pathish) -> bool:
    """Return ``True`` when ``uri`` points at ``root`` or one of its descendants.

    A ``file`` URI that cannot be converted to a local path is treated as
    in-project. Unparseable URIs and other schemes still raise.

    Raises:
        InvalidUri: If ``uri`` is not an absolute URI.
        UnsupportedUriScheme: If the scheme is not ``file``.

    """

    try:
        path = uri_to_path(uri)
    except UriConversionError:
        return True
    return path.is_relative_to(Path(root))


__all__ = (
    "FILE_SCHEME",
    "is_within_project",
    "relative_display_path",
    "resolve_project_root",
    "to_relative_path",
    "uri_to_path",
)
