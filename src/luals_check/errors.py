# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for analyzer execution and report handling.

Every failure is terminal for a run. The CLI prints ``str(exc)`` once to the
error stream and exits with :attr:`LualsCheckError.exit_code`.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Final

ANALYZER_NAME: Final[str] = "lua-language-server"
PROBLEMS_EXIT_CODE: Final[int] = 1
TOOL_FAILURE_EXIT_CODE: Final[int] = 2


class LualsCheckError(RuntimeError):
    """Base error raised when a check run cannot complete successfully."""

    exit_code: int = TOOL_FAILURE_EXIT_CODE


class SpawnFailure(LualsCheckError):
    """Raised when the analyzer process cannot be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"Failed to start {command[0] if command else ANALYZER_NAME!r}: {reason}")
        self.command = tuple(command)
        self.reason = reason


class AnalyzerFailure(LualsCheckError):
    """Raised when the analyzer exits with a non-zero status."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"{ANALYZER_NAME} failed: exit status {returncode}")
        self.returncode = returncode


class StreamFailure(LualsCheckError):
    """Raised when draining the analyzer's standard output fails."""


class OutputDecodeFailure(LualsCheckError):
    """Raised when the analyzer writes bytes that are not valid UTF-8."""

    def __init__(self, output: bytes) -> None:
        preview = output.decode("utf-8", errors="replace")
        super().__init__(f"{ANALYZER_NAME} wrote invalid UTF-8 to stdout: {preview!r}")


class ProjectRootError(LualsCheckError):
    """Raised when a relative project path cannot be anchored to the working directory."""

    def __init__(self, project: Path, reason: str) -> None:
        super().__init__(f"Failed to resolve project path {str(project)!r}: {reason}")
        self.project = project


class ReportLocationError(LualsCheckError):
    """Raised when the diagnostics report path cannot be found in the output."""


class EmptyOutput(ReportLocationError):
    """Raised when the analyzer wrote no lines at all."""

    def __init__(self, output: str) -> None:
        super().__init__(f"{ANALYZER_NAME} didn't write any lines: {output!r}")


class NoPathToken(ReportLocationError):
    """Raised when the last output line has no whitespace-separated token."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Last line of {ANALYZER_NAME} output doesn't contain any data: {line!r}")
        self.line = line


class ReportError(LualsCheckError):
    """Raised when the diagnostics report file cannot be used."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ReportFileMissing(ReportError):
    """Raised when the reported diagnostics file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{ANALYZER_NAME} diagnostics file doesn't exist: {str(path)!r}", path)


class ReadFailure(ReportError):
    """Raised when the diagnostics file exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read diagnostics file {str(path)!r}: {reason}", path)


class MalformedReport(ReportError):
    """Raised when the diagnostics file is not a valid diagnostics report."""

    def __init__(self, path: Path, error: Exception) -> None:
        super().__init__(f"Failed to deserialize diagnostics file {str(path)!r}: {error}", path)
        self.error = error


class UriError(LualsCheckError):
    """Raised when a report URI cannot be mapped onto the filesystem."""

    def __init__(self, message: str, uri: str) -> None:
        super().__init__(message)
        self.uri = uri


class InvalidUri(UriError):
    """Raised when a report key is not an absolute URI."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Failed to parse URL: {uri!r}", uri)


class UnsupportedUriScheme(UriError):
    """Raised when a report URI uses a scheme other than ``file``."""

    def __init__(self, uri: str, scheme: str) -> None:
        super().__init__(f"URL {uri!r} has unknown scheme {scheme!r}; expected 'file'", uri)
        self.scheme = scheme


class UriConversionError(UriError):
    """Raised when a ``file`` URI does not name a local filesystem path."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Failed to convert URL to file path: {uri!r}", uri)


class AggregateFailure(LualsCheckError):
    """Raised when one or more diagnostics meet the failure threshold."""

    exit_code = PROBLEMS_EXIT_CODE

    def __init__(self, count: int) -> None:
        super().__init__(f"{ANALYZER_NAME} found {count} problems")
        self.count = count


__all__ = [
    "ANALYZER_NAME",
    "AggregateFailure",
    "AnalyzerFailure",
    "EmptyOutput",
    "InvalidUri",
    "LualsCheckError",
    "MalformedReport",
    "NoPathToken",
    "OutputDecodeFailure",
    "PROBLEMS_EXIT_CODE",
    "ProjectRootError",
    "ReadFailure",
    "ReportError",
    "ReportFileMissing",
    "ReportLocationError",
    "SpawnFailure",
    "StreamFailure",
    "TOOL_FAILURE_EXIT_CODE",
    "UnsupportedUriScheme",
    "UriConversionError",
    "UriError",
]
