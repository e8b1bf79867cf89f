# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the analyzer while streaming and capturing its standard output."""

from __future__ import annotations

import logging
import shutil
import shlex

# Bandit: subprocess usage is intentional; the analyzer is started from an
# argument list without shell expansion.
import subprocess  # nosec B404
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Final

from .errors import AnalyzerFailure, OutputDecodeFailure, SpawnFailure, StreamFailure

LOGGER = logging.getLogger(__name__)

_CHUNK_SIZE: Final[int] = 1024
_INITIAL_CAPACITY: Final[int] = 4096


@dataclass(frozen=True, slots=True)
class AnalyzerOutput:
    """Captured standard output and exit status of a finished analyzer."""

    stdout: bytes
    returncode: int


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise SpawnFailure(args, f"executable {head!r} was not found on PATH")
    return [resolved, *rest]


def _drain(stream: IO[bytes], echo: IO[bytes]) -> bytes:
    """Copy ``stream`` to ``echo`` chunk by chunk and return everything read.

    The stream is closed on exit, including on failure, so the child sees a
    broken pipe instead of blocking on a full buffer.
    """

    captured = bytearray()
    with stream:
        while chunk := stream.read1(_CHUNK_SIZE):  # type: ignore[attr-defined]
            captured += chunk
            echo.write(chunk)
            echo.flush()
    return bytes(captured)


def _default_echo() -> IO[bytes]:
    return sys.stdout.buffer


def run_analyzer(command: Sequence[str], *, echo: IO[bytes] | None = None) -> AnalyzerOutput:
    """Execute ``command``, echoing its stdout live while capturing it.

    The drain runs on a dedicated worker thread while this thread waits for
    the process to exit. The worker is always joined before returning or
    raising.

    Args:
        command: Analyzer argument vector; the first item is the executable.
        echo: Binary stream receiving the live copy of the output. Defaults
            to ``sys.stdout.buffer``.

    Returns:
        AnalyzerOutput: Captured bytes and a zero exit status.

    Raises:
        SpawnFailure: If the executable cannot be found or started.
        StreamFailure: If reading or echoing the output fails.
        AnalyzerFailure: If the analyzer exits with a non-zero status.
    """

    normalized = _normalize_args(command)
    sink = echo if echo is not None else _default_echo()
    LOGGER.debug("Running %s", shlex.join(normalized))
    try:
        # Bandit: the argument list is built from CLI options, never a shell string.
        process = subprocess.Popen(normalized, stdout=subprocess.PIPE)  # nosec B603
    except OSError as exc:
        raise SpawnFailure(normalized, exc.strerror or str(exc)) from exc

    if process.stdout is None:  # pragma: no cover - guaranteed by stdout=PIPE
        process.kill()
        process.wait()
        raise StreamFailure("analyzer process doesn't have a stdout handle")

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="luals-stdout") as executor:
        future = executor.submit(_drain, process.stdout, sink)
        returncode = process.wait()
        LOGGER.debug("Analyzer exited with status %d", returncode)
        try:
            stdout = future.result()
        except Exception as exc:
            raise StreamFailure(f"Failed to read analyzer output: {exc}") from exc

    if returncode != 0:
        raise AnalyzerFailure(returncode)
    return AnalyzerOutput(stdout=stdout, returncode=returncode)


def decode_output(stdout: bytes) -> str:
    """Return ``stdout`` decoded as strict UTF-8.

    Raises:
        OutputDecodeFailure: If the bytes are not valid UTF-8.
    """

    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeFailure(stdout) from exc


__all__ = ["AnalyzerOutput", "decode_output", "run_analyzer"]
