# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

from rich.text import Text

from .console import detect_tty, get_console_manager

PACKAGE_LOGGER_NAME: Final[str] = "luals_check"
VERBOSE_ENV: Final[str] = "LUALS_CHECK_VERBOSE"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def verbose_from_env() -> bool:
    """Return ``True`` when :data:`VERBOSE_ENV` requests debug logging."""

    return os.environ.get(VERBOSE_ENV, "").strip().lower() in _TRUTHY


def configure_verbose_logging(enabled: bool) -> logging.Logger:
    """Stream package debug messages to stderr when ``enabled``.

    Args:
        enabled: Whether debug output was requested.

    Returns:
        logging.Logger: The package logger, configured at most once.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not enabled or getattr(logger, "_luals_check_verbose_configured", False):
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s %(name)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_luals_check_verbose_configured", True)
    return logger


def _print_line(
    msg: str,
    *,
    style: str,
    use_emoji: bool,
    use_color: bool | None,
) -> None:
    """Render ``msg`` on the error stream through the shared console manager.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional colour flag; ``False`` disables colour. Colour is
            only used when stderr is a terminal.
    """

    color_enabled = use_color is not False and detect_tty(sys.stderr)
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=True)
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on stderr."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="bold red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "VERBOSE_ENV",
    "configure_verbose_logging",
    "emoji",
    "fail",
    "verbose_from_env",
]
