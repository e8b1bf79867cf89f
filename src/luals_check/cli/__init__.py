# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""luals-check CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app
from .options import CheckCLIOptions

__all__: Final[list[str]] = ["CheckCLIOptions", "app"]
