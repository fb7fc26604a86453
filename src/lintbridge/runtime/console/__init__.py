# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console helpers built on Rich."""

from __future__ import annotations

from .manager import ConsoleProfile, RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleProfile", "RichConsoleManager", "detect_tty", "get_console_manager"]
