# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for diagnostic output."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from functools import cache

from rich.console import Console


def detect_tty() -> bool:
    """Return whether stdout is an interactive terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


@dataclass(frozen=True, slots=True)
class ConsoleProfile:
    """Rendering preferences that select one shared console."""

    color: bool
    emoji: bool
    terminal: bool

    def build(self) -> Console:
        styled = self.color and self.terminal
        return Console(
            color_system="auto" if styled else None,
            force_terminal=self.terminal,
            no_color=not styled,
            emoji=self.emoji,
            soft_wrap=True,
        )


@dataclass(slots=True)
class RichConsoleManager:
    """Hand out one console per :class:`ConsoleProfile` seen by the process."""

    consoles: dict[ConsoleProfile, Console] = field(default_factory=dict)

    def get(self, *, color: bool, emoji: bool) -> Console:
        profile = ConsoleProfile(color=color, emoji=emoji, terminal=detect_tty())
        console = self.consoles.get(profile)
        if console is None:
            console = self.consoles[profile] = profile.build()
        return console


@cache
def get_console_manager() -> RichConsoleManager:
    return RichConsoleManager()


__all__ = ["ConsoleProfile", "RichConsoleManager", "detect_tty", "get_console_manager"]
