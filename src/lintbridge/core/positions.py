# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate analyzer positions into editor coordinates."""

from __future__ import annotations

from .models import Position, Range, RawPosition, RawRange


class PositionError(ValueError):
    """Raised when an analyzer range cannot be mapped onto the document."""


def _translate(position: RawPosition) -> Position:
    line = position.line - 1
    if line < 0:
        raise PositionError(f"line {position.line} is not a valid 1-based line number")
    if position.character < 0:
        raise PositionError(f"character {position.character} is negative")
    return Position(line=line, character=position.character)


def to_zero_based(raw: RawRange) -> Range:
    """Return ``raw`` converted to zero-based line numbers.

    Only the line component is decremented; character offsets are already
    zero-based on both sides and pass through unchanged.

    Args:
        raw: Range reported by the analyzer.

    Returns:
        Range: Range expressed in editor coordinates.

    Raises:
        PositionError: If the translated range would point before the start of the document.
    """

    return Range(start=_translate(raw.start), end=_translate(raw.end))


__all__ = ["PositionError", "to_zero_based"]
