# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models and helpers for the diagnostic pipeline."""

from __future__ import annotations

from .models import Diagnostic, Position, Range, RawFinding
from .positions import PositionError, to_zero_based
from .severity import Severity, map_severity, severity_to_lsp

__all__ = [
    "Diagnostic",
    "Position",
    "PositionError",
    "Range",
    "RawFinding",
    "Severity",
    "map_severity",
    "severity_to_lsp",
    "to_zero_based",
]
