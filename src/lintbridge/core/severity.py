# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels understood by editor diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


_LABEL_TO_SEVERITY: Final[dict[str, Severity]] = {
    "ERROR": Severity.ERROR,
    "WARNING": Severity.WARNING,
    "INFO": Severity.INFO,
    "HINT": Severity.HINT,
}

_SEVERITY_TO_LSP: Final[dict[Severity, int]] = {
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFO: 3,
    Severity.HINT: 4,
}


def map_severity(label: object, default: Severity = Severity.ERROR) -> Severity:
    """Return the :class:`Severity` for an analyzer severity label.

    Labels are matched exactly; anything outside the table (other casing, the
    empty string, non-string values) resolves to ``default`` so a finding is
    never dropped because of its severity.

    Args:
        label: Severity label emitted by the analyzer.
        default: Severity used when ``label`` is not recognised.

    Returns:
        Severity: Normalised severity value.
    """

    if isinstance(label, str):
        return _LABEL_TO_SEVERITY.get(label, default)
    return default


def severity_to_lsp(severity: Severity) -> int:
    """Map :class:`Severity` to the editor-protocol ``DiagnosticSeverity`` value."""

    return _SEVERITY_TO_LSP.get(severity, 1)


__all__ = ["Severity", "map_severity", "severity_to_lsp"]
