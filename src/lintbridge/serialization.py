# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting diagnostics to serializable data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .core.models import Diagnostic, Range
from .core.severity import severity_to_lsp


def _range_payload(value: Range) -> dict[str, Any]:
    return {
        "start": {"line": value.start.line, "character": value.start.character},
        "end": {"line": value.end.line, "character": value.end.character},
    }


def diagnostic_to_lsp(diagnostic: Diagnostic) -> dict[str, Any]:
    """Return ``diagnostic`` in the editor-protocol ``Diagnostic`` shape."""

    payload: dict[str, Any] = {
        "range": _range_payload(diagnostic.range),
        "severity": severity_to_lsp(diagnostic.severity),
        "message": diagnostic.message,
        "source": diagnostic.source,
    }
    if diagnostic.code is not None:
        payload["code"] = diagnostic.code
    return payload


def publish_diagnostics_params(uri: str, diagnostics: Sequence[Diagnostic]) -> dict[str, Any]:
    """Return ``textDocument/publishDiagnostics`` parameters for ``uri``."""

    return {"uri": uri, "diagnostics": [diagnostic_to_lsp(diag) for diag in diagnostics]}


def serialize_diagnostic(diagnostic: Diagnostic) -> dict[str, Any]:
    """Convert a diagnostic into a JSON-friendly mapping."""

    return diagnostic.model_dump(mode="json")


__all__ = ["diagnostic_to_lsp", "publish_diagnostics_params", "serialize_diagnostic"]
