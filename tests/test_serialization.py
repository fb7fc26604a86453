# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for presentation payload helpers."""

from lintbridge.core.models import Diagnostic, Range
from lintbridge.core.severity import Severity
from lintbridge.serialization import diagnostic_to_lsp, publish_diagnostics_params, serialize_diagnostic


def _diag(**overrides: object) -> Diagnostic:
    values: dict[str, object] = {
        "severity": Severity.WARNING,
        "range": Range.create(4, 9, 4, 20),
        "message": "bad name",
    }
    values.update(overrides)
    return Diagnostic(**values)


def test_diagnostic_to_lsp() -> None:
    assert diagnostic_to_lsp(_diag()) == {
        "range": {"start": {"line": 4, "character": 9}, "end": {"line": 4, "character": 20}},
        "severity": 2,
        "message": "bad name",
        "source": "solidhunter",
    }


def test_code_included_when_present() -> None:
    assert diagnostic_to_lsp(_diag(code="naming"))["code"] == "naming"


def test_publish_params_preserve_order() -> None:
    params = publish_diagnostics_params(
        "file:///ws/A.sol",
        [_diag(message="one"), _diag(message="two", severity=Severity.ERROR)],
    )

    assert params["uri"] == "file:///ws/A.sol"
    assert [entry["message"] for entry in params["diagnostics"]] == ["one", "two"]
    assert params["diagnostics"][1]["severity"] == 1


def test_serialize_diagnostic_uses_enum_values() -> None:
    payload = serialize_diagnostic(_diag())

    assert payload["severity"] == "warning"
    assert payload["range"]["start"] == {"line": 4, "character": 9}
