# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for analyzer severity label mapping."""

import pytest

from lintbridge.core.severity import Severity, map_severity, severity_to_lsp


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("ERROR", Severity.ERROR),
        ("WARNING", Severity.WARNING),
        ("INFO", Severity.INFO),
        ("HINT", Severity.HINT),
    ],
)
def test_known_labels(label: str, expected: Severity) -> None:
    assert map_severity(label) is expected


@pytest.mark.parametrize("label", ["", "warning", "Warning", "FATAL", " ERROR", None, 2])
def test_unknown_labels_default_to_error(label: object) -> None:
    assert map_severity(label) is Severity.ERROR


def test_lsp_values() -> None:
    assert [severity_to_lsp(sev) for sev in Severity] == [1, 2, 3, 4]
