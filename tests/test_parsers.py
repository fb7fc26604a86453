# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering analyzer output decoding."""

import json

import pytest

from lintbridge.core.models import Diagnostic
from lintbridge.core.severity import Severity
from lintbridge.parsers import FindingsParser, decode, parse_finding


def _finding(line: int, message: str, severity: str = "ERROR", character: int = 0) -> dict[str, object]:
    return {
        "range": {
            "start": {"line": line, "character": character},
            "end": {"line": line, "character": character + 4},
        },
        "severity": severity,
        "message": message,
        "uri": "contracts/Token.sol",
    }


@pytest.mark.parametrize("payload", ["", "   \n", "not json", "{}", '{"range": {}}', "42", '"text"', "null"])
def test_rejected_payloads_yield_nothing(payload: str) -> None:
    assert decode(payload) == []


def test_none_payload_yields_nothing() -> None:
    assert decode(None) == []


def test_single_warning(warning_finding: str) -> None:
    diags = decode(warning_finding)

    assert len(diags) == 1
    diag = diags[0]
    assert isinstance(diag, Diagnostic)
    assert diag.severity is Severity.WARNING
    assert (diag.range.start.line, diag.range.start.character) == (4, 9)
    assert (diag.range.end.line, diag.range.end.character) == (4, 20)
    assert diag.message == "bad name"
    assert diag.source == "solidhunter"


def test_bad_range_dropped_and_order_kept() -> None:
    payload = json.dumps(
        [
            _finding(3, "first"),
            _finding(0, "broken"),
            _finding(1, "second", severity="HINT"),
            _finding(9, "third", severity="INFO"),
        ],
    )

    diags = decode(payload)

    assert [diag.message for diag in diags] == ["first", "second", "third"]
    assert [diag.severity for diag in diags] == [Severity.ERROR, Severity.HINT, Severity.INFO]


def test_malformed_entries_do_not_abort_decoding() -> None:
    payload = json.dumps(
        [
            "garbage",
            {"severity": "ERROR", "message": "no range"},
            _finding(2, "kept", severity="WARNING"),
            {"range": {"start": {"line": "x"}}, "message": "bad"},
        ],
    )

    assert [diag.message for diag in decode(payload)] == ["kept"]


def test_unknown_severity_kept_as_error() -> None:
    diags = decode(json.dumps([_finding(2, "odd", severity="CRITICAL")]))

    assert diags[0].severity is Severity.ERROR


def test_non_string_severities_still_decode() -> None:
    items = [_finding(2, "numeric"), _finding(3, "null"), _finding(4, "list"), _finding(5, "missing")]
    items[0]["severity"] = 2
    items[1]["severity"] = None
    items[2]["severity"] = ["x"]
    del items[3]["severity"]

    diags = decode(json.dumps(items))

    assert [diag.message for diag in diags] == ["numeric", "null", "list", "missing"]
    assert {diag.severity for diag in diags} == {Severity.ERROR}


def test_bytes_payload_and_extra_fields() -> None:
    item = _finding(4, "with extras")
    item["sourceFileContent"] = "contract Test_ {}"
    item["range"]["length"] = 5  # type: ignore[index]
    item["code"] = 101

    diags = decode(json.dumps([item]).encode())

    assert diags[0].message == "with extras"
    assert diags[0].code == "101"


def test_parser_stamps_configured_source(warning_finding: str) -> None:
    diags = FindingsParser(source="custom").parse(warning_finding)

    assert diags[0].source == "custom"


def test_parse_finding_rejects_non_mapping() -> None:
    assert parse_finding(["not", "a", "mapping"]) is None
    assert parse_finding(_finding(1, "ok")) is not None


def test_diagnostics_are_immutable(warning_finding: str) -> None:
    diag = decode(warning_finding)[0]

    with pytest.raises(ValueError):
        diag.message = "changed"  # type: ignore[misc]
