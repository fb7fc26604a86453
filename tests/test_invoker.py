# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for running the external analyzer."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from lintbridge.analyzer import AnalyzerInvocationError, AnalyzerInvoker
from lintbridge.config import AnalyzerConfig
from lintbridge.core.models import FailureKind


def _invoker(binary: Path | str, **overrides: object) -> AnalyzerInvoker:
    return AnalyzerInvoker(AnalyzerConfig(binary=str(binary), **overrides))


def test_build_command_with_and_without_config() -> None:
    invoker = AnalyzerInvoker(AnalyzerConfig(binary="solidhunter"))

    assert invoker.build_command("/ws/a.sol", "/ws/.solidhunter.json") == [
        "solidhunter",
        "-j",
        "-f",
        "/ws/a.sol",
        "-r",
        "/ws/.solidhunter.json",
    ]
    assert invoker.build_command("/ws/a.sol") == ["solidhunter", "-j", "-f", "/ws/a.sol"]
    assert invoker.build_command("/ws/a.sol", from_stdin=True)[-1] == "--stdin"


def test_lint_file_returns_stdout(fake_analyzer, tmp_path: Path, warning_finding: str) -> None:
    analyzer = fake_analyzer(warning_finding, stderr="note: advisory")
    target = tmp_path / "Token.sol"
    target.write_text("contract Token {}", encoding="utf-8")

    output = asyncio.run(_invoker(analyzer.binary).lint_file(str(target), "/ws/.solidhunter.json"))

    assert output.stdout == warning_finding
    assert output.stderr == "note: advisory"
    assert analyzer.record()["argv"] == ["-j", "-f", str(target), "-r", "/ws/.solidhunter.json"]


def test_lint_content_feeds_stdin(fake_analyzer) -> None:
    analyzer = fake_analyzer("[]")

    output = asyncio.run(_invoker(analyzer.binary).lint_content("/ws/unsaved.sol", "contract A {}"))

    record = analyzer.record()
    assert output.stdout == "[]"
    assert record["stdin"] == "contract A {}"
    assert record["argv"] == ["-j", "-f", "/ws/unsaved.sol", "--stdin"]


def test_empty_path_rejected(fake_analyzer) -> None:
    invoker = _invoker(fake_analyzer().binary)

    with pytest.raises(ValueError):
        asyncio.run(invoker.lint_file(""))
    with pytest.raises(ValueError):
        asyncio.run(invoker.lint_content("", "contract A {}"))


def test_missing_file_does_not_spawn(fake_analyzer, tmp_path: Path) -> None:
    analyzer = fake_analyzer()

    with pytest.raises(AnalyzerInvocationError) as excinfo:
        asyncio.run(_invoker(analyzer.binary).lint_file(str(tmp_path / "absent.sol")))

    assert excinfo.value.kind is FailureKind.MISSING
    assert not analyzer.called


def test_fatal_marker_is_failure_even_on_success_exit(fake_analyzer) -> None:
    analyzer = fake_analyzer("Error: file not found", returncode=0)

    with pytest.raises(AnalyzerInvocationError) as excinfo:
        asyncio.run(_invoker(analyzer.binary).lint_content("/ws/a.sol", ""))

    failure = excinfo.value.failure
    assert failure.kind is FailureKind.FATAL
    assert failure.stdout == "Error: file not found"
    assert "Error: file not found" in str(excinfo.value)


def test_non_zero_exit(fake_analyzer) -> None:
    analyzer = fake_analyzer("[]", stderr="boom", returncode=3)

    with pytest.raises(AnalyzerInvocationError) as excinfo:
        asyncio.run(_invoker(analyzer.binary).lint_content("/ws/a.sol", ""))

    assert excinfo.value.kind is FailureKind.EXIT
    assert excinfo.value.failure.returncode == 3
    assert excinfo.value.failure.stderr == "boom"


@pytest.mark.parametrize("binary", ["/nonexistent/solidhunter", "lintbridge-missing-analyzer-binary"])
def test_spawn_failure(binary: str) -> None:
    with pytest.raises(AnalyzerInvocationError) as excinfo:
        asyncio.run(_invoker(binary).lint_content("/ws/a.sol", ""))

    assert excinfo.value.kind is FailureKind.SPAWN


def test_timeout_kills_analyzer(fake_analyzer) -> None:
    analyzer = fake_analyzer("[]", sleep=10.0)

    with pytest.raises(AnalyzerInvocationError) as excinfo:
        asyncio.run(_invoker(analyzer.binary, timeout=0.5).lint_content("/ws/a.sol", ""))

    assert excinfo.value.kind is FailureKind.TIMEOUT
