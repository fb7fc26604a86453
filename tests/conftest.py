# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

_SCRIPT_TEMPLATE = """#!{python}
import json
import sys
import time

record = {{"argv": sys.argv[1:], "stdin": None}}
if "--stdin" in sys.argv:
    record["stdin"] = sys.stdin.read()
with open({record_path!r}, "w", encoding="utf-8") as handle:
    json.dump(record, handle)
time.sleep({sleep!r})
sys.stdout.write({stdout!r})
sys.stderr.write({stderr!r})
sys.exit({returncode!r})
"""

WARNING_FINDING = (
    '[{"range":{"start":{"line":5,"character":9},"end":{"line":5,"character":20}},'
    '"severity":"WARNING","message":"bad name","uri":"test.sol"}]'
)


@dataclass(slots=True)
class FakeAnalyzer:
    """Executable stand-in for the analyzer that records how it was called."""

    binary: Path
    record_path: Path

    def record(self) -> dict[str, Any]:
        return json.loads(self.record_path.read_text(encoding="utf-8"))

    @property
    def called(self) -> bool:
        return self.record_path.exists()


FakeAnalyzerFactory = Callable[..., FakeAnalyzer]


@pytest.fixture
def fake_analyzer(tmp_path: Path) -> FakeAnalyzerFactory:
    """Return a factory writing executable fake analyzers into ``tmp_path``."""

    counter = 0

    def _factory(
        stdout: str = "[]",
        *,
        stderr: str = "",
        returncode: int = 0,
        sleep: float = 0.0,
    ) -> FakeAnalyzer:
        nonlocal counter
        counter += 1
        binary = tmp_path / f"fake-analyzer-{counter}"
        record_path = tmp_path / f"fake-analyzer-{counter}.json"
        binary.write_text(
            _SCRIPT_TEMPLATE.format(
                python=sys.executable,
                record_path=str(record_path),
                sleep=sleep,
                stdout=stdout,
                stderr=stderr,
                returncode=returncode,
            ),
            encoding="utf-8",
        )
        binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeAnalyzer(binary=binary, record_path=record_path)

    return _factory


@pytest.fixture
def warning_finding() -> str:
    """Return analyzer stdout holding a single WARNING finding on line 5."""
    return WARNING_FINDING
