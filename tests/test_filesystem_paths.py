# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for URI and workspace path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintbridge.filesystem import path_to_uri, uri_to_path, workspace_config_path


@pytest.mark.parametrize(
    ("uri", "expected"),
    [
        ("file:///home/dev/Token.sol", "/home/dev/Token.sol"),
        ("file:///home/dev/My%20Contracts/A.sol", "/home/dev/My Contracts/A.sol"),
        ("/already/a/path.sol", "/already/a/path.sol"),
        ("untitled:Untitled-1", "untitled:Untitled-1"),
    ],
)
def test_uri_to_path(uri: str, expected: str) -> None:
    assert uri_to_path(uri) == expected


def test_path_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "Token.sol"

    assert uri_to_path(path_to_uri(target)) == str(target.resolve())


def test_workspace_config_path() -> None:
    assert workspace_config_path("file:///ws/project/", ".solidhunter.json") == "/ws/project/.solidhunter.json"
    assert workspace_config_path("", ".solidhunter.json") == ""
