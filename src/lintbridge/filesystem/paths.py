# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for converting between document URIs and filesystem paths."""

from __future__ import annotations

from pathlib import Path
from typing import Final
from urllib.parse import unquote, urlparse

FILE_SCHEME: Final[str] = "file"


def uri_to_path(uri: str) -> str:
    """Return the filesystem path addressed by ``uri``.

    ``file://`` URIs are decoded; anything else is returned unchanged so that
    bare paths and untitled documents still reach the analyzer.

    Args:
        uri: Document URI or plain path.

    Returns:
        str: Path string suitable for the analyzer command line.
    """

    parsed = urlparse(uri)
    if parsed.scheme != FILE_SCHEME:
        return uri
    path = unquote(parsed.path)
    if parsed.netloc and parsed.netloc != "localhost":
        path = f"//{parsed.netloc}{path}"
    return path


def path_to_uri(path: str | Path) -> str:
    """Return a ``file://`` URI for ``path``."""

    return Path(path).resolve().as_uri()


def workspace_config_path(folder: str, filename: str) -> str:
    """Return the analyzer configuration path inside a workspace folder.

    Args:
        folder: Workspace folder URI or path.
        filename: Configuration file name appended to the folder.

    Returns:
        str: Joined path, or an empty string when ``folder`` is empty.
    """

    root = uri_to_path(folder).rstrip("/")
    if not root:
        return ""
    return f"{root}/{filename}"


__all__ = ["path_to_uri", "uri_to_path", "workspace_config_path"]
