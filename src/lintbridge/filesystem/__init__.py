# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers."""

from __future__ import annotations

from .paths import path_to_uri, uri_to_path, workspace_config_path

__all__ = ["path_to_uri", "uri_to_path", "workspace_config_path"]
