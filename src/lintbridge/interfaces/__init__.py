# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols shared across lintbridge components."""

from __future__ import annotations

from .config import ConfigSource
from .pipeline import Analyzer, DiagnosticPublisher, WorkspaceFoldersProvider

__all__ = ["Analyzer", "ConfigSource", "DiagnosticPublisher", "WorkspaceFoldersProvider"]
