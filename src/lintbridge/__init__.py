# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core package metadata and convenience exports."""

from __future__ import annotations

from importlib import metadata

from .analyzer import AnalyzerInvocationError, AnalyzerInvoker
from .core.models import Diagnostic
from .core.severity import Severity
from .orchestration import ValidationOrchestrator
from .parsers import decode

__all__ = [
    "AnalyzerInvocationError",
    "AnalyzerInvoker",
    "Diagnostic",
    "Severity",
    "ValidationOrchestrator",
    "__version__",
    "decode",
]

try:
    __version__ = metadata.version("lintbridge")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
