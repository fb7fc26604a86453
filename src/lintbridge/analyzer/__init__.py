# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""External analyzer integration."""

from __future__ import annotations

from .invoker import FATAL_OUTPUT_MARKER, AnalyzerInvocationError, AnalyzerInvoker

__all__ = ["FATAL_OUTPUT_MARKER", "AnalyzerInvocationError", "AnalyzerInvoker"]
