# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation orchestration for open documents."""

from __future__ import annotations

from .orchestrator import (
    ConfigPathCache,
    DocumentState,
    DocumentStatus,
    ValidationOrchestrator,
    ValidationRequest,
)

__all__ = [
    "ConfigPathCache",
    "DocumentState",
    "DocumentStatus",
    "ValidationOrchestrator",
    "ValidationRequest",
]
