# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interfaces between the diagnostic pipeline and its collaborators."""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import Protocol, runtime_checkable

from ..core.models import AnalyzerOutput, Diagnostic


@runtime_checkable
class Analyzer(Protocol):
    """Run the external analyzer for one document."""

    async def lint_file(self, path: str, config_path: str = "") -> AnalyzerOutput:
        """Lint the on-disk file at ``path``."""

    async def lint_content(self, path: str, content: str, config_path: str = "") -> AnalyzerOutput:
        """Lint ``content`` on behalf of ``path``."""


class DiagnosticPublisher(Protocol):
    """Forward diagnostics for a document to the presentation layer.

    Implementations may be plain functions or coroutines.
    """

    def __call__(self, uri: str, diagnostics: Sequence[Diagnostic]) -> Awaitable[None] | None:
        """Publish ``diagnostics`` for ``uri``, replacing any previous set."""


class WorkspaceFoldersProvider(Protocol):
    """Return the workspace folder URIs known to the editor session."""

    def __call__(self) -> Awaitable[Sequence[str] | None]:
        """Resolve the current workspace folders."""


__all__ = ["Analyzer", "DiagnosticPublisher", "WorkspaceFoldersProvider"]
