# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Coordinate document validation and publish the resulting diagnostics."""

from __future__ import annotations

import asyncio
import inspect
import itertools
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from ..analyzer.invoker import AnalyzerInvocationError, AnalyzerInvoker
from ..config import Config
from ..core.models import AnalyzerOutput, Diagnostic, FailureKind
from ..filesystem.paths import uri_to_path, workspace_config_path
from ..interfaces.pipeline import Analyzer, DiagnosticPublisher, WorkspaceFoldersProvider
from ..parsers.findings import FindingsParser

LOGGER = logging.getLogger(__name__)


class DocumentStatus(str, Enum):
    """Validation state of a tracked document."""

    IDLE = "idle"
    VALIDATING = "validating"


@dataclass(slots=True)
class DocumentState:
    """Latest known snapshot of an open document."""

    uri: str
    language_id: str
    content: str
    version: int = 0
    in_flight: int = 0

    @property
    def status(self) -> DocumentStatus:
        return DocumentStatus.VALIDATING if self.in_flight else DocumentStatus.IDLE


@dataclass(frozen=True, slots=True)
class ValidationRequest:
    """Content snapshot captured when a validation was triggered."""

    uri: str
    version: int
    content: str


@dataclass(slots=True)
class ConfigPathCache:
    """Lazily resolved analyzer configuration path for the session.

    Once a non-empty value is stored it is reused until :meth:`reset` is
    called. Resolution is deterministic, so concurrent resolvers converge on
    the same value without locking.
    """

    filename: str
    _value: str = field(default="", init=False)

    @property
    def value(self) -> str:
        return self._value

    @property
    def resolved(self) -> bool:
        return bool(self._value)

    def resolve(self, folders: Sequence[str] | None) -> str:
        if self._value:
            return self._value
        derived = workspace_config_path(folders[0], self.filename) if folders else ""
        if derived:
            self._value = derived
        return derived

    def reset(self) -> None:
        self._value = ""


class ValidationOrchestrator:
    """Decide when documents are linted and publish only the freshest results.

    Every triggering event allocates a new version from a session-wide
    sequence. Results are published only while their version is still the
    latest for the document; older results are dropped on arrival.
    """

    def __init__(
        self,
        invoker: Analyzer | None,
        publisher: DiagnosticPublisher,
        *,
        settings: Config | None = None,
        workspace: WorkspaceFoldersProvider | None = None,
    ) -> None:
        self._settings = settings or Config()
        self._invoker: Analyzer = invoker or AnalyzerInvoker(self._settings.analyzer)
        self._publisher = publisher
        self._workspace = workspace
        self._parser = FindingsParser(source=self._settings.analyzer.source)
        self._config_path = ConfigPathCache(self._settings.analyzer.config_filename)
        self._folders: tuple[str, ...] = ()
        self._documents: dict[str, DocumentState] = {}
        self._sequence = itertools.count(1)

    @property
    def settings(self) -> Config:
        return self._settings

    @property
    def config_path(self) -> str:
        return self._config_path.value

    @property
    def tracked_uris(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def state(self, uri: str) -> DocumentState | None:
        return self._documents.get(uri)

    def accepts(self, language_id: str) -> bool:
        return language_id in self._settings.validation.language_ids

    def initialize(self, workspace_folders: Iterable[str] | None) -> str:
        """Record the handshake's workspace folders and resolve the config path.

        Returns:
            str: The cached configuration path (empty when none could be derived).
        """

        self._folders = tuple(workspace_folders or ())
        return self._config_path.resolve(self._folders)

    def reset_workspace(self, workspace_folders: Iterable[str] | None) -> str:
        """Forget the cached configuration path after a workspace folder change."""

        self._config_path.reset()
        return self.initialize(workspace_folders)

    async def did_open(self, uri: str, language_id: str, content: str) -> list[Diagnostic]:
        return await self.validate_document(uri, language_id, content)

    async def did_change(self, uri: str, language_id: str, content: str) -> list[Diagnostic]:
        return await self.validate_document(uri, language_id, content)

    async def did_save(self, uri: str, language_id: str, content: str) -> list[Diagnostic]:
        return await self.validate_document(uri, language_id, content)

    async def did_close(self, uri: str) -> None:
        """Stop tracking ``uri`` and clear its diagnostics."""

        if self._documents.pop(uri, None) is not None:
            await self._publish(uri, [])

    async def revalidate_all(self) -> None:
        """Validate every tracked document again with its latest content."""

        snapshots = [(state.uri, state.language_id, state.content) for state in self._documents.values()]
        await asyncio.gather(*(self.validate_document(*snapshot) for snapshot in snapshots))

    async def validate_document(self, uri: str, language_id: str, content: str) -> list[Diagnostic]:
        """Lint ``content`` for ``uri`` and publish the diagnostics if still current.

        Args:
            uri: Document URI.
            language_id: Editor language identifier of the document.
            content: Document text captured at the time of the event.

        Returns:
            list[Diagnostic]: Diagnostics computed for this snapshot. They are
            returned even when a newer snapshot superseded them, but only
            published when this snapshot is still the latest.
        """

        if not self.accepts(language_id):
            LOGGER.debug("skipping %s: language %r is not validated", uri, language_id)
            return []

        state, request = self._begin(uri, language_id, content)
        try:
            diagnostics = await self._run(request)
        finally:
            state.in_flight -= 1

        if self._is_current(request):
            await self._publish(uri, diagnostics)
        else:
            LOGGER.debug("discarding stale result for %s (version %d)", uri, request.version)
        return diagnostics

    def _begin(self, uri: str, language_id: str, content: str) -> tuple[DocumentState, ValidationRequest]:
        state = self._documents.get(uri)
        if state is None:
            state = DocumentState(uri=uri, language_id=language_id, content=content)
            self._documents[uri] = state
        state.language_id = language_id
        state.content = content
        state.version = next(self._sequence)
        state.in_flight += 1
        return state, ValidationRequest(uri=uri, version=state.version, content=content)

    def _is_current(self, request: ValidationRequest) -> bool:
        state = self._documents.get(request.uri)
        return state is not None and state.version == request.version

    async def _run(self, request: ValidationRequest) -> list[Diagnostic]:
        config_path = await self._resolve_config_path()
        attempts = 1 + self._settings.validation.retries
        for attempt in range(1, attempts + 1):
            try:
                output = await self._invoke(request, config_path)
            except AnalyzerInvocationError as exc:
                LOGGER.warning("validation of %s failed (attempt %d/%d): %s", request.uri, attempt, attempts, exc)
                if exc.kind is FailureKind.MISSING:
                    break
                if not self._is_current(request):
                    LOGGER.debug("not retrying superseded request for %s (version %d)", request.uri, request.version)
                    break
                continue
            except ValueError as exc:
                LOGGER.warning("validation of %s rejected: %s", request.uri, exc)
                break
            return self._parser.parse(output.stdout)
        return []

    async def _invoke(self, request: ValidationRequest, config_path: str) -> AnalyzerOutput:
        path = uri_to_path(request.uri)
        if self._settings.validation.lint_unsaved_content:
            return await self._invoker.lint_content(path, request.content, config_path)
        return await self._invoker.lint_file(path, config_path)

    async def _resolve_config_path(self) -> str:
        if self._config_path.resolved:
            return self._config_path.value
        folders: Sequence[str] | None = self._folders
        if not folders and self._workspace is not None:
            folders = await self._workspace()
        return self._config_path.resolve(folders)

    async def _publish(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        result = self._publisher(uri, list(diagnostics))
        if inspect.isawaitable(result):
            await result


__all__ = [
    "ConfigPathCache",
    "DocumentState",
    "DocumentStatus",
    "ValidationOrchestrator",
    "ValidationRequest",
]
