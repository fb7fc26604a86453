# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the external analyzer against a single document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from ..config import AnalyzerConfig
from ..core.models import AnalyzerOutput, FailureKind, InvocationFailure
from ..process_utils import CommandTimeoutError, run_command

LOGGER = logging.getLogger(__name__)

FATAL_OUTPUT_MARKER: Final[str] = "E"


class AnalyzerInvocationError(RuntimeError):
    """Raised when an analyzer run does not produce decodable output."""

    def __init__(self, failure: InvocationFailure) -> None:
        super().__init__(failure.describe())
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


class AnalyzerInvoker:
    """Build and execute analyzer commands.

    Each call spawns exactly one process. Retrying is left to the caller.
    """

    def __init__(self, settings: AnalyzerConfig | None = None) -> None:
        self._settings = settings or AnalyzerConfig()

    @property
    def settings(self) -> AnalyzerConfig:
        return self._settings

    def build_command(self, path: str, config_path: str = "", *, from_stdin: bool = False) -> list[str]:
        """Return the argument list used to lint ``path``.

        Args:
            path: File path handed to the analyzer.
            config_path: Analyzer configuration file; empty selects the analyzer defaults.
            from_stdin: Whether the document content is supplied on stdin.

        Returns:
            list[str]: Command and arguments.
        """

        settings = self._settings
        command = [settings.binary, settings.json_flag, settings.file_flag, path]
        if config_path:
            command.extend([settings.config_flag, config_path])
        if from_stdin:
            command.append(settings.stdin_flag)
        command.extend(settings.extra_args)
        return command

    async def lint_file(self, path: str, config_path: str = "") -> AnalyzerOutput:
        """Lint ``path`` as stored on disk.

        Raises:
            ValueError: If ``path`` is empty.
            AnalyzerInvocationError: If the file is missing or the analyzer run fails.
        """

        _require_path(path)
        command = self.build_command(path, config_path)
        if not Path(path).is_file():
            raise AnalyzerInvocationError(
                InvocationFailure(kind=FailureKind.MISSING, command=tuple(command), detail=f"{path} does not exist"),
            )
        return await self._execute(command, input_text=None)

    async def lint_content(self, path: str, content: str, config_path: str = "") -> AnalyzerOutput:
        """Lint in-memory ``content`` on behalf of ``path`` without touching the disk.

        Raises:
            ValueError: If ``path`` is empty.
            AnalyzerInvocationError: If the analyzer run fails.
        """

        _require_path(path)
        command = self.build_command(path, config_path, from_stdin=True)
        return await self._execute(command, input_text=content)

    async def _execute(self, command: list[str], *, input_text: str | None) -> AnalyzerOutput:
        LOGGER.debug("running analyzer: %s", " ".join(command))
        try:
            completed = await run_command(command, input_text=input_text, timeout=self._settings.timeout)
        except CommandTimeoutError as exc:
            raise AnalyzerInvocationError(
                InvocationFailure(kind=FailureKind.TIMEOUT, command=tuple(command), detail=str(exc)),
            ) from exc
        except OSError as exc:
            raise AnalyzerInvocationError(
                InvocationFailure(kind=FailureKind.SPAWN, command=tuple(command), detail=str(exc)),
            ) from exc

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""
        if stderr:
            LOGGER.debug("analyzer stderr: %s", stderr.strip())
        if stdout.startswith(FATAL_OUTPUT_MARKER):
            raise AnalyzerInvocationError(
                InvocationFailure(
                    kind=FailureKind.FATAL,
                    command=tuple(command),
                    returncode=completed.returncode,
                    stdout=stdout,
                    stderr=stderr,
                    detail=stdout.splitlines()[0],
                ),
            )
        if completed.returncode != 0:
            raise AnalyzerInvocationError(
                InvocationFailure(
                    kind=FailureKind.EXIT,
                    command=tuple(command),
                    returncode=completed.returncode,
                    stdout=stdout,
                    stderr=stderr,
                    detail=stderr.strip().splitlines()[-1] if stderr.strip() else "",
                ),
            )
        return AnalyzerOutput(
            command=tuple(command),
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


def _require_path(path: str) -> None:
    if not path:
        raise ValueError("analyzer invocation requires a non-empty path")


__all__ = ["FATAL_OUTPUT_MARKER", "AnalyzerInvocationError", "AnalyzerInvoker"]
