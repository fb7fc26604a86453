# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run the diagnostic pipeline over files from the command line."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import Config
from ..core.models import Diagnostic
from ..core.severity import Severity
from ..filesystem.paths import path_to_uri
from ..orchestration import ValidationOrchestrator
from ..serialization import publish_diagnostics_params
from .shared import CLIError, CLILogger

LANGUAGE_BY_SUFFIX: Final[dict[str, str]] = {".sol": "solidity"}

_SEVERITY_STYLE: Final[dict[Severity, str]] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
    Severity.HINT: "dim",
}


@dataclass(slots=True)
class CollectingPublisher:
    """Publisher that keeps the most recent diagnostics per document."""

    published: dict[str, list[Diagnostic]] = field(default_factory=dict)

    def __call__(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        self.published[uri] = list(diagnostics)


@dataclass(frozen=True, slots=True)
class LintTarget:
    """File selected for linting together with its document identity."""

    path: Path
    uri: str
    language_id: str
    content: str


def infer_language(path: Path, forced: str | None) -> str:
    if forced:
        return forced
    return LANGUAGE_BY_SUFFIX.get(path.suffix.lower(), "")


def expand_paths(paths: Sequence[Path]) -> list[Path]:
    """Replace each directory in ``paths`` with the sorted Solidity files beneath it."""

    expanded: list[Path] = []
    for path in paths:
        if path.is_dir():
            expanded.extend(sorted(candidate for candidate in path.rglob("*") if _is_lintable(candidate)))
        else:
            expanded.append(path)
    return expanded


def _is_lintable(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in LANGUAGE_BY_SUFFIX


def collect_targets(paths: Sequence[Path], *, language: str | None) -> list[LintTarget]:
    """Read every file in ``paths``, descending into directories.

    Raises:
        CLIError: If a path is missing or cannot be read.
    """

    targets: list[LintTarget] = []
    for path in expand_paths(paths):
        if not path.is_file():
            raise CLIError(f"{path} is not a file", exit_code=2)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CLIError(f"unable to read {path}: {exc}", exit_code=2) from exc
        targets.append(
            LintTarget(
                path=path,
                uri=path_to_uri(path),
                language_id=infer_language(path, language),
                content=content,
            ),
        )
    return targets


async def _validate_all(orchestrator: ValidationOrchestrator, targets: Sequence[LintTarget]) -> None:
    await asyncio.gather(
        *(orchestrator.did_open(target.uri, target.language_id, target.content) for target in targets),
    )


def run_lint(
    targets: Sequence[LintTarget],
    *,
    root: Path,
    cfg: Config,
    logger: CLILogger,
    as_json: bool = False,
) -> int:
    """Validate ``targets`` and render the published diagnostics.

    Returns:
        int: ``1`` when an error-severity diagnostic was reported, otherwise ``0``.
    """

    if not targets:
        logger.warn("no Solidity files to lint")
    publisher = CollectingPublisher()
    orchestrator = ValidationOrchestrator(None, publisher, settings=cfg)
    config_path = orchestrator.initialize([path_to_uri(root)])
    logger.debug(f"config={config_path} binary={cfg.analyzer.binary}")

    for target in targets:
        if not orchestrator.accepts(target.language_id):
            logger.warn(f"{target.path}: unsupported language, skipped")
    asyncio.run(_validate_all(orchestrator, targets))

    found_error = False
    payloads = []
    for target in targets:
        diagnostics = publisher.published.get(target.uri, [])
        found_error = found_error or any(diag.severity is Severity.ERROR for diag in diagnostics)
        if as_json:
            payloads.append(publish_diagnostics_params(target.uri, diagnostics))
        elif target.uri in publisher.published:
            render_diagnostics(logger.console, target.path, diagnostics, logger=logger)

    if as_json:
        logger.echo(json.dumps(payloads, indent=2))
    return 1 if found_error else 0


def render_diagnostics(
    console: Console,
    path: Path,
    diagnostics: Sequence[Diagnostic],
    *,
    logger: CLILogger,
) -> None:
    """Print ``diagnostics`` for ``path`` as a table using one-based line numbers."""

    if not diagnostics:
        logger.ok(f"{path}: no findings")
        return
    table = Table(title=str(path), show_lines=False)
    table.add_column("Location", no_wrap=True)
    table.add_column("Severity")
    table.add_column("Message")
    table.add_column("Source", style="dim")
    for diag in diagnostics:
        start = diag.range.start
        table.add_row(
            f"{start.line + 1}:{start.character}",
            f"[{_SEVERITY_STYLE[diag.severity]}]{diag.severity.value}[/]",
            Text(diag.message),
            diag.source,
        )
    console.print(table)


__all__ = [
    "CollectingPublisher",
    "LintTarget",
    "collect_targets",
    "expand_paths",
    "infer_language",
    "render_diagnostics",
    "run_lint",
]
