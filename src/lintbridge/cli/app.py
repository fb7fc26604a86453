# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from ..config import Config, ConfigError
from ..config_loader import load_config
from ..core.logging import configure_logging
from .lint import collect_targets, run_lint
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="lintbridge",
    help="Republish external analyzer findings as editor diagnostics.",
    no_args_is_help=True,
    add_completion=False,
)


def _load(root: Path, config_file: Path | None, overrides: dict[str, Any]) -> Config:
    try:
        return load_config(root, config_file=config_file, overrides=overrides)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _analyzer_overrides(binary: str | None, timeout: float | None) -> dict[str, Any]:
    analyzer: dict[str, Any] = {}
    if binary is not None:
        analyzer["binary"] = binary
    if timeout is not None:
        analyzer["timeout"] = timeout
    return {"analyzer": analyzer} if analyzer else {}


@app.command("lint")
def lint_command(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to lint.")],
    root: Annotated[Path, typer.Option("--root", help="Workspace root holding the analyzer config.")] = Path(),
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", help="Extra TOML configuration applied after project files."),
    ] = None,
    binary: Annotated[str | None, typer.Option("--binary", help="Analyzer executable.")] = None,
    timeout: Annotated[float | None, typer.Option("--timeout", help="Analyzer timeout in seconds.")] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", help="Language identifier used instead of the file extension."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit publishDiagnostics payloads as JSON.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Lint files through the diagnostic pipeline."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    configure_logging(debug=debug, use_color=not no_color)
    try:
        resolved_root = root.resolve()
        cfg = _load(resolved_root, config_file, _analyzer_overrides(binary, timeout))
        targets = collect_targets(paths, language=language)
        status = run_lint(targets, root=resolved_root, cfg=cfg, logger=logger, as_json=as_json)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=status)


@app.command("config")
def config_command(
    root: Annotated[Path, typer.Option("--root", help="Project root to inspect.")] = Path(),
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", help="Extra TOML configuration applied after project files."),
    ] = None,
) -> None:
    """Print the effective configuration as JSON."""

    try:
        cfg = _load(root.resolve(), config_file, {})
    except CLIError as exc:
        build_cli_logger(emoji=True).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    typer.echo(json.dumps(cfg.to_dict(), indent=2))


__all__ = ["app"]
