# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe asynchronous wrappers around external process execution."""

from __future__ import annotations

import asyncio
import shutil

# Bandit: subprocess usage is intentional; commands are passed as argument
# lists and never through a shell.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path


class CommandTimeoutError(TimeoutError):
    """Raised when a command does not finish within its timeout."""

    def __init__(self, command: Sequence[str], timeout: float) -> None:
        super().__init__(f"Command '{command[0]}' timed out after {timeout:.1f}s")
        self.command = tuple(command)
        self.timeout = timeout


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: bytes | None) -> str:
    if not value:
        return ""
    return value.decode(errors="replace")


async def run_command(
    args: Sequence[str],
    *,
    input_text: str | None = None,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute *args* without blocking the event loop.

    Args:
        args: Command and arguments; the executable is resolved on ``PATH``.
        input_text: Optional text written to the process' stdin.
        cwd: Optional working directory.
        env: Optional environment replacing the inherited one.
        timeout: Seconds to wait before killing the process.

    Returns:
        subprocess.CompletedProcess[str]: Exit status and decoded output.

    Raises:
        FileNotFoundError: If the executable cannot be located.
        OSError: If the process cannot be spawned.
        CommandTimeoutError: If the process exceeds ``timeout``.
    """

    normalized = _normalize_args(args)
    process = await asyncio.create_subprocess_exec(
        *normalized,
        stdin=asyncio.subprocess.PIPE if input_text is not None else asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
    )
    payload = input_text.encode() if input_text is not None else None
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(payload), timeout=timeout)
    except asyncio.TimeoutError:
        if process.returncode is None:
            process.kill()
        await process.wait()
        raise CommandTimeoutError(normalized, timeout or 0.0) from None

    return subprocess.CompletedProcess(
        args=normalized,
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=_ensure_text(stdout),
        stderr=_ensure_text(stderr),
    )


__all__ = ["CommandTimeoutError", "run_command"]
