# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintbridge package."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity

DEFAULT_SOURCE: Final[str] = "solidhunter"


class Position(BaseModel):
    """Zero-based line/character position inside a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(BaseModel):
    """Span between two :class:`Position` values as used by editor diagnostics."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @classmethod
    def create(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
        """Build a range from four scalar coordinates."""
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )


class Diagnostic(BaseModel):
    """Normalized diagnostic handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    range: Range
    message: str
    source: str = DEFAULT_SOURCE
    code: str | None = None


class RawPosition(BaseModel):
    """Analyzer-native position: 1-based line, 0-based character.

    Values are not bounded here so malformed upstream ranges surface in the
    position translator instead of failing schema validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    line: int
    character: int


class RawRange(BaseModel):
    """Analyzer-native range made of two :class:`RawPosition` values."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start: RawPosition
    end: RawPosition


class RawFinding(BaseModel):
    """Intermediate finding that mirrors the analyzer's JSON structure."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    range: RawRange
    severity: str | None = None
    message: str
    uri: str = ""
    code: str | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _drop_non_text_severity(cls, value: object) -> object:
        """Treat non-string labels as absent so the finding still decodes."""
        return value if isinstance(value, str) else None

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: object) -> object:
        """Accept numeric rule codes by storing their string form."""
        if value is None or isinstance(value, str):
            return value
        return str(value)


class FailureKind(str, Enum):
    """Categories of analyzer invocation failures."""

    MISSING = "missing"
    SPAWN = "spawn"
    EXIT = "exit"
    FATAL = "fatal"
    TIMEOUT = "timeout"


class AnalyzerOutput(BaseModel):
    """Raw output captured from a successful analyzer run."""

    model_config = ConfigDict(frozen=True)

    command: tuple[str, ...]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class InvocationFailure(BaseModel):
    """Structured description of an analyzer run that produced no usable output."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    command: tuple[str, ...] = Field(default_factory=tuple)
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    detail: str = ""

    def describe(self) -> str:
        """Return a one-line summary suitable for log output."""

        executable = self.command[0] if self.command else "<analyzer>"
        parts = [f"{self.kind.value} failure running '{executable}'"]
        if self.returncode is not None:
            parts.append(f"status {self.returncode}")
        if self.detail:
            parts.append(self.detail)
        return ": ".join(parts)


__all__ = [
    "DEFAULT_SOURCE",
    "AnalyzerOutput",
    "Diagnostic",
    "FailureKind",
    "InvocationFailure",
    "Position",
    "Range",
    "RawFinding",
    "RawPosition",
    "RawRange",
]
