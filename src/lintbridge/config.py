# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the lintbridge diagnostic pipeline."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ANALYZER: Final[str] = "solidhunter"
DEFAULT_CONFIG_FILENAME: Final[str] = ".solidhunter.json"
MAX_RETRIES: Final[int] = 3


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class AnalyzerConfig(BaseModel):
    """How the external analyzer is located and invoked."""

    model_config = ConfigDict(validate_assignment=True)

    binary: str = DEFAULT_ANALYZER
    json_flag: str = "-j"
    file_flag: str = "-f"
    config_flag: str = "-r"
    stdin_flag: str = "--stdin"
    extra_args: list[str] = Field(default_factory=list)
    timeout: float = Field(default=30.0, gt=0)
    config_filename: str = DEFAULT_CONFIG_FILENAME
    source: str = DEFAULT_ANALYZER

    @field_validator("binary", "config_filename", "source")
    @classmethod
    def _require_value(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must not be empty")
        return value


class ValidationConfig(BaseModel):
    """When documents are validated and how failures are retried."""

    model_config = ConfigDict(validate_assignment=True)

    language_ids: tuple[str, ...] = ("solidity", "sol")
    lint_unsaved_content: bool = True
    retries: int = Field(default=0, ge=0, le=MAX_RETRIES)


class OutputConfig(BaseModel):
    """Console presentation preferences for the CLI."""

    model_config = ConfigDict(validate_assignment=True)

    verbose: bool = False
    emoji: bool = True
    color: bool = True


class Config(BaseModel):
    """Top-level configuration object."""

    model_config = ConfigDict(validate_assignment=True)

    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the configuration."""
        return self.model_dump(mode="json")


__all__ = [
    "DEFAULT_ANALYZER",
    "DEFAULT_CONFIG_FILENAME",
    "AnalyzerConfig",
    "Config",
    "ConfigError",
    "OutputConfig",
    "ValidationConfig",
]
