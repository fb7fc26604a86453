# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence."""

from __future__ import annotations

import copy
import os
import re
import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import Config, ConfigError
from .interfaces.config import ConfigSource

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintbridge"
PROJECT_CONFIG_FILENAME: Final[str] = ".lintbridge.toml"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")
_TOML_CACHE: dict[Path, tuple[int, Mapping[str, Any]]] = {}


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, Mapping):
        return {k: _expand_env_value(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(v, env) for v in value]
    return value


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource(ConfigSource):
    """Load configuration data from a TOML document."""

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._path = path
        self.name = name or str(path)
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            return {}
        resolved = self._path.resolve()
        mtime = resolved.stat().st_mtime_ns
        cached = _TOML_CACHE.get(resolved)
        if cached is not None and cached[0] == mtime:
            data: Any = copy.deepcopy(cached[1])
        else:
            try:
                with resolved.open("rb") as handle:
                    data = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
            _TOML_CACHE[resolved] = (mtime, copy.deepcopy(data))
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return {key: _expand_env_value(value, self._env) for key, value in data.items()}

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.lintbridge]`` within ``pyproject.toml``."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        super().__init__(path, name=str(path), env=env)

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def default_sources(root: Path, *, config_file: Path | None = None) -> list[ConfigSource]:
    """Return the configuration sources consulted for ``root`` in precedence order."""

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / PROJECT_CONFIG_FILENAME),
    ]
    if config_file is not None:
        if not config_file.exists():
            raise ConfigError(f"Configuration file {config_file} does not exist")
        sources.append(TomlConfigSource(config_file))
    return sources


def resolve_config(sources: Iterable[ConfigSource], *, overrides: Mapping[str, Any] | None = None) -> Config:
    """Merge ``sources`` in order and validate the result.

    Raises:
        ConfigError: If a source cannot be read or the merged data is invalid.
    """

    merged: dict[str, Any] = {}
    for source in sources:
        merged = _deep_merge(merged, source.load())
    if overrides:
        merged = _deep_merge(merged, overrides)
    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Load the effective configuration for the project rooted at ``root``.

    Args:
        root: Project directory searched for ``pyproject.toml`` and ``.lintbridge.toml``.
        config_file: Optional explicit TOML file applied after the project files.
        overrides: Optional mapping applied last, typically built from CLI flags.

    Returns:
        Config: Validated configuration.
    """

    return resolve_config(default_sources(root, config_file=config_file), overrides=overrides)


__all__ = [
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
    "resolve_config",
]
