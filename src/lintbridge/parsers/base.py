# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import json
from collections.abc import Iterator
from collections.abc import Mapping as MappingABC
from collections.abc import Sequence
from typing import TypeAlias, cast

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]


class PayloadError(ValueError):
    """Raised when analyzer output cannot be interpreted as JSON."""


def _ensure_text(value: str | bytes | bytearray | None) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(errors="replace")
    return value


def load_json_payload(stdout: str | bytes | bytearray | None) -> JsonValue:
    """Return the JSON document contained in ``stdout``.

    Args:
        stdout: Raw analyzer stdout as text or bytes.

    Returns:
        JsonValue: Parsed JSON document.

    Raises:
        PayloadError: If the payload is empty or is not valid JSON.
    """

    text = _ensure_text(stdout).strip()
    if not text:
        raise PayloadError("analyzer output is empty")
    try:
        return cast(JsonValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise PayloadError(f"analyzer output is not valid JSON: {exc.msg}") from exc


def is_json_list(value: JsonValue) -> bool:
    """Return ``True`` when ``value`` is a JSON array."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def iter_entries(value: JsonValue) -> Iterator[tuple[int, JsonValue]]:
    """Yield ``(index, item)`` pairs from a JSON array, keeping the original order."""

    if is_json_list(value):
        yield from enumerate(cast(list[JsonValue], value))


def coerce_object_mapping(value: JsonValue) -> dict[str, JsonValue] | None:
    """Return ``value`` as a ``dict`` when it is a JSON object, otherwise ``None``."""

    if isinstance(value, MappingABC):
        return {str(key): cast(JsonValue, entry) for key, entry in value.items()}
    return None


__all__ = [
    "JsonScalar",
    "JsonValue",
    "PayloadError",
    "coerce_object_mapping",
    "is_json_list",
    "iter_entries",
    "load_json_payload",
]
