# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting analyzer output into diagnostics."""

from __future__ import annotations

from .base import JsonValue, PayloadError, load_json_payload
from .findings import FindingsParser, decode, decode_payload, parse_finding, translate_finding

__all__ = [
    "FindingsParser",
    "JsonValue",
    "PayloadError",
    "decode",
    "decode_payload",
    "load_json_payload",
    "parse_finding",
    "translate_finding",
]
