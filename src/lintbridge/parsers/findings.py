# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode analyzer JSON output into normalized diagnostics."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..core.models import DEFAULT_SOURCE, Diagnostic, RawFinding
from ..core.positions import PositionError, to_zero_based
from ..core.severity import map_severity
from .base import JsonValue, PayloadError, coerce_object_mapping, is_json_list, iter_entries, load_json_payload

LOGGER = logging.getLogger(__name__)


def parse_finding(item: JsonValue) -> RawFinding | None:
    """Return ``item`` validated as a :class:`RawFinding` or ``None`` when malformed."""

    mapping = coerce_object_mapping(item)
    if mapping is None:
        return None
    try:
        return RawFinding.model_validate(mapping)
    except ValidationError:
        return None


def translate_finding(finding: RawFinding, *, source: str = DEFAULT_SOURCE) -> Diagnostic:
    """Convert ``finding`` into a :class:`Diagnostic`.

    Raises:
        PositionError: If the finding's range cannot be expressed zero-based.
    """

    return Diagnostic(
        severity=map_severity(finding.severity),
        range=to_zero_based(finding.range),
        message=finding.message,
        source=source,
        code=finding.code,
    )


def decode_payload(payload: JsonValue, *, source: str = DEFAULT_SOURCE) -> list[Diagnostic]:
    """Translate an already parsed JSON payload into diagnostics.

    Entries that are malformed or whose range is rejected are dropped one by
    one; the remaining diagnostics keep the order of the payload.

    Args:
        payload: Parsed analyzer output.
        source: Provenance tag stamped on every diagnostic.

    Returns:
        list[Diagnostic]: Diagnostics for every well-formed finding.
    """

    if not is_json_list(payload):
        LOGGER.debug("analyzer payload is not a list (%s); ignoring", type(payload).__name__)
        return []
    diagnostics: list[Diagnostic] = []
    for index, item in iter_entries(payload):
        finding = parse_finding(item)
        if finding is None:
            LOGGER.debug("dropping malformed finding at index %d", index)
            continue
        try:
            diagnostics.append(translate_finding(finding, source=source))
        except PositionError as exc:
            LOGGER.debug("dropping finding at index %d: %s", index, exc)
    return diagnostics


def decode(raw_output: str | bytes | bytearray | None, *, source: str = DEFAULT_SOURCE) -> list[Diagnostic]:
    """Parse raw analyzer stdout into diagnostics without raising.

    Args:
        raw_output: Analyzer stdout as text or bytes.
        source: Provenance tag stamped on every diagnostic.

    Returns:
        list[Diagnostic]: Decoded diagnostics; empty when the payload is empty,
        not JSON or not a list.
    """

    try:
        payload = load_json_payload(raw_output)
    except PayloadError as exc:
        LOGGER.debug("discarding analyzer output: %s", exc)
        return []
    return decode_payload(payload, source=source)


@dataclass(slots=True, frozen=True)
class FindingsParser:
    """Parse analyzer stdout into diagnostics stamped with a fixed source."""

    source: str = DEFAULT_SOURCE

    def parse(self, stdout: str | bytes | bytearray | None) -> list[Diagnostic]:
        return decode(stdout, source=self.source)


__all__ = ["FindingsParser", "decode", "decode_payload", "parse_finding", "translate_finding"]
