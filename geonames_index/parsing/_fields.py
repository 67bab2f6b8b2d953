"""Field-level coercion helpers shared by the GeoNames row parsers."""

from __future__ import annotations

import math
from datetime import date

from geonames_index.core.constants import FIELD_SEPARATOR, LIST_SEPARATOR
from geonames_index.core.exceptions import RecordParseError


def split_row(line: str, expected: int, kind: str) -> list[str]:
    """Split a tab-separated row and check its field count.

    Raises:
        RecordParseError: If the row does not have *expected* fields.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != expected:
        msg = f"Invalid {kind} record: expected {expected} fields, got {len(fields)}"
        raise RecordParseError(msg)
    return fields


def parse_int(raw: str, field_name: str, *, default: int = 0) -> int:
    value = raw.strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        msg = f"Field {field_name} is not an integer: {raw!r}"
        raise RecordParseError(msg) from exc


def parse_optional_int(raw: str, field_name: str) -> int | None:
    if not raw.strip():
        return None
    return parse_int(raw, field_name)


def parse_float(raw: str, field_name: str, *, default: float | None = None) -> float:
    value = raw.strip()
    if not value and default is not None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        msg = f"Field {field_name} is not a number: {raw!r}"
        raise RecordParseError(msg) from exc
    if not math.isfinite(parsed):
        msg = f"Field {field_name} is not finite: {raw!r}"
        raise RecordParseError(msg)
    return parsed


def parse_list(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(LIST_SEPARATOR) if item.strip())


def parse_date(raw: str, field_name: str) -> date | None:
    value = raw.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        msg = f"Field {field_name} is not a yyyy-MM-dd date: {raw!r}"
        raise RecordParseError(msg) from exc
