"""Cell-level value conversion shared by the row projectors."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

EMPTY = ""


def is_missing(value: Any) -> bool:
    """True for absent values; zero is a real observation and is kept."""
    return value is None or value == EMPTY


def cell(value: Any) -> Any:
    return EMPTY if is_missing(value) else value


def epoch_to_datetime(value: Any) -> datetime | None:
    """Convert Unix epoch seconds to an aware UTC datetime."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError):
        # NaN or outside the platform time_t range.
        return None


def date_cell(value: Any) -> datetime | str:
    converted = epoch_to_datetime(value)
    return EMPTY if converted is None else converted


def first_present(meta: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key in `keys` that is present in `meta`, else None."""
    for key in keys:
        value = meta.get(key)
        if not is_missing(value):
            return value
    return None
