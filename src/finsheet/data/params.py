"""Request parameter resolution and symbol escaping for the chart endpoint."""

from __future__ import annotations

from typing import Any

VALID_RANGES = frozenset(
    {"1d", "5d", "1mo", "3mo", "6mo", "1y", "2y", "5y", "10y", "ytd", "max"}
)
VALID_INTERVALS = frozenset(
    {"1m", "2m", "5m", "15m", "30m", "60m", "90m", "1h", "1d", "5d", "1wk", "1mo", "3mo"}
)
DEFAULT_RANGE = "1d"
DEFAULT_INTERVAL = "1m"

# Index symbols start with "^", currencies and futures end in "=X" / "=F".
_SYMBOL_ESCAPES = (("^", "%5E"), ("=", "%3D"))


def _resolve(candidate: Any, allowed: frozenset[str], default: str) -> str:
    if isinstance(candidate, str) and candidate in allowed:
        return candidate
    return default


def resolve_range(value: Any = None) -> str:
    """Return `value` when it is an allowed range, else the 1d default."""
    return _resolve(value, VALID_RANGES, DEFAULT_RANGE)


def resolve_interval(value: Any = None) -> str:
    """Return `value` when it is an allowed interval, else the 1m default."""
    return _resolve(value, VALID_INTERVALS, DEFAULT_INTERVAL)


def encode_symbol(symbol: str) -> str:
    """Trim and escape only the characters that break the chart URL path."""
    encoded = symbol.strip()
    for raw, escaped in _SYMBOL_ESCAPES:
        encoded = encoded.replace(raw, escaped)
    return encoded
