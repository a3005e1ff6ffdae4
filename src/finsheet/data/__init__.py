"""Chart data fetching."""

from .base import ChartFetcher
from .params import (
    DEFAULT_INTERVAL,
    DEFAULT_RANGE,
    VALID_INTERVALS,
    VALID_RANGES,
    encode_symbol,
    resolve_interval,
    resolve_range,
)
from .yahoo_chart import YahooChartClient

__all__ = [
    "ChartFetcher",
    "YahooChartClient",
    "DEFAULT_INTERVAL",
    "DEFAULT_RANGE",
    "VALID_INTERVALS",
    "VALID_RANGES",
    "encode_symbol",
    "resolve_interval",
    "resolve_range",
]
