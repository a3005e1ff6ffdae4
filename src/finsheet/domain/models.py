"""Chart payload models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

_EMPTY_META: Mapping[str, Any] = MappingProxyType({})

BarValues = tuple[Any, Any, Any, Any, Any]


def _as_tuple(values: Any) -> tuple[Any, ...] | None:
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes)):
        return tuple(values)
    return None


@dataclass(frozen=True)
class ChartRequest:
    """One outbound chart request after parameter resolution."""

    symbol: str
    encoded_symbol: str
    range: str
    interval: str

    def params(self) -> dict[str, str]:
        return {"range": self.range, "interval": self.interval}


@dataclass(frozen=True)
class QuoteSeries:
    """Parallel OHLCV arrays aligned with the chart timestamps."""

    open: tuple[Any, ...] | None = None
    high: tuple[Any, ...] | None = None
    low: tuple[Any, ...] | None = None
    close: tuple[Any, ...] | None = None
    volume: tuple[Any, ...] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        return cls(
            open=_as_tuple(payload.get("open")),
            high=_as_tuple(payload.get("high")),
            low=_as_tuple(payload.get("low")),
            close=_as_tuple(payload.get("close")),
            volume=_as_tuple(payload.get("volume")),
        )

    def values_at(self, index: int) -> BarValues:
        return (
            self._pick(self.open, index),
            self._pick(self.high, index),
            self._pick(self.low, index),
            self._pick(self.close, index),
            self._pick(self.volume, index),
        )

    @staticmethod
    def _pick(values: tuple[Any, ...] | None, index: int) -> Any:
        if values is None or not 0 <= index < len(values):
            return None
        return values[index]


@dataclass(frozen=True)
class ChartResult:
    """Provider response for one symbol: metadata plus an optional bar series."""

    meta: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_META)
    timestamps: tuple[int, ...] = ()
    quote: QuoteSeries | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build from one element of `chart.result`.

        The timestamp and quote arrays are optional; instruments without
        intraday history come back with `meta` only.
        """
        meta = payload.get("meta")
        timestamps = _as_tuple(payload.get("timestamp")) or ()
        quote: QuoteSeries | None = None
        indicators = payload.get("indicators")
        if isinstance(indicators, Mapping):
            quotes = indicators.get("quote")
            if isinstance(quotes, Sequence) and quotes and isinstance(quotes[0], Mapping):
                quote = QuoteSeries.from_payload(quotes[0])
        return cls(
            meta=MappingProxyType(dict(meta)) if isinstance(meta, Mapping) else _EMPTY_META,
            timestamps=timestamps,
            quote=quote,
        )

    def series_length(self) -> int:
        """Number of bars, or 0 when timestamps or the quote series are missing."""
        if self.quote is None:
            return 0
        return len(self.timestamps)

    def bar_values(self, index: int) -> BarValues:
        if self.quote is None:
            return (None, None, None, None, None)
        return self.quote.values_at(index)
