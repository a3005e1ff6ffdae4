"""Metadata field aliases accepted by `MarketSheet.meta_field`."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class MetaField:
    """Meta attribute(s) behind an alias; `keys` are tried in order."""

    keys: tuple[str, ...]
    is_date: bool = False


_SYMBOL = MetaField(("symbol",))
_NAME = MetaField(("longName", "shortName"))
_SHORT_NAME = MetaField(("shortName",))
_CURRENCY = MetaField(("currency",))
_EXCHANGE = MetaField(("exchangeName",))
_FULL_EXCHANGE = MetaField(("fullExchangeName", "exchangeName"))
_TYPE = MetaField(("instrumentType",))
_PRICE = MetaField(("regularMarketPrice",))
_PREVIOUS_CLOSE = MetaField(("previousClose", "chartPreviousClose"))
_DAY_HIGH = MetaField(("regularMarketDayHigh",))
_DAY_LOW = MetaField(("regularMarketDayLow",))
_VOLUME = MetaField(("regularMarketVolume",))
_YEAR_HIGH = MetaField(("fiftyTwoWeekHigh",))
_YEAR_LOW = MetaField(("fiftyTwoWeekLow",))
_MARKET_TIME = MetaField(("regularMarketTime",), is_date=True)
_FIRST_TRADE = MetaField(("firstTradeDate",), is_date=True)
_TIMEZONE = MetaField(("timezone",))
_EXCHANGE_TIMEZONE = MetaField(("exchangeTimezoneName",))
_GMT_OFFSET = MetaField(("gmtoffset",))
_GRANULARITY = MetaField(("dataGranularity",))
_RANGE = MetaField(("range",))
_PRICE_HINT = MetaField(("priceHint",))

META_FIELDS = MappingProxyType(
    {
        "symbol": _SYMBOL,
        "ticker": _SYMBOL,
        "name": _NAME,
        "longname": _NAME,
        "shortname": _SHORT_NAME,
        "currency": _CURRENCY,
        "exchange": _EXCHANGE,
        "exchangename": _EXCHANGE,
        "fullexchangename": _FULL_EXCHANGE,
        "type": _TYPE,
        "instrumenttype": _TYPE,
        "price": _PRICE,
        "regularmarketprice": _PRICE,
        "previousclose": _PREVIOUS_CLOSE,
        "prevclose": _PREVIOUS_CLOSE,
        "chartpreviousclose": MetaField(("chartPreviousClose",)),
        "dayhigh": _DAY_HIGH,
        "high": _DAY_HIGH,
        "regularmarketdayhigh": _DAY_HIGH,
        "daylow": _DAY_LOW,
        "low": _DAY_LOW,
        "regularmarketdaylow": _DAY_LOW,
        "volume": _VOLUME,
        "regularmarketvolume": _VOLUME,
        "52weekhigh": _YEAR_HIGH,
        "52whigh": _YEAR_HIGH,
        "fiftytwoweekhigh": _YEAR_HIGH,
        "52weeklow": _YEAR_LOW,
        "52wlow": _YEAR_LOW,
        "fiftytwoweeklow": _YEAR_LOW,
        "markettime": _MARKET_TIME,
        "regularmarkettime": _MARKET_TIME,
        "time": _MARKET_TIME,
        "firsttradedate": _FIRST_TRADE,
        "timezone": _TIMEZONE,
        "exchangetimezonename": _EXCHANGE_TIMEZONE,
        "gmtoffset": _GMT_OFFSET,
        "datagranularity": _GRANULARITY,
        "range": _RANGE,
        "pricehint": _PRICE_HINT,
    }
)

_SEPARATORS = re.compile(r"[_\s]+")


def normalize_field(name: str) -> str:
    """Lowercase and drop underscores and whitespace: "52 Week_High" -> "52weekhigh"."""
    return _SEPARATORS.sub("", name.lower())
