"""Spreadsheet-style row projections over a fetched chart."""

from __future__ import annotations

import logging
from typing import Any

from finsheet.data.base import ChartFetcher
from finsheet.domain.models import ChartResult
from finsheet.domain.result import Failure, Result, Success
from finsheet.sheets.cells import cell, date_cell, first_present, is_missing
from finsheet.sheets.fields import META_FIELDS, normalize_field

Row = list[Any]

QUOTE_HEADERS = (
    "Symbol",
    "Name",
    "Currency",
    "Exchange",
    "Type",
    "Price",
    "Previous Close",
    "Day High",
    "Day Low",
    "Volume",
    "52-Week High",
    "52-Week Low",
    "Market Time",
)
BAR_HEADERS = ("Timestamp", "Open", "High", "Low", "Close", "Volume")


class MarketSheet:
    """Quote, bar and metadata lookups, each backed by one chart fetch.

    Every method returns a Success or a Failure and never raises.
    """

    def __init__(self, fetcher: ChartFetcher) -> None:
        self.fetcher = fetcher
        self.logger = logging.getLogger("finsheet.sheets")

    def price(self, ticker: Any) -> Result[Any]:
        fetched = self.fetcher.fetch(ticker)
        if isinstance(fetched, Failure):
            return fetched
        price = fetched.value.meta.get("regularMarketPrice")
        if is_missing(price):
            return Failure(f"Error: price not found for {ticker}")
        return Success(price)

    def quote(self, ticker: Any, include_headers: Any = False) -> Result[list[Row]]:
        fetched = self.fetcher.fetch(ticker)
        if isinstance(fetched, Failure):
            return fetched
        meta = fetched.value.meta
        row = [
            cell(meta.get("symbol")),
            cell(first_present(meta, "longName", "shortName")),
            cell(meta.get("currency")),
            cell(first_present(meta, "fullExchangeName", "exchangeName")),
            cell(meta.get("instrumentType")),
            cell(meta.get("regularMarketPrice")),
            cell(first_present(meta, "previousClose", "chartPreviousClose")),
            cell(meta.get("regularMarketDayHigh")),
            cell(meta.get("regularMarketDayLow")),
            cell(meta.get("regularMarketVolume")),
            cell(meta.get("fiftyTwoWeekHigh")),
            cell(meta.get("fiftyTwoWeekLow")),
            date_cell(meta.get("regularMarketTime")),
        ]
        return Success(_with_headers([row], QUOTE_HEADERS, include_headers))

    def latest_bar(self, ticker: Any, include_headers: Any = False) -> Result[list[Row]]:
        fetched = self.fetcher.fetch(ticker)
        if isinstance(fetched, Failure):
            return fetched
        chart = fetched.value
        length = chart.series_length()
        if length == 0:
            return self._no_history(ticker)
        row = _bar_row(chart, length - 1)
        return Success(_with_headers([row], BAR_HEADERS, include_headers))

    def history(
        self,
        ticker: Any,
        include_headers: Any = False,
        limit: Any = None,
        range_: Any = None,
        interval: Any = None,
    ) -> Result[list[Row]]:
        """Bars for the requested range, most recent first.

        A positive `limit` caps the row count; anything else returns every bar.
        """
        fetched = self.fetcher.fetch(ticker, range_, interval)
        if isinstance(fetched, Failure):
            return fetched
        chart = fetched.value
        length = chart.series_length()
        if length == 0:
            return self._no_history(ticker)
        max_rows = length
        if _is_positive_number(limit):
            max_rows = int(min(limit, length))
        rows = [_bar_row(chart, index) for index in range(length - 1, length - 1 - max_rows, -1)]
        return Success(_with_headers(rows, BAR_HEADERS, include_headers))

    def meta_field(self, ticker: Any, field: Any) -> Result[Any]:
        if not isinstance(field, str) or not field.strip():
            return Failure("Error: field name is required")
        fetched = self.fetcher.fetch(ticker)
        if isinstance(fetched, Failure):
            return fetched
        meta = fetched.value.meta

        alias = META_FIELDS.get(normalize_field(field))
        if alias is not None:
            value = first_present(meta, *alias.keys)
            return Success(date_cell(value) if alias.is_date else cell(value))

        if field in meta:
            return Success(cell(meta[field]))
        return Failure(f"Error: unknown field '{field}' for {ticker}")

    def _no_history(self, ticker: Any) -> Failure:
        self.logger.info("no bar series in chart for %s", ticker)
        return Failure(f"Error: no price history available for {ticker}")


def _bar_row(chart: ChartResult, index: int) -> Row:
    values = chart.bar_values(index)
    return [date_cell(chart.timestamps[index]), *(cell(value) for value in values)]


def _with_headers(rows: list[Row], headers: tuple[str, ...], include_headers: Any) -> list[Row]:
    if include_headers is True:
        return [list(headers), *rows]
    return rows


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
