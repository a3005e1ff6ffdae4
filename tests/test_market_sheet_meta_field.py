"""Tests for metadata field lookup."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from finsheet.domain.models import ChartResult
from finsheet.domain.result import Failure, Result, Success
from finsheet.sheets.fields import META_FIELDS, normalize_field
from finsheet.sheets.market_sheet import MarketSheet

META = {
    "symbol": "AAPL",
    "longName": "Apple Inc.",
    "currency": "USD",
    "fiftyTwoWeekHigh": 260.1,
    "fiftyTwoWeekLow": 164.08,
    "regularMarketTime": 1700000000,
    "firstTradeDate": 345479400,
    "chartPreviousClose": 225.0,
    "hasPrePostMarketData": True,
    "timezone": None,
}


class FakeFetcher:
    def __init__(self, result: Result[ChartResult]) -> None:
        self.result = result
        self.calls = 0

    def fetch(self, ticker: Any, range_: Any = None, interval: Any = None) -> Result[ChartResult]:
        self.calls += 1
        return self.result


def _sheet() -> tuple[MarketSheet, FakeFetcher]:
    fetcher = FakeFetcher(Success(ChartResult.from_payload({"meta": META})))
    return MarketSheet(fetcher), fetcher


def test_normalize_field() -> None:
    assert normalize_field("52 Week_High") == "52weekhigh"
    assert normalize_field("fifty_two_week_high") == "fiftytwoweekhigh"
    assert normalize_field("\tPrice ") == "price"


def test_alias_table_is_immutable() -> None:
    with pytest.raises(TypeError):
        META_FIELDS["new"] = META_FIELDS["price"]  # type: ignore[index]


@pytest.mark.parametrize(
    "field", ["52WeekHigh", "52weekhigh", "fifty_two_week_high", "52wHigh", "FiftyTwoWeekHigh"]
)
def test_year_high_aliases_agree(field: str) -> None:
    sheet, _ = _sheet()

    assert sheet.meta_field("AAPL", field) == Success(260.1)


def test_name_and_previous_close_fallbacks() -> None:
    sheet, _ = _sheet()

    assert sheet.meta_field("AAPL", "Name") == Success("Apple Inc.")
    assert sheet.meta_field("AAPL", "previous_close") == Success(225.0)


def test_date_fields_are_converted() -> None:
    sheet, _ = _sheet()

    assert sheet.meta_field("AAPL", "Market Time") == Success(
        datetime.fromtimestamp(1700000000, tz=UTC)
    )
    assert sheet.meta_field("AAPL", "firstTradeDate") == Success(
        datetime.fromtimestamp(345479400, tz=UTC)
    )


def test_known_alias_with_no_value_is_blank() -> None:
    sheet, _ = _sheet()

    assert sheet.meta_field("AAPL", "timezone") == Success("")
    assert sheet.meta_field("AAPL", "dayHigh") == Success("")


def test_unknown_alias_falls_back_to_raw_meta_key() -> None:
    sheet, _ = _sheet()

    assert sheet.meta_field("AAPL", "hasPrePostMarketData") == Success(True)


def test_raw_lookup_is_case_sensitive() -> None:
    sheet, _ = _sheet()

    result = sheet.meta_field("AAPL", "HASPREPOSTMARKETDATA")

    assert isinstance(result, Failure)
    assert result.message == "Error: unknown field 'HASPREPOSTMARKETDATA' for AAPL"


@pytest.mark.parametrize("field", [None, "", "   ", 7])
def test_field_is_required(field: Any) -> None:
    sheet, fetcher = _sheet()

    result = sheet.meta_field("AAPL", field)

    assert result == Failure("Error: field name is required")
    assert fetcher.calls == 0


def test_string_value_is_distinguishable_from_failure() -> None:
    sheet, _ = _sheet()

    result = sheet.meta_field("AAPL", "currency")

    assert isinstance(result, Success)
    assert result.ok
    assert result.to_cell() == "USD"


@pytest.mark.parametrize("epoch", [1e20, float("nan")])
def test_unrepresentable_date_fields_are_blank(epoch: float) -> None:
    chart = ChartResult.from_payload(
        {"meta": {"regularMarketTime": epoch, "firstTradeDate": epoch}}
    )
    sheet = MarketSheet(FakeFetcher(Success(chart)))

    assert sheet.meta_field("AAPL", "markettime") == Success("")
    assert sheet.meta_field("AAPL", "firsttradedate") == Success("")


def test_raw_key_present_with_null_is_blank_not_unknown() -> None:
    chart = ChartResult.from_payload({"meta": {"tradingPeriods": None}})
    sheet = MarketSheet(FakeFetcher(Success(chart)))

    assert sheet.meta_field("AAPL", "tradingPeriods") == Success("")
    assert isinstance(sheet.meta_field("AAPL", "tradingperiods"), Failure)
