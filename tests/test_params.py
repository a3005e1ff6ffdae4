"""Tests for range/interval resolution and symbol escaping."""

from __future__ import annotations

import pytest

from finsheet.data.params import (
    VALID_INTERVALS,
    VALID_RANGES,
    encode_symbol,
    resolve_interval,
    resolve_range,
)


@pytest.mark.parametrize("value", sorted(VALID_RANGES))
def test_allowed_ranges_pass_through(value: str) -> None:
    assert resolve_range(value) == value


@pytest.mark.parametrize("value", sorted(VALID_INTERVALS))
def test_allowed_intervals_pass_through(value: str) -> None:
    assert resolve_interval(value) == value


@pytest.mark.parametrize("value", [None, "", "2d", "1Y", " 1d", 5, "max ", True])
def test_invalid_range_falls_back_to_one_day(value: object) -> None:
    assert resolve_range(value) == "1d"


@pytest.mark.parametrize("value", [None, "", "1min", "4h", "1D", 1, "week"])
def test_invalid_interval_falls_back_to_one_minute(value: object) -> None:
    assert resolve_interval(value) == "1m"


def test_defaults_when_called_without_arguments() -> None:
    assert resolve_range() == "1d"
    assert resolve_interval() == "1m"


def test_encode_symbol_escapes_caret_and_equals() -> None:
    assert encode_symbol("^GSPC") == "%5EGSPC"
    assert encode_symbol("EURUSD=X") == "EURUSD%3DX"
    assert encode_symbol("CL=F") == "CL%3DF"


def test_encode_symbol_trims_and_keeps_other_characters() -> None:
    assert encode_symbol("  BTC-USD ") == "BTC-USD"
    assert encode_symbol("BRK.B") == "BRK.B"
    assert encode_symbol("^A=B^") == "%5EA%3DB%5E"


@pytest.mark.parametrize("symbol", ["^VIX", "GC=F", "^N225", "JPY=X", "A^B=C"])
def test_encoded_symbol_has_no_reserved_characters(symbol: str) -> None:
    encoded = encode_symbol(symbol)

    assert "^" not in encoded
    assert "=" not in encoded
    decoded = encoded.replace("%5E", "^").replace("%3D", "=")
    assert decoded == symbol
