"""Yahoo Finance chart endpoint client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import requests

from finsheet.config import Settings
from finsheet.data.params import encode_symbol, resolve_interval, resolve_range
from finsheet.domain.models import ChartRequest, ChartResult
from finsheet.domain.result import Failure, Result, Success
from finsheet.errors import DataProviderError


class YahooChartClient:
    """Fetch one symbol's chart (metadata plus OHLCV bars) from the v8 chart API."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})
        self.logger = logging.getLogger("finsheet.data.yahoo_chart")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "YahooChartClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def build_request(self, ticker: str, range_: Any = None, interval: Any = None) -> ChartRequest:
        return ChartRequest(
            symbol=ticker,
            encoded_symbol=encode_symbol(ticker),
            range=resolve_range(range_),
            interval=resolve_interval(interval),
        )

    def fetch(self, ticker: Any, range_: Any = None, interval: Any = None) -> Result[ChartResult]:
        if not isinstance(ticker, str) or not ticker.strip():
            return Failure("Error: ticker symbol is required")

        request = self.build_request(ticker, range_, interval)
        try:
            payload = self._get_json(request)
            return Success(self._interpret(payload, ticker))
        except DataProviderError as exc:
            self.logger.warning("chart request for %s rejected: %s", ticker, exc)
            return Failure(str(exc))
        except Exception as exc:
            self.logger.warning("chart request for %s failed: %s", ticker, exc)
            return Failure(f"Error fetching data for {ticker}: {exc}")

    def _get_json(self, request: ChartRequest) -> Any:
        url = self.settings.chart_url(request.encoded_symbol)
        self.logger.debug(
            "GET %s range=%s interval=%s", url, request.range, request.interval
        )
        response = self.session.get(
            url,
            params=request.params(),
            timeout=self.settings.timeout_seconds,
        )
        # Non-2xx bodies are parsed like any other; chart.error lives there.
        if response.status_code >= 400:
            self.logger.debug("chart endpoint answered %s for %s", response.status_code, url)
        return response.json()

    @staticmethod
    def _interpret(payload: Any, ticker: str) -> ChartResult:
        chart = payload.get("chart") if isinstance(payload, Mapping) else None
        if not isinstance(chart, Mapping):
            raise DataProviderError(f"Error: unable to retrieve data for ticker {ticker}")

        results = chart.get("result")
        if isinstance(results, Sequence) and results and isinstance(results[0], Mapping):
            return ChartResult.from_payload(results[0])

        error = chart.get("error")
        if error is not None:
            description = error.get("description") if isinstance(error, Mapping) else None
            raise DataProviderError(f"Error: {description or 'unknown API error'}")

        raise DataProviderError(f"Error: unable to retrieve data for ticker {ticker}")
