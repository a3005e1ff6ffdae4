"""Chart fetcher contract."""

from __future__ import annotations

from typing import Any, Protocol

from finsheet.domain.models import ChartResult
from finsheet.domain.result import Result


class ChartFetcher(Protocol):
    """Interface for single-symbol chart retrieval."""

    def fetch(
        self, ticker: Any, range_: Any = None, interval: Any = None
    ) -> Result[ChartResult]:
        """Return the chart for `ticker`, or a Failure describing why not."""
