"""Chart domain models and result types."""

from .models import ChartRequest, ChartResult, QuoteSeries
from .result import Failure, Result, Success

__all__ = [
    "ChartRequest",
    "ChartResult",
    "QuoteSeries",
    "Failure",
    "Result",
    "Success",
]
