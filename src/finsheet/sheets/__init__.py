"""Row projectors for spreadsheet-style consumers."""

from .fields import META_FIELDS, MetaField, normalize_field
from .market_sheet import BAR_HEADERS, QUOTE_HEADERS, MarketSheet

__all__ = [
    "BAR_HEADERS",
    "META_FIELDS",
    "QUOTE_HEADERS",
    "MarketSheet",
    "MetaField",
    "normalize_field",
]
