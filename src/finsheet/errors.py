"""Custom exceptions used inside finsheet components."""


class FinsheetError(Exception):
    """Base exception for all finsheet errors."""


class ConfigError(FinsheetError):
    """Raised when settings are invalid."""


class DataProviderError(FinsheetError):
    """Raised when chart data cannot be retrieved or interpreted."""
