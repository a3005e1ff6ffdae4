"""Environment-driven client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from finsheet.errors import ConfigError

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    """Immutable client settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables (and a local .env file)."""
        load_dotenv()
        try:
            settings = cls(
                base_url=os.getenv("FINSHEET_BASE_URL", DEFAULT_BASE_URL).strip(),
                timeout_seconds=float(os.getenv("FINSHEET_TIMEOUT_SECONDS", "20")),
                user_agent=os.getenv("FINSHEET_USER_AGENT", DEFAULT_USER_AGENT).strip(),
                log_level=os.getenv("LOG_LEVEL", "WARNING").strip().upper(),
                log_file=os.getenv("LOG_FILE", "").strip() or None,
            )
        except ValueError as exc:
            raise ConfigError("FINSHEET_TIMEOUT_SECONDS must be a number.") from exc
        return settings.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        overrides = {key: value for key, value in kwargs.items() if value is not None}
        return replace(self, **overrides).validate()

    def validate(self) -> Self:
        """Validate settings fields."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError("base_url must be an http(s) URL.")
        if self.timeout_seconds <= 0:
            raise ConfigError("timeout_seconds must be positive.")
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ConfigError(
                "log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return self

    def chart_url(self, encoded_symbol: str) -> str:
        """Chart endpoint for an already-escaped symbol."""
        return f"{self.base_url.rstrip('/')}/v8/finance/chart/{encoded_symbol}"
