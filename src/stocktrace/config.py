"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from stocktrace.data.alpha_vantage import AlphaVantageClient
from stocktrace.domain.models import INTRADAY_FUNCTION, RequestSpec
from stocktrace.errors import ConfigError

INTRADAY_INTERVALS = ("1min", "5min", "15min", "30min", "60min")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_optional_positive_float(value: str | None, *, field_name: str) -> float | None:
    """Parse optional positive float values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = float(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be a number, got {text!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def resolve_api_key() -> str:
    """Read the API key, preferring API_KEY over ALPHAVANTAGE_API_KEY."""
    for name in ("API_KEY", "ALPHAVANTAGE_API_KEY"):
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip()
    return ""


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    api_key: str = ""
    function: str = INTRADAY_FUNCTION
    symbol: str = "TEAM"
    interval: str = "60min"
    base_url: str = AlphaVantageClient.BASE_URL
    timeout: float | None = None
    chart_output: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            api_key=resolve_api_key(),
            function=str(os.getenv("FUNCTION", INTRADAY_FUNCTION)).strip().upper(),
            symbol=str(os.getenv("SYMBOL", "TEAM")).strip().upper(),
            interval=str(os.getenv("INTERVAL", "60min")).strip().lower(),
            base_url=str(os.getenv("BASE_URL", AlphaVantageClient.BASE_URL)).strip(),
            timeout=parse_optional_positive_float(
                os.getenv("REQUEST_TIMEOUT_SECONDS"),
                field_name="REQUEST_TIMEOUT_SECONDS",
            ),
            chart_output=str(os.getenv("CHART_OUTPUT", "")).strip() or None,
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def request_spec(self) -> RequestSpec:
        return RequestSpec(function=self.function, symbol=self.symbol, interval=self.interval)

    def build_client(self) -> AlphaVantageClient:
        return AlphaVantageClient(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
        )

    def validate(self) -> Self:
        """Validate settings fields."""
        if not self.function:
            raise ConfigError("FUNCTION must not be empty")
        if not self.symbol:
            raise ConfigError("SYMBOL must not be empty")
        if self.interval not in INTRADAY_INTERVALS:
            supported = ", ".join(INTRADAY_INTERVALS)
            raise ConfigError(f"INTERVAL must be one of {supported}")
        if not self.base_url:
            raise ConfigError("BASE_URL must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError("REQUEST_TIMEOUT_SECONDS must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return self
