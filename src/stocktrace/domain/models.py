"""Core quote domain models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

RawQuoteResponse = Mapping[str, Mapping[str, str]]
"""Timestamp key -> provider field label -> textual value."""

INTRADAY_FUNCTION = "TIME_SERIES_INTRADAY"


@dataclass(frozen=True)
class RequestSpec:
    """Which query, symbol and sampling interval to request."""

    function: str
    symbol: str
    interval: str

    def __post_init__(self) -> None:
        for name in ("function", "symbol", "interval"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string")


@dataclass(frozen=True)
class SeriesEntry:
    """One normalized OHLCV bar."""

    timestamp: datetime
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0


Series = Sequence[SeriesEntry]


@dataclass(frozen=True)
class SeriesSummary:
    """Close-price statistics used for legends and log lines."""

    count: int
    min_close: float
    max_close: float
    average_close: float
    last_close: float
    last_timestamp: datetime


def build_request(function: str, symbol: str, interval: str) -> RequestSpec:
    """Build a request spec from plain text values."""
    return RequestSpec(function=function, symbol=symbol, interval=interval)


def summarize(series: Series) -> SeriesSummary | None:
    """Return close-price statistics, or None for an empty series."""
    if not series:
        return None
    closes = [entry.close for entry in series]
    last = series[-1]
    return SeriesSummary(
        count=len(series),
        min_close=min(closes),
        max_close=max(closes),
        average_close=sum(closes) / len(closes),
        last_close=last.close,
        last_timestamp=last.timestamp,
    )
