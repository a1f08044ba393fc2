"""Conversion of raw provider payloads into ordered OHLCV series."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from datetime import datetime

import pandas as pd

from stocktrace.domain.models import RawQuoteResponse, Series, SeriesEntry
from stocktrace.errors import FieldParseError, TimestampParseError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
OHLCV_COLUMNS = ["open", "high", "low", "close", "volume"]

# Decimal, exponent, inf or nan. No surrounding whitespace or digit separators.
_PRICE_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_VOLUME_PATTERN = re.compile(r"[0-9]+")

logger = logging.getLogger("stocktrace.data.normalize")


def parse_price(text: str) -> float:
    if not _PRICE_PATTERN.fullmatch(text):
        raise ValueError(f"price must be a decimal number: {text!r}")
    return float(text)


def parse_volume(text: str) -> int:
    if not _VOLUME_PATTERN.fullmatch(text):
        raise ValueError(f"volume must be a non-negative integer: {text!r}")
    return int(text)


def parse_timestamp(key: str) -> datetime:
    """Parse a `YYYY-MM-DD HH:MM:SS` series key."""
    try:
        return datetime.strptime(key, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as exc:
        raise TimestampParseError(key) from exc


# Provider label -> (SeriesEntry field, parser). Labels not listed are ignored.
FIELD_PARSERS: Mapping[str, tuple[str, Callable[[str], float | int]]] = {
    "1. open": ("open", parse_price),
    "2. high": ("high", parse_price),
    "3. low": ("low", parse_price),
    "4. close": ("close", parse_price),
    "5. volume": ("volume", parse_volume),
}


class ResponseNormalizer:
    """Turn a raw timestamp-keyed payload into a chronologically sorted series.

    Normalization is fail-fast: a bad timestamp key or a bad value under a
    recognized label aborts the whole call and no partial series is returned.
    Missing labels leave the field at zero and unknown labels are skipped.
    """

    def __init__(
        self,
        field_parsers: Mapping[str, tuple[str, Callable[[str], float | int]]] = FIELD_PARSERS,
    ) -> None:
        self.field_parsers = field_parsers

    def normalize(self, raw: RawQuoteResponse) -> list[SeriesEntry]:
        entries = [self.parse_entry(key, fields) for key, fields in raw.items()]
        # sort() is stable, so equal timestamps keep input order.
        entries.sort(key=lambda entry: entry.timestamp)
        logger.debug("Normalized %s entries", len(entries))
        return entries

    def parse_entry(self, key: str, fields: Mapping[str, str]) -> SeriesEntry:
        timestamp = parse_timestamp(key)
        values: dict[str, float | int] = {}
        for label, text in fields.items():
            target = self.field_parsers.get(label)
            if target is None:
                continue
            name, parser = target
            try:
                values[name] = parser(text)
            except (TypeError, ValueError) as exc:
                raise FieldParseError(key, label, text) from exc
        return SeriesEntry(timestamp=timestamp, **values)


def normalize(raw: RawQuoteResponse) -> list[SeriesEntry]:
    """Normalize with the default label table."""
    return ResponseNormalizer().normalize(raw)


def series_to_frame(series: Series) -> pd.DataFrame:
    """Return an OHLCV DataFrame indexed by timestamp."""
    index = pd.DatetimeIndex([entry.timestamp for entry in series], name="timestamp")
    data = {column: [getattr(entry, column) for entry in series] for column in OHLCV_COLUMNS}
    return pd.DataFrame(data, index=index, columns=OHLCV_COLUMNS)
