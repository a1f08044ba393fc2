"""Concise human-readable run logger."""

from __future__ import annotations

import logging
from pathlib import Path

from stocktrace.domain.models import RequestSpec, SeriesSummary


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("stocktrace")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def request(self, spec: RequestSpec) -> None:
        self._logger.info(
            "request | %s | %s | interval %s",
            spec.symbol,
            spec.function,
            spec.interval,
        )

    def fetched(self, symbol: str, count: int) -> None:
        self._logger.info("fetched | %s | entries %s", symbol, count)

    def summary(self, symbol: str, summary: SeriesSummary | None) -> None:
        if summary is None:
            self._logger.info("summary | %s | no data", symbol)
            return
        self._logger.info(
            "summary | %s | last $%s at %s | min $%s | max $%s | avg $%s",
            symbol,
            self._format_price(summary.last_close),
            summary.last_timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            self._format_price(summary.min_close),
            self._format_price(summary.max_close),
            self._format_price(summary.average_close),
        )

    def chart_written(self, path: str | Path) -> None:
        self._logger.info("chart | %s", path)

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def _format_price(value: float) -> str:
        return f"{value:,.3f}"
