"""Command-line interface for a single quote snapshot."""

from __future__ import annotations

import argparse
import sys

from stocktrace.config import INTRADAY_INTERVALS, LOG_LEVELS, Settings
from stocktrace.domain.models import summarize
from stocktrace.errors import ConfigError, FetchError, NormalizationError
from stocktrace.logging.logger import HumanLogger
from stocktrace.pipeline import fetch_series
from stocktrace.report.chart import write_chart


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Fetch and chart an intraday price series")
    parser.add_argument("--symbol", type=str, help="Ticker symbol")
    parser.add_argument("--interval", choices=INTRADAY_INTERVALS, help="Sampling interval")
    parser.add_argument("--function", type=str, help="Provider query function")
    parser.add_argument("--output", type=str, help="Write an HTML chart to this path")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.symbol:
        overrides["symbol"] = args.symbol.strip().upper()
    if args.interval:
        overrides["interval"] = args.interval
    if args.function:
        overrides["function"] = args.function.strip().upper()
    if args.output:
        overrides["chart_output"] = args.output
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings.with_overrides(**overrides)


def run(settings: Settings) -> int:
    """Fetch, normalize, summarize and optionally chart one snapshot."""
    logger = HumanLogger(settings.log_level)
    spec = settings.request_spec()
    logger.request(spec)
    try:
        series = fetch_series(settings.build_client(), spec)
    except (FetchError, NormalizationError) as exc:
        logger.error(str(exc))
        return 1

    logger.fetched(spec.symbol, len(series))
    logger.summary(spec.symbol, summarize(series))
    if settings.chart_output:
        try:
            output = write_chart(spec.symbol, series, settings.chart_output)
        except OSError as exc:
            logger.error(f"Failed to write chart: {exc}")
            return 1
        logger.chart_written(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
