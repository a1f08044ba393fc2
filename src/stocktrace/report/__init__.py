"""Presentation helpers for normalized series."""

from .chart import build_chart, write_chart

__all__ = ["build_chart", "write_chart"]
