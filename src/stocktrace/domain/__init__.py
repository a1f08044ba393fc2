"""Domain value types."""

from .models import (
    RawQuoteResponse,
    RequestSpec,
    Series,
    SeriesEntry,
    SeriesSummary,
    build_request,
    summarize,
)

__all__ = [
    "RawQuoteResponse",
    "RequestSpec",
    "Series",
    "SeriesEntry",
    "SeriesSummary",
    "build_request",
    "summarize",
]
