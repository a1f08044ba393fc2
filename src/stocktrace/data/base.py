"""Quote client contract."""

from __future__ import annotations

from typing import Protocol

from stocktrace.domain.models import RawQuoteResponse, RequestSpec


class QuoteClient(Protocol):
    """Interface for single-snapshot quote retrieval."""

    def fetch(self, spec: RequestSpec) -> RawQuoteResponse:
        """Return the raw timestamp-keyed series for one request."""
