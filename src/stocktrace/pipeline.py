"""Fetch-then-normalize wiring."""

from __future__ import annotations

from stocktrace.data.base import QuoteClient
from stocktrace.data.normalize import ResponseNormalizer
from stocktrace.domain.models import RequestSpec, SeriesEntry


def fetch_series(
    client: QuoteClient,
    spec: RequestSpec,
    normalizer: ResponseNormalizer | None = None,
) -> list[SeriesEntry]:
    """Run one fetch and one normalization pass.

    Fetch errors propagate before the normalizer is touched.
    """
    raw = client.fetch(spec)
    return (normalizer or ResponseNormalizer()).normalize(raw)
