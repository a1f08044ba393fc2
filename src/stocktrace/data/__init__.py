"""Quote provider client and response normalization."""

from .alpha_vantage import AlphaVantageClient
from .base import QuoteClient
from .normalize import ResponseNormalizer, normalize, series_to_frame

__all__ = [
    "AlphaVantageClient",
    "QuoteClient",
    "ResponseNormalizer",
    "normalize",
    "series_to_frame",
]
