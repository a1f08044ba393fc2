"""Intraday quote retrieval, normalization and charting."""
