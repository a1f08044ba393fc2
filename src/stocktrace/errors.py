"""Custom exceptions for clearer error handling across the package."""

from __future__ import annotations


class StockTraceError(Exception):
    """Base exception for all package-specific errors."""


class ConfigError(StockTraceError, ValueError):
    """Raised when environment or CLI configuration is invalid."""


class FetchError(StockTraceError):
    """Raised when a quote request cannot produce a raw response."""


class TransportError(FetchError):
    """Raised on connection failures and non-success HTTP statuses."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BodyReadError(FetchError):
    """Raised when the response body cannot be read as bytes or text."""


class DeserializationError(FetchError):
    """Raised when the body is not JSON or lacks the expected series object."""

    def __init__(self, message: str, provider_message: str | None = None) -> None:
        super().__init__(message)
        self.provider_message = provider_message


class NormalizationError(StockTraceError):
    """Raised when a raw response cannot be converted into a series."""


class TimestampParseError(NormalizationError):
    """Raised when a series key does not match the provider timestamp format."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid timestamp key {key!r}; expected YYYY-MM-DD HH:MM:SS")
        self.key = key


class FieldParseError(NormalizationError):
    """Raised when a recognized field label carries an unparsable value."""

    def __init__(self, key: str, label: str, value: str) -> None:
        super().__init__(f"Invalid value {value!r} for {label!r} at {key}")
        self.key = key
        self.label = label
        self.value = value
