"""Alpha Vantage HTTP client for intraday OHLCV snapshots."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from stocktrace.domain.models import RawQuoteResponse, RequestSpec
from stocktrace.errors import BodyReadError, DeserializationError, TransportError

# Keys Alpha Vantage uses to report problems with an HTTP 200 status.
PROVIDER_MESSAGE_KEYS = ("Error Message", "Note", "Information")


def series_key(interval: str) -> str:
    """Return the top-level payload key holding the series for `interval`."""
    return f"Time Series ({interval})"


class AlphaVantageClient:
    """Single-request Alpha Vantage client.

    Each `fetch` performs exactly one GET. There is no retry, caching or
    rate-limit handling, and no timeout unless one is supplied.
    """

    BASE_URL = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.logger = logging.getLogger("stocktrace.data.alpha_vantage")

    def fetch(self, spec: RequestSpec) -> RawQuoteResponse:
        """Fetch the raw timestamp-keyed series for `spec`.

        Raises:
            TransportError: connection failure or non-success HTTP status.
            BodyReadError: the body could not be read or decoded as text.
            DeserializationError: invalid JSON or unexpected payload shape.
        """
        params = {
            "function": spec.function,
            "symbol": spec.symbol,
            "interval": spec.interval,
            "apikey": self.api_key,
        }
        self.logger.debug(
            "GET %s function=%s symbol=%s interval=%s",
            self.base_url,
            spec.function,
            spec.symbol,
            spec.interval,
        )
        payload = self._request_json(params)
        return self._extract_series(payload, spec)

    def _request_json(self, params: dict[str, str]) -> Any:
        try:
            response = self.session.get(
                self.base_url,
                params=params,
                timeout=self.timeout,
                stream=True,
            )
        except requests.RequestException as exc:
            self.logger.warning("Alpha Vantage request failed: %s", exc)
            raise TransportError(f"Failed to reach Alpha Vantage: {exc}") from exc

        with response:
            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                self.logger.warning("Alpha Vantage returned HTTP %s", response.status_code)
                raise TransportError(
                    f"Alpha Vantage returned HTTP {response.status_code}",
                    status_code=response.status_code,
                ) from exc

            try:
                body = response.content
            except requests.RequestException as exc:
                raise BodyReadError(f"Failed to read Alpha Vantage response body: {exc}") from exc

            try:
                text = body.decode(response.encoding or "utf-8")
            except (LookupError, UnicodeDecodeError) as exc:
                raise BodyReadError(
                    f"Alpha Vantage response body is not valid text: {exc}"
                ) from exc

        try:
            return json.loads(text)
        except ValueError as exc:
            raise DeserializationError(f"Alpha Vantage response is not valid JSON: {exc}") from exc

    @staticmethod
    def _extract_series(payload: Any, spec: RequestSpec) -> RawQuoteResponse:
        if not isinstance(payload, dict):
            raise DeserializationError(
                f"Expected a JSON object from Alpha Vantage, got {type(payload).__name__}."
            )

        key = series_key(spec.interval)
        if key not in payload:
            provider_message = next(
                (str(payload[name]) for name in PROVIDER_MESSAGE_KEYS if name in payload),
                None,
            )
            message = f"Alpha Vantage response for {spec.symbol} missing {key!r}"
            if provider_message:
                message = f"{message}: {provider_message}"
            raise DeserializationError(message, provider_message=provider_message)

        series = payload[key]
        if not isinstance(series, dict):
            raise DeserializationError(f"{key!r} must be a JSON object.")
        for timestamp, fields in series.items():
            if not isinstance(fields, dict):
                raise DeserializationError(f"Entry {timestamp!r} must be a JSON object.")
            for label, value in fields.items():
                if not isinstance(value, str):
                    raise DeserializationError(
                        f"Field {label!r} at {timestamp!r} must be a string, "
                        f"got {type(value).__name__}."
                    )
        return series
