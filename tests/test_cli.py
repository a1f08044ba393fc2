from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from stocktrace import cli
from stocktrace.cli import apply_cli_overrides, build_parser
from stocktrace.config import Settings
from stocktrace.domain.models import RequestSpec, SeriesEntry
from stocktrace.errors import FieldParseError, TransportError

ENV_KEYS = ["API_KEY", "ALPHAVANTAGE_API_KEY", "SYMBOL", "INTERVAL", "CHART_OUTPUT", "LOG_LEVEL"]

SERIES = [
    SeriesEntry(timestamp=datetime(2024, 1, 2, 9, 0), close=9.0),
    SeriesEntry(timestamp=datetime(2024, 1, 2, 10, 0), open=10.0, close=10.5, volume=1000),
]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("stocktrace.config.load_dotenv", lambda *args, **kwargs: None)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_cli_overrides_produce_expected_settings() -> None:
    parser = build_parser()
    args = parser.parse_args(
        [
            "--symbol",
            "aapl",
            "--interval",
            "15min",
            "--function",
            "time_series_intraday",
            "--output",
            "charts/aapl.html",
            "--timeout",
            "2.5",
            "--log-level",
            "DEBUG",
        ]
    )

    settings = apply_cli_overrides(Settings(), args)

    assert settings.request_spec() == RequestSpec("TIME_SERIES_INTRADAY", "AAPL", "15min")
    assert settings.chart_output == "charts/aapl.html"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_cli_without_flags_keeps_env_settings() -> None:
    settings = Settings(symbol="NVDA", interval="5min")

    merged = apply_cli_overrides(settings, build_parser().parse_args([]))

    assert merged == settings


def test_cli_rejects_unknown_interval() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--interval", "2min"])


def test_main_writes_chart_and_returns_zero(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured: dict[str, Any] = {}

    def fake_fetch_series(client: Any, spec: RequestSpec) -> list[SeriesEntry]:
        captured["client"] = client
        captured["spec"] = spec
        return SERIES

    monkeypatch.setattr(cli, "fetch_series", fake_fetch_series)
    monkeypatch.setenv("API_KEY", "demo")
    output = tmp_path / "charts" / "team.html"

    exit_code = cli.main(["--symbol", "team", "--output", str(output)])

    assert exit_code == 0
    assert captured["spec"] == RequestSpec("TIME_SERIES_INTRADAY", "TEAM", "60min")
    assert captured["client"].api_key == "demo"
    assert output.exists()


def test_main_returns_one_on_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_fetch_series(client: Any, spec: RequestSpec) -> list[SeriesEntry]:
        raise TransportError("Alpha Vantage returned HTTP 500", status_code=500)

    monkeypatch.setattr(cli, "fetch_series", failing_fetch_series)

    assert cli.main([]) == 1


def test_main_returns_one_on_normalization_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_fetch_series(client: Any, spec: RequestSpec) -> list[SeriesEntry]:
        raise FieldParseError("2024-01-02 09:00:00", "4. close", "n/a")

    monkeypatch.setattr(cli, "fetch_series", failing_fetch_series)

    assert cli.main([]) == 1


def test_main_returns_two_on_config_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("INTERVAL", "weekly")

    assert cli.main([]) == 2
    assert "Configuration error" in capsys.readouterr().out


def test_main_charts_empty_series(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(cli, "fetch_series", lambda client, spec: [])
    output = tmp_path / "empty.html"

    assert cli.main(["--output", str(output)]) == 0
    assert output.exists()


def test_main_returns_one_when_chart_cannot_be_written(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(cli, "fetch_series", lambda client, spec: SERIES)
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    assert cli.main(["--output", str(blocker / "chart.html")]) == 1
