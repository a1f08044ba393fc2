from __future__ import annotations

from datetime import datetime
from pathlib import Path

from stocktrace.domain.models import SeriesEntry
from stocktrace.report.chart import build_chart, write_chart

SERIES = [
    SeriesEntry(timestamp=datetime(2024, 1, 2, 9, 0), close=9.0),
    SeriesEntry(timestamp=datetime(2024, 1, 2, 10, 0), close=12.0),
    SeriesEntry(timestamp=datetime(2024, 1, 2, 11, 0), close=10.5),
]


def test_chart_plots_close_series_with_guides() -> None:
    figure = build_chart("TEAM", SERIES)

    assert figure.layout.title.text == "TEAM"
    assert list(figure.data[0].y) == [9.0, 12.0, 10.5]
    hline_values = sorted(shape.y0 for shape in figure.layout.shapes)
    assert hline_values == [9.0, 12.0]
    assert any("10.500" in annotation.text for annotation in figure.layout.annotations)


def test_empty_series_renders_placeholder() -> None:
    figure = build_chart("TEAM", [])

    assert figure.layout.title.text == "TEAM (no data)"


def test_write_chart_creates_html(tmp_path: Path) -> None:
    output = write_chart("TEAM", SERIES, str(tmp_path / "nested" / "team.html"))

    assert output.exists()
    assert "TEAM" in output.read_text(encoding="utf-8")
