"""Plotly price chart for a normalized intraday series."""

from __future__ import annotations

from pathlib import Path

import plotly.express as px
import plotly.graph_objects as go

from stocktrace.data.normalize import series_to_frame
from stocktrace.domain.models import Series, summarize


def build_chart(symbol: str, series: Series) -> go.Figure:
    """Build a close-price line chart with min/max guides and the last print."""
    summary = summarize(series)
    if summary is None:
        figure = go.Figure()
        figure.update_layout(
            title=f"{symbol} (no data)",
            xaxis_title="timestamp",
            yaxis_title="close",
        )
        return figure

    frame = series_to_frame(series).reset_index()
    figure = px.line(
        frame,
        x="timestamp",
        y="close",
        title=symbol,
        hover_data=["open", "high", "low", "volume"],
        markers=True,
    )
    figure.add_hline(
        y=summary.min_close,
        line_dash="dash",
        line_color="gray",
        annotation_text=f"min {summary.min_close:,.3f}",
        annotation_position="bottom left",
    )
    figure.add_hline(
        y=summary.max_close,
        line_dash="dash",
        line_color="gray",
        annotation_text=f"max {summary.max_close:,.3f}",
        annotation_position="top left",
    )
    figure.add_annotation(
        x=summary.last_timestamp,
        y=summary.last_close,
        text=f"{summary.last_close:,.3f}<br>{summary.last_timestamp:%Y-%m-%d %H:%M:%S}",
        showarrow=True,
        arrowhead=2,
    )
    figure.update_xaxes(rangeslider_visible=True)
    return figure


def write_chart(symbol: str, series: Series, output_html_path: str) -> Path:
    """Render the chart to a standalone HTML file and return its path."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    build_chart(symbol, series).write_html(str(output), include_plotlyjs="cdn")
    return output
