"""Tabular export and Plotly history report."""

from __future__ import annotations

import html
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd
import plotly.express as px

from finsheet.sheets.market_sheet import BAR_HEADERS


def rows_to_frame(
    rows: Sequence[Sequence[Any]],
    has_header: bool = False,
    columns: Sequence[str] | None = None,
) -> pd.DataFrame:
    """Convert projector rows into a DataFrame.

    With `has_header` the first row supplies the column names, otherwise
    `columns` does (or pandas' positional defaults).
    """
    data = list(rows)
    if has_header and data:
        columns, data = data[0], data[1:]
    frame = pd.DataFrame([list(row) for row in data], columns=list(columns) if columns else None)
    return frame


def write_history_report(
    rows: Sequence[Sequence[Any]],
    output_html_path: str,
    symbol: str,
    has_header: bool = False,
) -> None:
    """Render history rows as a close-price line and a volume bar chart."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    frame = rows_to_frame(rows, has_header=has_header, columns=None if has_header else BAR_HEADERS)
    title = f"{symbol} price history"
    if frame.empty:
        empty_df = pd.DataFrame({"Timestamp": ["no-bars"], "Close": [0]})
        figure = px.bar(empty_df, x="Timestamp", y="Close", title=title)
        figure.write_html(str(output), include_plotlyjs="cdn")
        return

    frame["Timestamp"] = pd.to_datetime(frame["Timestamp"], utc=True, errors="coerce")
    for column in BAR_HEADERS[1:]:
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    frame = frame.sort_values("Timestamp")

    prices = px.line(frame, x="Timestamp", y="Close", title=title, hover_data=["Open", "High", "Low"])
    volume = px.bar(frame, x="Timestamp", y="Volume", title=f"{symbol} volume")
    html_parts = [
        f"<html><head><meta charset='utf-8'><title>{html.escape(symbol)} history</title></head><body>",
        prices.to_html(full_html=False, include_plotlyjs="cdn"),
        volume.to_html(full_html=False, include_plotlyjs=False),
        "</body></html>",
    ]
    output.write_text("".join(html_parts), encoding="utf-8")
