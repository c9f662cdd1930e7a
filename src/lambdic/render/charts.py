from __future__ import annotations

from typing import Literal, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from lambdic.pipeline import ComparisonResult
from lambdic.series import Series

ASSET_COLORS = ["#b388ff", "#00d4ff", "#ff6b6b", "#4ecdc4", "#ffd93d"]
PRIMARY = "#b388ff"

ViewMode = Literal["overlay", "separate"]


def _gaps(values: Sequence[float]) -> list[Optional[float]]:
    # plotly breaks a line on None; non-finite values must not draw as points.
    return [float(v) if np.isfinite(v) else None for v in values]


def _date_marker(fig: go.Figure, date: str, label: str = "", **subplot) -> None:
    # The label is added separately: vline annotations do arithmetic on x, which fails for date strings.
    fig.add_vline(x=date, line=dict(color="rgba(179, 136, 255, 0.6)", width=1.5, dash="dash"), **subplot)
    if label:
        fig.add_annotation(x=date, y=1, yref="paper", text=label, showarrow=False, yanchor="bottom")


def asset_figure(
    series: Series,
    title: str | None = None,
    selected_date: str | None = None,
    reference_unit: str = "BTC",
) -> go.Figure:
    """History line, forecast median line and low/high band.

    The forecast starts at the first point carrying bounds.
    """

    fig = go.Figure()
    title = title or f"{series.name} Priced in {reference_unit}"

    first_fc = next((i for i, p in enumerate(series.points) if p.has_bounds), None)
    historical = series.points if first_fc is None else series.points[:first_fc]
    forecast = () if first_fc is None else series.points[first_fc:]

    if historical:
        fig.add_trace(
            go.Scatter(
                x=[p.date for p in historical],
                y=_gaps([p.value for p in historical]),
                mode="lines",
                name="Historical",
                line=dict(width=2.5, color=PRIMARY),
            )
        )

    if forecast:
        dates = [p.date for p in forecast]
        fig.add_trace(
            go.Scatter(
                x=dates,
                y=_gaps([p.low if p.has_bounds else np.nan for p in forecast]),
                mode="lines",
                line=dict(width=0),
                showlegend=False,
                hoverinfo="skip",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=dates,
                y=_gaps([p.high if p.has_bounds else np.nan for p in forecast]),
                mode="lines",
                line=dict(width=0),
                fill="tonexty",
                fillcolor="rgba(179, 136, 255, 0.15)",
                name="Forecast range",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=dates,
                y=_gaps([p.value for p in forecast]),
                mode="lines",
                name="Median forecast",
                line=dict(width=2.5, color=PRIMARY, dash="dot"),
            )
        )
        _date_marker(fig, dates[0], "Forecast →")

    if selected_date:
        _date_marker(fig, selected_date)

    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=40, b=10),
        height=440,
        yaxis=dict(title=reference_unit, tickformat=".6f"),
    )
    return fig


def _overlay_figure(result: ComparisonResult, selected_date: str | None) -> go.Figure:
    fig = go.Figure()
    overlay: pd.DataFrame = result.overlay
    for i, s in enumerate(result.series):
        fig.add_trace(
            go.Scatter(
                x=overlay["date"],
                y=_gaps(overlay[s.asset_id].to_numpy(dtype=float)),
                customdata=overlay[f"{s.asset_id}_actual"],
                mode="lines",
                name=s.name,
                line=dict(width=2, color=ASSET_COLORS[i % len(ASSET_COLORS)]),
                hovertemplate="%{x}<br>Normalized: %{y:.4f}<br>Actual: %{customdata:.6f}<extra>%{fullData.name}</extra>",
            )
        )
    if selected_date:
        _date_marker(fig, selected_date, "Selected Date")
    fig.update_layout(
        title="Asset Comparison - Overlay View",
        margin=dict(l=10, r=10, t=40, b=10),
        height=500,
    )
    return fig


def _separate_figure(result: ComparisonResult, selected_date: str | None) -> go.Figure:
    n = max(len(result.series), 1)
    cols = 2 if n > 1 else 1
    rows = (n + cols - 1) // cols
    fig = make_subplots(
        rows=rows,
        cols=cols,
        subplot_titles=[f"{s.name} (Normalized)" for s in result.series],
    )
    for i, s in enumerate(result.series):
        row, col = i // cols + 1, i % cols + 1
        fig.add_trace(
            go.Scatter(
                x=s.dates,
                y=_gaps([p.normalized_value for p in s]),
                mode="lines",
                name=s.name,
                line=dict(width=2, color=ASSET_COLORS[i % len(ASSET_COLORS)]),
            ),
            row=row,
            col=col,
        )
        if selected_date:
            _date_marker(fig, selected_date, row=row, col=col)
    fig.update_layout(
        title="Asset Comparison - Separate View",
        margin=dict(l=10, r=10, t=60, b=10),
        height=320 * rows,
        showlegend=False,
    )
    return fig


def comparison_figure(
    result: ComparisonResult,
    view_mode: ViewMode = "overlay",
    selected_date: str | None = None,
) -> go.Figure:
    if view_mode == "overlay":
        return _overlay_figure(result, selected_date)
    if view_mode == "separate":
        return _separate_figure(result, selected_date)
    raise ValueError(f"Unknown view mode: {view_mode}")
