"""
Prediction Chart Components

Plotly figures for the prediction chart (history, drawn path, fading P&L
cells) and the P&L heatmap, plus a helper that replays typed waypoints
through the PathRecorder the same way pointer events would.
"""

from datetime import datetime
from typing import Iterable, Sequence, Tuple

import plotly.graph_objects as go
import polars as pl

from strikepath.chart.geometry import ChartGeometry
from strikepath.chart.path_recorder import PathRecorder
from strikepath.models.chart_state import GridCell, PricePoint

PROFIT_COLOR = "hsl(142, 70%, 50%)"
LOSS_COLOR = "hsl(0, 85%, 60%)"
PATH_COLOR = "hsl(38, 95%, 55%)"
HISTORY_COLOR = "hsl(262, 80%, 65%)"
MAX_INTENSITY_PNL = 500.0


def replay_waypoints(
    recorder: PathRecorder,
    waypoints: Iterable[Tuple[float, float]],
) -> Tuple[PricePoint, ...]:
    """
    Draw a path from (day_offset, price) waypoints.

    Each waypoint is mapped to screen space and fed as pointer-down (first)
    or pointer-move (rest), then the gesture is ended.

    Returns:
        The recorded path (empty if the first waypoint is outside the
        future region or off the price axis)
    """
    geometry = recorder.geometry
    for i, (day_offset, price) in enumerate(waypoints):
        x, y = geometry.chart_to_screen(price, day_offset)
        if i == 0:
            if not recorder.begin(x, y):
                return ()
        else:
            recorder.extend(x, y)

    return recorder.end() or ()


def cell_color(cell: GridCell) -> str:
    """rgba fill for a cell: green for profit, red for loss, alpha from opacity and P&L size."""
    intensity = min(abs(cell.pnl) / MAX_INTENSITY_PNL, 1.0)
    alpha = round(0.4 * cell.opacity * max(intensity, 0.25), 3)
    if cell.is_profitable:
        return f"rgba(34, 197, 94, {alpha})"
    return f"rgba(239, 68, 68, {alpha})"


def build_prediction_figure(
    geometry: ChartGeometry,
    history: pl.DataFrame,
    path: Sequence[PricePoint],
    cells: Sequence[GridCell],
    today: datetime,
) -> go.Figure:
    """
    Build the prediction chart.

    x axis is days from today (history drawn at negative offsets), y axis is
    price, limited to the geometry's price range.

    Args:
        geometry: Chart geometry (price range, days ahead)
        history: DataFrame with timestamp, price
        path: Recorded prediction path
        cells: Live P&L cells
        today: Reference date at the current-price line

    Returns:
        Plotly Figure
    """
    fig = go.Figure()

    if not history.is_empty():
        n = history.height
        history_span = geometry.days_ahead * geometry.history_fraction / (1 - geometry.history_fraction)
        xs = [-history_span + history_span * i / max(n - 1, 1) for i in range(n)]
        fig.add_trace(go.Scatter(
            x=xs,
            y=history["price"].to_list(),
            mode="lines",
            name="History",
            line=dict(color=HISTORY_COLOR, width=2),
        ))

    fig.add_hline(y=geometry.current_price, line_dash="dash", line_color=HISTORY_COLOR, opacity=0.5)
    fig.add_vline(x=0, line_color=HISTORY_COLOR, line_width=2)

    if cells:
        fig.add_trace(go.Scatter(
            x=[(c.timestamp - today).total_seconds() / 86400 for c in cells],
            y=[c.price for c in cells],
            mode="markers+text",
            name="P&L",
            marker=dict(symbol="square", size=28, color=[cell_color(c) for c in cells]),
            text=[f"{'+' if c.pnl > 0 else ''}${c.pnl:.0f}" if c.opacity > 0.3 else "" for c in cells],
            textfont=dict(size=10),
            hovertemplate="$%{y:.2f}<br>%{text}<extra></extra>",
        ))

    if len(path) > 1:
        fig.add_trace(go.Scatter(
            x=[(p.timestamp - today).total_seconds() / 86400 for p in path],
            y=[p.price for p in path],
            mode="lines+markers",
            name="Prediction",
            line=dict(color=PATH_COLOR, width=3),
            marker=dict(size=6),
        ))

    fig.update_layout(
        xaxis_title="Days from today",
        yaxis_title="Price",
        yaxis=dict(range=[geometry.price_min, geometry.price_max]),
        height=geometry.height,
        showlegend=False,
    )
    return fig


def build_pnl_heatmap(grid: pl.DataFrame, title: str = "P&L at Price / Date") -> go.Figure:
    """
    Heatmap of P&L over (day_offset, price).

    Args:
        grid: DataFrame from PathPnLMapper.pnl_grid

    Returns:
        Plotly Figure (empty placeholder if grid is empty)
    """
    if grid.is_empty():
        fig = go.Figure()
        fig.update_layout(title=f"{title} (No Data)", xaxis_title="Days from today", yaxis_title="Price")
        return fig

    pivot = grid.pivot(on="day_offset", index="price", values="pnl").sort("price")
    day_columns = [c for c in pivot.columns if c != "price"]

    fig = go.Figure(data=go.Heatmap(
        z=pivot.select(day_columns).to_numpy(),
        x=[int(c) for c in day_columns],
        y=pivot["price"].to_list(),
        colorscale="RdYlGn",
        zmid=0,
        colorbar=dict(title="P&L ($)"),
    ))
    fig.update_layout(title=title, xaxis_title="Days from today", yaxis_title="Price")
    return fig
