"""Plotly interactive charts: year correction curve and the engraved bracelet strip."""

import numpy as np
import plotly.graph_objects as go

from armreif.bracelet import anchor_positions
from armreif.models import BraceletAnchor, CorrectionPoint

_BG = "#eef0f4"
_LINE_COLOR = "#c9a96e"
_MARK_COLOR = "#5a6275"
_KNOB_COLOR = "#7ec8e3"


def curve_arrays(points: tuple[CorrectionPoint, ...]) -> tuple[list, np.ndarray]:
    """Split points into (days, corrections) with NaN for no-solution days."""
    days = [p.day for p in points]
    values = np.array(
        [np.nan if p.correction_minutes is None else p.correction_minutes for p in points],
        dtype=float,
    )
    return days, values


def render_correction_curve(
    points: tuple[CorrectionPoint, ...],
    read_time: str,
    x_title: str = "Date",
    y_title: str = "Correction (min)",
) -> go.Figure:
    """Render the year correction curve for one bracelet reading.

    Days without a solution are NaN, which Plotly draws as gaps.

    Args:
        points: Output of compute.correction_curve.
        read_time: The reading the curve belongs to (used in the trace name).
        x_title: x-axis label.
        y_title: y-axis label.

    Returns:
        Plotly Figure object.
    """
    days, values = curve_arrays(points)

    trace = go.Scatter(
        x=days,
        y=values,
        mode="lines",
        line=dict(color=_LINE_COLOR, width=2),
        connectgaps=False,
        hovertemplate="%{x|%d.%m.}: %{y:+.0f} min<extra></extra>",
        name=read_time,
    )
    fig = go.Figure(data=[trace])
    fig.add_hline(y=0, line=dict(color=_MARK_COLOR, width=1, dash="dot"))
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=40, r=10, t=10, b=30),
        height=300,
        xaxis=dict(title=x_title, tickformat="%b"),
        yaxis=dict(title=y_title, zeroline=False),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]
    return fig


def render_bracelet_strip(
    anchors: tuple[BraceletAnchor, ...],
    image_width: int,
    knob_percent: float,
) -> go.Figure:
    """Render the bracelet as a horizontal strip with engraved marks and the knob.

    x runs 0–100 in knob percent, the same scale as the slider.
    """
    positions = anchor_positions(anchors, image_width)
    hours = sorted(positions, key=positions.get)  # type: ignore[arg-type]

    marks = go.Scatter(
        x=[positions[h] for h in hours],
        y=[0] * len(hours),
        mode="markers+text",
        marker=dict(symbol="line-ns-open", size=18, color=_MARK_COLOR),
        text=[str(h) for h in hours],
        textposition="top center",
        hoverinfo="skip",
        name="marks",
    )
    knob = go.Scatter(
        x=[knob_percent],
        y=[0],
        mode="markers",
        marker=dict(size=16, color=_KNOB_COLOR, line=dict(width=2, color="#ffffff")),
        hoverinfo="skip",
        name="knob",
    )

    fig = go.Figure(data=[marks, knob])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=90,
        xaxis=dict(visible=False, range=[0, 100], fixedrange=True),
        yaxis=dict(visible=False, range=[-1, 1.5], fixedrange=True),
        shapes=[
            dict(
                type="line",
                x0=0,
                x1=100,
                y0=0,
                y1=0,
                line=dict(color=_LINE_COLOR, width=6),
                layer="below",
            )
        ],
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]
    return fig
