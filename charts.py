"""Plotly figures for the sensitivity quick view."""

from typing import Sequence

import plotly.graph_objects as go

from sensitivity import SensitivityPoint

CHART_HEIGHT = 220

# (SensitivityResult attribute, title, line color)
SENSITIVITY_CHARTS = [
    ("by_hatch", "Hatch rate impact (net chick profit)", "#0ea5a4"),
    ("by_egg_price", "Egg price impact (net egg profit)", "#f59e0b"),
    ("by_feed_price", "Feed price impact (net chick profit)", "#ef4444"),
]


def sensitivity_figure(points: Sequence[SensitivityPoint], title: str, color: str) -> go.Figure:
    """Single line chart: swept value on x, net profit (MK) on y."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.label for p in points],
        y=[p.value for p in points],
        mode='lines',
        name=title,
        line=dict(color=color, width=2, shape='spline'),
        hovertemplate="%{x}: MK %{y:,.0f}<extra></extra>",
    ))
    fig.update_layout(
        title=dict(text=title, font=dict(size=12)),
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=40, b=10),
        showlegend=False,
    )
    fig.update_xaxes(type='category', showgrid=True, griddash='dash')
    fig.update_yaxes(showgrid=True, griddash='dash')
    return fig
