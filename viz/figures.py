from __future__ import annotations

import numpy as np
import plotly.graph_objects as go


def value_histogram(values: np.ndarray, *, title: str = "Raw value distribution") -> go.Figure:
    fig = go.Figure(
        data=go.Histogram(
            x=np.asarray(values, dtype=np.float64).reshape(-1),
            nbinsx=80,
            marker=dict(color="rgba(255,255,255,0.75)"),
        )
    )
    fig.update_layout(
        margin=dict(l=0, r=0, t=30, b=0),
        height=260,
        title=title,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig
