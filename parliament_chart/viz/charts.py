"""Export tabulaire et graphique Plotly d'un hémicycle.

  - DataFrame : une ligne par siège (coordonnées, rangée, groupe)
  - Scatter Plotly : un point par siège, une trace par groupe
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from parliament_chart.config import RATING_LABELS, default_group_key, rating_color
from parliament_chart.engine.layout import ParliamentLayout


SEAT_COLUMNS = ["order", "row", "r", "theta", "x", "y", "group"]


def seats_dataframe(
    layout: ParliamentLayout,
    group_key: Callable[[Any], str] = default_group_key,
) -> pd.DataFrame:
    """Une ligne par siège, dans l'ordre canonique.

    Args:
        layout: disposition calculée.
        group_key: fonction groupe → identifiant.

    Returns:
        DataFrame (order, row, r, theta, x, y, group).
    """
    records = [
        {
            "order": i,
            "row": s.row,
            "r": s.polar.r,
            "theta": s.polar.theta,
            "x": s.cartesian.x,
            "y": s.cartesian.y,
            "group": group_key(s.group),
        }
        for i, s in enumerate(layout.seats)
    ]
    return pd.DataFrame(records, columns=SEAT_COLUMNS)


def parliament_figure(
    layout: ParliamentLayout,
    title: str = "",
    group_key: Callable[[Any], str] = default_group_key,
    colors: Optional[Dict[str, str]] = None,
    marker_size: float = 8,
) -> go.Figure:
    """Hémicycle en nuage de points Plotly.

    Args:
        layout: disposition calculée.
        title: titre.
        group_key: fonction groupe → identifiant.
        colors: couleurs personnalisées (dict identifiant → couleur).
        marker_size: taille des points.

    Returns:
        Figure Plotly.
    """
    colors = colors or {}
    df = seats_dataframe(layout, group_key=group_key)

    fig = go.Figure()
    # groupby(sort=False) conserve l'ordre de remplissage
    for key, sub in df.groupby("group", sort=False):
        fig.add_trace(go.Scatter(
            x=sub["x"],
            y=-sub["y"],
            mode="markers",
            name=f"{RATING_LABELS.get(key, key)} ({len(sub)})",
            marker=dict(
                size=marker_size,
                color=colors.get(key, rating_color(key)),
                line=dict(width=0.5, color="white"),
            ),
            hovertemplate=f"{key}<extra></extra>",
        ))

    fig.update_layout(
        title=title,
        template="plotly_white",
        showlegend=True,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
    )
    return fig
