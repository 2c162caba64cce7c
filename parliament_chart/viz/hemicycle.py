"""Diagramme hémicycle (matplotlib).

Dessine une disposition calculée par `compute_layout` : un disque par siège,
coloré selon son groupe, avec légende et ligne de majorité optionnelle.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from parliament_chart.config import (
    DEFAULT_RADIUS_COEF,
    RATING_LABELS,
    default_group_key,
    rating_color,
)
from parliament_chart.engine.layout import ParliamentLayout, compute_layout


def seat_arrays(layout: ParliamentLayout) -> Tuple[np.ndarray, np.ndarray]:
    """Coordonnées (x, y) des sièges, axe y orienté vers le haut."""
    x = np.array([s.cartesian.x for s in layout.seats], dtype=float)
    # Les sièges sont calculés en θ ∈ [-π, 0] (repère écran, y vers le bas)
    y = -np.array([s.cartesian.y for s in layout.seats], dtype=float)
    return x, y


def plot_parliament(
    data: Union[ParliamentLayout, Sequence[Any]],
    title: str = "",
    radius_coef: float = DEFAULT_RADIUS_COEF,
    figsize: Tuple[int, int] = (12, 7),
    show_majority_line: bool = False,
    group_key: Callable[[Any], str] = default_group_key,
    colors: Optional[Dict[str, str]] = None,
    seats_accessor: Optional[Callable[[Any], int]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """Dessine un diagramme hémicycle.

    Args:
        data: disposition déjà calculée ou liste de groupes.
        title: titre du graphique.
        radius_coef: rapport des rayons (si data est une liste de groupes).
        figsize: taille de la figure.
        show_majority_line: afficher le seuil de majorité absolue.
        group_key: fonction groupe → identifiant (couleur, légende).
        colors: couleurs personnalisées (dict identifiant → couleur).
        seats_accessor: fonction groupe → nombre de sièges.
        ax: axes matplotlib (crée une figure si None).

    Returns:
        Figure matplotlib.
    """
    if isinstance(data, ParliamentLayout):
        layout = data
    else:
        layout = compute_layout(data, radius_coef=radius_coef, seats_accessor=seats_accessor)

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()

    colors = colors or {}

    def _color(key: str) -> str:
        return colors.get(key, rating_color(key))

    x, y = seat_arrays(layout)
    for seat, sx, sy in zip(layout.seats, x, y):
        key = group_key(seat.group)
        ax.add_patch(mpatches.Circle(
            (sx, sy), layout.seat_radius,
            facecolor=_color(key), edgecolor="white", linewidth=0.5, zorder=3,
        ))

    # Ligne de majorité
    if show_majority_line and layout.n_seats > 0:
        majority = layout.n_seats // 2 + 1
        ax.axvline(x=0, color="black", linewidth=1.0, linestyle="--", zorder=1)
        ax.text(0, -0.08 * layout.outer_radius, f"Majorité : {majority} sièges",
                ha="center", va="top", fontsize=10, style="italic")

    # Légende (ordre de remplissage)
    legend_patches: List[mpatches.Patch] = []
    for group in layout.groups:
        key = group_key(group)
        label = f"{RATING_LABELS.get(key, key)} ({layout.seats_accessor(group)})"
        legend_patches.append(mpatches.Patch(color=_color(key), label=label))

    if legend_patches:
        ax.legend(
            handles=legend_patches,
            loc="lower center",
            bbox_to_anchor=(0.5, -0.15),
            ncol=min(4, len(legend_patches)),
            fontsize=8,
        )

    if title:
        ax.set_title(title, fontsize=14, fontweight="bold")
    r = layout.outer_radius
    ax.set_xlim(-1.05 * r, 1.05 * r)
    ax.set_ylim(-0.2 * r, 1.05 * r)
    ax.set_aspect("equal")
    ax.axis("off")

    fig.tight_layout()
    return fig
