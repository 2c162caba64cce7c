"""Graphique hémicycle réutilisable : création, mise à jour, redimensionnement.

Le graphique garde ses données et ses propriétés ; chaque dessin recalcule
entièrement la disposition à partir de la largeur courante des axes et
remplace les sièges déjà dessinés.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from parliament_chart.config import DEFAULT_HOUSE, ChartProps
from parliament_chart.data.schemas import LayoutParameters
from parliament_chart.engine.layout import ParliamentLayout, compute_layout

logger = logging.getLogger(__name__)


def merge_props(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Fusion récursive : les dicts imbriqués sont fusionnés, le reste remplacé."""
    merged = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_props(merged[key], value)
        else:
            merged[key] = value
    return merged


class ParliamentChart:
    """Hémicycle dessiné sur des axes matplotlib, en coordonnées pixels."""

    def __init__(self):
        self._props: Dict[str, Any] = {}
        self._ax: Optional[plt.Axes] = None
        self._data: Optional[Sequence[Any]] = None
        self._artists: List[mpatches.Circle] = []
        self.layout: Optional[ParliamentLayout] = None

    # --- Propriétés ---

    def props(self, obj: Optional[Dict[str, Any]] = None):
        """Sans argument : propriétés effectives (défauts + surcharges).

        Sinon fusionne récursivement obj dans les surcharges et renvoie le graphique.
        """
        if obj is None:
            return merge_props(ChartProps().to_dict(), self._props)
        self._props = merge_props(self._props, obj)
        return self

    # --- Cycle de vie ---

    def create(self, ax: plt.Axes, data: Optional[Sequence[Any]] = None,
               props: Optional[Dict[str, Any]] = None) -> ParliamentChart:
        """Crée le graphique sur les axes donnés (données par défaut si None)."""
        self._ax = ax
        if data is None:
            logger.info("Aucune donnée fournie, utilisation du jeu par défaut")
            data = DEFAULT_HOUSE
        self._data = data
        self._props = dict(props or {})
        self.draw()
        return self

    def update(self, data: Optional[Sequence[Any]] = None,
               props: Optional[Dict[str, Any]] = None) -> ParliamentChart:
        """Met à jour les données et/ou les propriétés puis redessine."""
        if self._ax is None:
            raise RuntimeError("create() doit être appelé avant update().")
        if data is not None:
            self._data = data
        # Remplacement superficiel : un dict imbriqué (margin) remplace l'ancien
        self._props = {**self._props, **(props or {})}
        self.draw()
        return self

    def resize(self) -> ParliamentChart:
        """Redessine à la taille courante des axes."""
        if self._ax is None:
            raise RuntimeError("create() doit être appelé avant resize().")
        self.draw()
        return self

    # --- Dessin ---

    def _width(self) -> float:
        return self._ax.get_window_extent().width

    def draw(self):
        """Recalcule la disposition et remplace les sièges dessinés."""
        props = self.props()
        margin = props["margin"]
        width = self._width()
        inner_width = width - margin["left"] - margin["right"]
        inner_height = inner_width / 2

        params = LayoutParameters.build(
            radius_coef=props["radius_coef"],
            outer_radius=inner_width / 2,
        )
        self.layout = compute_layout(
            self._data,
            radius_coef=params.radius_coef,
            outer_radius=params.outer_radius,
            seats_accessor=props["seats_accessor"],
        )

        for artist in self._artists:
            artist.remove()
        self._artists = []

        cx = margin["left"] + inner_width / 2
        cy = inner_height
        for seat in self.layout.seats:
            attrs = props["attrs"](seat)
            styles = props["styles"](seat)
            circle = mpatches.Circle(
                (cx + seat.cartesian.x, cy + seat.cartesian.y),
                self.layout.seat_radius,
                facecolor=styles.get("fill", "black"),
                edgecolor=styles.get("stroke", "none"),
            )
            circle.set_gid(" ".join(filter(None, ["seat", attrs.get("class")])))
            self._ax.add_patch(circle)
            self._artists.append(circle)

        # Repère écran : origine en haut à gauche, y vers le bas
        self._ax.set_xlim(0, width)
        self._ax.set_ylim(width / 2, 0)
        self._ax.set_aspect("equal")
        self._ax.axis("off")

        logger.debug(
            "Hémicycle dessiné : %d sièges, %d rangées, largeur %.0f px",
            self.layout.n_seats, self.layout.n_rows, width,
        )

    def seat_artists(self) -> List[mpatches.Circle]:
        """Cercles des sièges actuellement dessinés."""
        return list(self._artists)
