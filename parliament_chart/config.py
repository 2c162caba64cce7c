"""Constantes du diagramme parlementaire (hémicycle).

  - Paramètres de disposition par défaut (rapport des rayons, marges)
  - Échelle de couleurs des catégories de prévision (solid-d … solid-r)
  - Jeu de données par défaut : Chambre des représentants, 435 sièges
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping


# ---------------------------------------------------------------------------
# Disposition
# ---------------------------------------------------------------------------

# Rapport rayon intérieur / rayon extérieur, strictement entre 0 et 1
DEFAULT_RADIUS_COEF = 0.4

# Décalage initial de l'accumulateur de rangées
ROW_OFFSET_START = 0.5

# Marges autour du dessin (en pixels)
DEFAULT_MARGIN: Dict[str, float] = {
    "top": 10,
    "right": 5,
    "bottom": 10,
    "left": 5,
}


# ---------------------------------------------------------------------------
# Catégories et couleurs
# ---------------------------------------------------------------------------

RATINGS: List[str] = [
    "solid-d",
    "likely-d",
    "lean-d",
    "toss-up",
    "lean-r",
    "likely-r",
    "solid-r",
]

RATING_COLORS: Dict[str, str] = {
    "solid-d": "#3989CB",
    "likely-d": "#8CBCE5",
    "lean-d": "#BBD6EE",
    "toss-up": "lightgrey",
    "lean-r": "#FFD8CD",
    "likely-r": "#FFB19C",
    "solid-r": "#FE5C40",
}

RATING_LABELS: Dict[str, str] = {
    "solid-d": "Solid Democrat",
    "likely-d": "Likely Democrat",
    "lean-d": "Lean Democrat",
    "toss-up": "Toss-up",
    "lean-r": "Lean Republican",
    "likely-r": "Likely Republican",
    "solid-r": "Solid Republican",
}

FALLBACK_COLOR = "#999999"


def rating_color(key: str) -> str:
    """Couleur associée à une catégorie (gris si inconnue)."""
    return RATING_COLORS.get(key, FALLBACK_COLOR)


# ---------------------------------------------------------------------------
# Jeu de données par défaut
# ---------------------------------------------------------------------------

# Une entrée par catégorie, dans l'ordre de remplissage gauche → droite
DEFAULT_HOUSE: List[Dict[str, Any]] = [
    {"party": "solid-d", "seats": 180},
    {"party": "likely-d", "seats": 11},
    {"party": "lean-d", "seats": 9},
    {"party": "toss-up", "seats": 23},
    {"party": "lean-r", "seats": 13},
    {"party": "likely-r", "seats": 17},
    {"party": "solid-r", "seats": 182},
]

HOUSE_SEATS = sum(g["seats"] for g in DEFAULT_HOUSE)  # 435


# ---------------------------------------------------------------------------
# Propriétés par défaut du graphique
# ---------------------------------------------------------------------------

def default_seats_accessor(group: Any) -> int:
    """Nombre de sièges d'un groupe : clé "seats" ou attribut seats."""
    if isinstance(group, Mapping):
        return group["seats"]
    return group.seats


def _default_attrs(seat) -> Dict[str, Any]:
    return {"class": default_group_key(seat.group)}


def _default_styles(seat) -> Dict[str, Any]:
    return {"fill": rating_color(default_group_key(seat.group))}


def default_group_key(group: Any) -> str:
    """Identifiant d'un groupe : clé ou attribut "party"."""
    if isinstance(group, Mapping):
        return str(group.get("party", ""))
    return str(getattr(group, "party", ""))


@dataclass
class ChartProps:
    """Propriétés par défaut d'un ParliamentChart.

    `attrs` et `styles` reçoivent un Seat et renvoient un dict
    (attributs : identifiant graphique ; styles : couleur de remplissage).
    """
    radius_coef: float = DEFAULT_RADIUS_COEF
    margin: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_MARGIN))
    seats_accessor: Callable[[Any], int] = default_seats_accessor
    attrs: Callable[[Any], Dict[str, Any]] = _default_attrs
    styles: Callable[[Any], Dict[str, Any]] = _default_styles

    def to_dict(self) -> Dict[str, Any]:
        """Propriétés sous forme de dict (marges recopiées)."""
        return {
            "radius_coef": self.radius_coef,
            "margin": dict(self.margin),
            "seats_accessor": self.seats_accessor,
            "attrs": self.attrs,
            "styles": self.styles,
        }
