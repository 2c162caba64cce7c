"""Calcul complet de la disposition d'un hémicycle.

Enchaîne les quatre étapes pures :
  groupes → normalisation → plan des rangées → équilibrage → placement + attribution
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from parliament_chart.config import DEFAULT_RADIUS_COEF, default_seats_accessor
from parliament_chart.engine.errors import ConfigurationError
from parliament_chart.engine.groups import SeatsAccessor, normalize_groups
from parliament_chart.engine.rows import (
    Row,
    RowPlan,
    balance_rows,
    build_rows,
    check_radius_coef,
    plan_rows,
    row_width,
)
from parliament_chart.engine.seats import Seat, assign_groups, canonical_order, place_seats


@dataclass
class ParliamentLayout:
    """Disposition calculée : sièges ordonnés et géométrie des rangées."""
    seats: List[Seat]
    rows: List[Row]
    plan: RowPlan
    n_seats: int
    radius_coef: float
    outer_radius: float
    inner_radius: float
    row_width: float
    groups: List[Any] = field(default_factory=list)
    seats_accessor: SeatsAccessor = default_seats_accessor

    @property
    def n_rows(self) -> int:
        return self.plan.n_rows

    @property
    def seat_radius(self) -> float:
        """Rayon d'un point-siège pour le rendu."""
        return self.radius_coef * self.row_width


def check_outer_radius(outer_radius: float) -> float:
    """Vérifie que le rayon extérieur est un réel strictement positif."""
    try:
        value = float(outer_radius)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"outer_radius non numérique : {outer_radius!r}") from exc
    if not (value > 0 and math.isfinite(value)):
        raise ConfigurationError(f"outer_radius doit être > 0 (reçu {outer_radius!r})")
    return value


def compute_layout(
    groups: Sequence[Any],
    radius_coef: float = DEFAULT_RADIUS_COEF,
    outer_radius: float = 1.0,
    seats_accessor: Optional[SeatsAccessor] = None,
) -> ParliamentLayout:
    """Calcule la disposition complète d'un hémicycle.

    Args:
        groups: groupes ordonnés (gauche → droite).
        radius_coef: rapport rayon intérieur / rayon extérieur, dans ]0, 1[.
        outer_radius: rayon extérieur de l'hémicycle.
        seats_accessor: fonction groupe → nombre de sièges
            (par défaut : clé ou attribut "seats").

    Returns:
        ParliamentLayout.

    Raises:
        ConfigurationError: paramètres ou effectifs invalides.
        DegenerateInputError: rangée de taille négative après équilibrage.
    """
    radius_coef = check_radius_coef(radius_coef)
    outer_radius = check_outer_radius(outer_radius)

    kept, n_seats = normalize_groups(groups, seats_accessor)
    plan = plan_rows(n_seats, radius_coef)
    counts = balance_rows(plan, n_seats)
    rows = build_rows(plan, counts, outer_radius, radius_coef)

    ordered = canonical_order(place_seats(rows))
    seats = assign_groups(ordered, kept, seats_accessor)

    return ParliamentLayout(
        seats=seats,
        rows=rows,
        plan=plan,
        n_seats=n_seats,
        radius_coef=radius_coef,
        outer_radius=outer_radius,
        inner_radius=outer_radius * radius_coef,
        row_width=row_width(outer_radius, radius_coef, plan.n_rows),
        groups=kept,
        seats_accessor=seats_accessor or default_seats_accessor,
    )


def layout(
    groups: Sequence[Any],
    radius_coef: float = DEFAULT_RADIUS_COEF,
    outer_radius: float = 1.0,
    seats_accessor: Optional[SeatsAccessor] = None,
) -> List[Seat]:
    """Sièges de l'hémicycle dans l'ordre canonique, chacun avec son groupe."""
    return compute_layout(groups, radius_coef, outer_radius, seats_accessor).seats
