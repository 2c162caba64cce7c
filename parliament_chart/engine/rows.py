"""Planification et équilibrage des rangées de l'hémicycle.

Chaque rangée i peut nominalement accueillir floor(π·(b + i)) sièges, b étant
un décalage qui croît de radius_coef / (1 - radius_coef) à chaque rangée
ajoutée. On ajoute des rangées jusqu'à ce que la capacité totale couvre le
nombre de sièges, puis on retire l'excédent en le répartissant sur toutes
les rangées (une unité de plus sur les premières rangées intérieures).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

from parliament_chart.config import ROW_OFFSET_START
from parliament_chart.engine.errors import ConfigurationError, DegenerateInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowPlan:
    """Résultat de la planification des rangées."""
    n_rows: int
    b: float               # Décalage final de l'accumulateur
    max_seat_number: int   # Capacité nominale totale (≥ n_seats)

    def nominal_capacity(self, i: int) -> int:
        """Capacité nominale de la rangée i."""
        return math.floor(math.pi * (self.b + i))


@dataclass(frozen=True)
class Row:
    """Une rangée : indice, rayon médian de la bande, nombre de sièges."""
    index: int
    radius: float
    seat_count: int


def check_radius_coef(radius_coef: float) -> float:
    """Vérifie que le rapport des rayons est dans ]0, 1[.

    Raises:
        ConfigurationError: valeur hors intervalle ou NaN.
    """
    try:
        value = float(radius_coef)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"radius_coef non numérique : {radius_coef!r}") from exc
    # NaN échoue aux deux comparaisons
    if not 0.0 < value < 1.0:
        raise ConfigurationError(f"radius_coef doit être dans ]0, 1[ (reçu {radius_coef!r})")
    return value


def _capacity(b: float, n_rows: int) -> int:
    return sum(math.floor(math.pi * (b + i)) for i in range(n_rows))


def plan_rows(n_seats: int, radius_coef: float) -> RowPlan:
    """Détermine le nombre minimal de rangées pour placer n_seats sièges.

    Args:
        n_seats: nombre total de sièges (≥ 0).
        radius_coef: rapport rayon intérieur / rayon extérieur.

    Returns:
        RowPlan (n_rows, b, max_seat_number).
    """
    radius_coef = check_radius_coef(radius_coef)
    inverse_radius_coef = radius_coef / (1 - radius_coef)

    n_rows = 0
    max_seat_number = 0
    b = ROW_OFFSET_START
    while max_seat_number < n_seats:
        n_rows += 1
        b += inverse_radius_coef
        max_seat_number = _capacity(b, n_rows)

    logger.debug(
        "Plan : %d sièges → %d rangées (capacité %d, b=%.4f)",
        n_seats, n_rows, max_seat_number, b,
    )
    return RowPlan(n_rows=n_rows, b=b, max_seat_number=max_seat_number)


def balance_rows(plan: RowPlan, n_seats: int) -> List[int]:
    """Retire l'excédent de capacité pour obtenir exactement n_seats sièges.

    L'excédent est réparti uniformément ; le reste de la division est
    absorbé par les premières rangées (les plus intérieures).

    Returns:
        Liste des effectifs par rangée, de l'intérieur vers l'extérieur.

    Raises:
        DegenerateInputError: une rangée aurait un effectif négatif.
    """
    if plan.n_rows == 0:
        return []

    seats_to_remove = plan.max_seat_number - n_seats
    per_row, remainder = divmod(seats_to_remove, plan.n_rows)

    counts = []
    for i in range(plan.n_rows):
        row_seats = plan.nominal_capacity(i) - per_row - (1 if remainder > i else 0)
        if row_seats < 0:
            raise DegenerateInputError(
                f"Rangée {i} : {row_seats} sièges après équilibrage "
                f"({n_seats} sièges, {plan.n_rows} rangées)"
            )
        counts.append(row_seats)
    return counts


def row_width(outer_radius: float, radius_coef: float, n_rows: int) -> float:
    """Épaisseur d'une rangée (0 si aucune rangée)."""
    if n_rows == 0:
        return 0.0
    inner_radius = outer_radius * radius_coef
    return (outer_radius - inner_radius) / n_rows


def build_rows(
    plan: RowPlan,
    seat_counts: List[int],
    outer_radius: float,
    radius_coef: float,
) -> List[Row]:
    """Associe à chaque rangée son rayon médian et son effectif."""
    inner_radius = outer_radius * radius_coef
    width = row_width(outer_radius, radius_coef, plan.n_rows)
    return [
        Row(index=i, radius=inner_radius + width * (i + 0.5), seat_count=count)
        for i, count in enumerate(seat_counts)
    ]
