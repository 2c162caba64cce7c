"""Placement des sièges et attribution aux groupes.

Les sièges d'une rangée divisent le demi-cercle [-π, 0] en secteurs égaux,
chaque siège au centre de son secteur. Tous les sièges sont ensuite triés par
angle croissant (rayon décroissant à angle égal) : ce balayage de gauche à
droite sert d'ordre de remplissage, de sorte que chaque groupe occupe un
secteur contigu de l'hémicycle.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from parliament_chart.engine.errors import DegenerateInputError
from parliament_chart.engine.groups import SeatsAccessor, group_seats
from parliament_chart.engine.rows import Row


@dataclass(frozen=True)
class Polar:
    r: float
    theta: float


@dataclass(frozen=True)
class Cartesian:
    x: float
    y: float


@dataclass(frozen=True)
class Seat:
    """Un siège placé, avec la copie du groupe qui l'occupe."""
    polar: Polar
    cartesian: Cartesian
    row: int
    group: Any = None

    def with_group(self, group: Any) -> Seat:
        return Seat(polar=self.polar, cartesian=self.cartesian, row=self.row, group=group)


def place_row(row: Row) -> List[Seat]:
    """Sièges d'une rangée, de gauche (θ proche de -π) à droite."""
    if row.seat_count <= 0:
        return []

    angle_per_seat = math.pi / row.seat_count
    seats = []
    for j in range(row.seat_count):
        theta = -math.pi + angle_per_seat * (j + 0.5)
        seats.append(Seat(
            polar=Polar(r=row.radius, theta=theta),
            cartesian=Cartesian(
                x=row.radius * math.cos(theta),
                y=row.radius * math.sin(theta),
            ),
            row=row.index,
        ))
    return seats


def place_seats(rows: Iterable[Row]) -> List[Seat]:
    """Sièges de toutes les rangées, rangée par rangée."""
    seats: List[Seat] = []
    for row in rows:
        seats.extend(place_row(row))
    return seats


def canonical_order(seats: Iterable[Seat]) -> List[Seat]:
    """Tri par angle croissant puis, à angle égal, rayon décroissant."""
    return sorted(seats, key=lambda s: (s.polar.theta, -s.polar.r))


def assign_groups(
    seats: Sequence[Seat],
    groups: Sequence[Any],
    seats_accessor: Optional[SeatsAccessor] = None,
) -> List[Seat]:
    """Attribue les groupes aux sièges, dans l'ordre donné, en un seul passage.

    Chaque siège reçoit une copie superficielle de son groupe : modifier
    ensuite la liste source n'altère pas les sièges déjà produits.

    Args:
        seats: sièges dans l'ordre canonique.
        groups: groupes non vides, dans l'ordre de remplissage.
        seats_accessor: fonction groupe → nombre de sièges.

    Returns:
        Nouveaux sièges avec leur groupe.

    Raises:
        DegenerateInputError: plus de sièges que la somme des effectifs.
    """
    counts = [group_seats(g, seats_accessor) for g in groups]
    assigned = []
    group_index = 0
    seat_index = 0
    for seat in seats:
        while group_index < len(counts) and seat_index >= counts[group_index]:
            group_index += 1
            seat_index = 0
        if group_index >= len(counts):
            raise DegenerateInputError(
                f"{len(seats)} sièges pour une capacité de groupes insuffisante"
            )
        assigned.append(seat.with_group(copy.copy(groups[group_index])))
        seat_index += 1
    return assigned
