"""Normalisation des groupes avant le calcul de la disposition."""

from __future__ import annotations

import numbers
from typing import Any, Callable, List, Optional, Sequence, Tuple

from parliament_chart.config import default_seats_accessor
from parliament_chart.engine.errors import ConfigurationError


SeatsAccessor = Callable[[Any], int]


def group_seats(group: Any, seats_accessor: Optional[SeatsAccessor] = None) -> int:
    """Effectif d'un groupe, validé (entier ≥ 0).

    Raises:
        ConfigurationError: effectif négatif ou non entier.
    """
    accessor = seats_accessor or default_seats_accessor
    n = accessor(group)
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise ConfigurationError(f"Effectif non numérique : {n!r}")
    if n != int(n):
        raise ConfigurationError(f"Effectif non entier : {n!r}")
    if n < 0:
        raise ConfigurationError(f"Effectif négatif : {n!r}")
    return int(n)


def normalize_groups(
    groups: Sequence[Any],
    seats_accessor: Optional[SeatsAccessor] = None,
) -> Tuple[List[Any], int]:
    """Retire les groupes sans siège et calcule le nombre total de sièges.

    L'ordre relatif des groupes restants est conservé : il détermine
    l'ordre de remplissage de gauche à droite.

    Args:
        groups: séquence ordonnée de groupes.
        seats_accessor: fonction groupe → nombre de sièges.

    Returns:
        (groupes non vides, nombre total de sièges).
    """
    kept = []
    n_seats = 0
    for group in groups or []:
        n = group_seats(group, seats_accessor)
        if n == 0:
            continue
        kept.append(group)
        n_seats += n
    return kept, n_seats
