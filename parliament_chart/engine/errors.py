"""Erreurs du calcul de disposition."""

from __future__ import annotations


class ParliamentLayoutError(ValueError):
    """Erreur de base du calcul de l'hémicycle."""


class ConfigurationError(ParliamentLayoutError):
    """Paramètres invalides (rapport des rayons hors ]0, 1[, rayon ≤ 0, effectif < 0)."""


class DegenerateInputError(ParliamentLayoutError):
    """Combinaison de paramètres produisant une rangée de taille négative."""
