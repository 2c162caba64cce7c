"""Modèles Pydantic pour la validation des groupes et des paramètres."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from parliament_chart.config import DEFAULT_RADIUS_COEF
from parliament_chart.engine.errors import ConfigurationError


class GroupRecord(BaseModel):
    """Un groupe de sièges (parti, catégorie de prévision…).

    Les champs supplémentaires (label, couleur…) sont conservés tels quels
    et recopiés sur chaque siège du groupe.
    """
    model_config = ConfigDict(extra="allow")

    party: str
    seats: int = Field(ge=0)
    label: Optional[str] = None


class LayoutParameters(BaseModel):
    """Paramètres géométriques de l'hémicycle."""
    radius_coef: float = DEFAULT_RADIUS_COEF
    outer_radius: float = Field(default=1.0, gt=0)

    @field_validator("radius_coef")
    @classmethod
    def radius_coef_in_open_interval(cls, v):
        if not 0.0 < v < 1.0:
            raise ValueError(f"radius_coef doit être dans ]0, 1[ (reçu {v})")
        return v

    @classmethod
    def build(cls, **kwargs) -> LayoutParameters:
        """Construit les paramètres, erreurs converties en ConfigurationError."""
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc


def parse_groups(payload: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Valide une liste de groupes et la renvoie sous forme de dicts.

    Args:
        payload: liste de dicts {"party": ..., "seats": ..., ...}.

    Returns:
        Liste de dicts validés, dans l'ordre d'origine.
    """
    return [GroupRecord.model_validate(item).model_dump(exclude_none=True) for item in payload]


def groups_from_json(json_str: Optional[str] = None, path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Lit des groupes depuis une chaîne JSON ou un fichier.

    Args:
        json_str: chaîne JSON (liste de groupes).
        path: chemin du fichier.

    Returns:
        Liste de dicts validés.
    """
    if path:
        json_str = Path(path).read_text()
    if json_str is None:
        raise ValueError("json_str ou path requis.")
    return parse_groups(json.loads(json_str))
