"""
Base commune des schémas Pydantic.

Les attributs Python restent en snake_case ; le JSON échangé avec le frontend
est en camelCase (filiereId, numYears...). populate_by_name permet aux couches
de stockage de construire les enregistrements à partir des noms de colonnes.
"""

from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def clean_text(v: Optional[str]) -> Optional[str]:
    """Rejette les chaînes vides ou null explicite, retourne la valeur nettoyée."""
    if v is None or not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


def not_null(v):
    """Un champ obligatoire peut être omis d'une mise à jour, mais pas remis à null."""
    if v is None:
        raise ValueError("Le champ ne peut pas être null.")
    return v
