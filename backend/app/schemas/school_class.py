"""
Schémas Pydantic pour les classes (rattachées à une filière).
"""

from typing import Optional

from pydantic import field_validator

from app.schemas.base import ApiModel, clean_text, not_null


class ClassCreate(ApiModel):
    filiere_id: int
    name: str
    abbreviation: str

    @field_validator("name", "abbreviation")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class ClassUpdate(ApiModel):
    filiere_id: Optional[int] = None
    name: Optional[str] = None
    abbreviation: Optional[str] = None

    @field_validator("name", "abbreviation")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("filiere_id")
    @classmethod
    def required(cls, v):
        return not_null(v)


class ClassResponse(ApiModel):
    id: int
    filiere_id: int
    name: str
    abbreviation: str
