"""
Schémas Pydantic pour les filières.
"""

from typing import Optional

from pydantic import Field, field_validator

from app.schemas.base import ApiModel, clean_text, not_null


class FiliereCreate(ApiModel):
    name: str
    abbreviation: str
    num_years: int = Field(ge=1)

    @field_validator("name", "abbreviation")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class FiliereUpdate(ApiModel):
    name: Optional[str] = None
    abbreviation: Optional[str] = None
    num_years: Optional[int] = Field(default=None, ge=1)

    @field_validator("name", "abbreviation")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("num_years")
    @classmethod
    def required(cls, v):
        return not_null(v)


class FiliereResponse(ApiModel):
    id: int
    name: str
    abbreviation: str
    num_years: int
