"""
Schémas Pydantic pour les stages : services, périodes et affectations.

Note : on importe datetime en tant que module (dt) pour garder des annotations
homogènes avec les schémas de présence, où un champ s'appelle `date`.
"""

import datetime as dt
from typing import Optional

from pydantic import field_validator

from app.models.enums import ValidationStatus
from app.schemas.base import ApiModel, clean_text, not_null


class ServiceCreate(ApiModel):
    name: str
    location: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class ServiceUpdate(ApiModel):
    name: Optional[str] = None
    location: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)


class ServiceResponse(ApiModel):
    id: int
    name: str
    location: Optional[str] = None


class PeriodeDeStageCreate(ApiModel):
    # start_date < end_date n'est contrôlé que côté frontend
    name: str
    start_date: dt.date
    end_date: dt.date

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class PeriodeDeStageUpdate(ApiModel):
    name: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def required(cls, v):
        return not_null(v)


class PeriodeDeStageResponse(ApiModel):
    id: int
    name: str
    start_date: dt.date
    end_date: dt.date


class InternshipCreate(ApiModel):
    student_id: int
    service_id: int
    periode_de_stage_id: int
    start_date: dt.date
    end_date: dt.date
    validation_status: ValidationStatus = ValidationStatus.PENDING


class InternshipUpdate(ApiModel):
    student_id: Optional[int] = None
    service_id: Optional[int] = None
    periode_de_stage_id: Optional[int] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    validation_status: Optional[ValidationStatus] = None

    @field_validator(
        "student_id", "service_id", "periode_de_stage_id",
        "start_date", "end_date", "validation_status",
    )
    @classmethod
    def required(cls, v):
        return not_null(v)


class InternshipResponse(ApiModel):
    id: int
    student_id: int
    service_id: int
    periode_de_stage_id: int
    start_date: dt.date
    end_date: dt.date
    validation_status: ValidationStatus = ValidationStatus.PENDING
