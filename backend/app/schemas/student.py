"""
Schémas Pydantic pour les élèves.
"""

from typing import Optional

from pydantic import EmailStr, field_validator

from app.models.enums import StudentStatus
from app.schemas.base import ApiModel, clean_text, not_null


class StudentCreate(ApiModel):
    """Schéma de création d'un élève (POST /students)."""
    full_name: str
    id_card_number: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    filiere_id: Optional[int] = None
    class_id: Optional[int] = None
    status: StudentStatus = StudentStatus.ACTIVE
    documents: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class StudentUpdate(ApiModel):
    """Schéma de mise à jour d'un élève (PUT /students/{id}). Les champs absents ne sont pas modifiés."""
    full_name: Optional[str] = None
    id_card_number: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    filiere_id: Optional[int] = None
    class_id: Optional[int] = None
    status: Optional[StudentStatus] = None
    documents: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("status")
    @classmethod
    def required(cls, v):
        return not_null(v)


class StudentResponse(ApiModel):
    id: int
    full_name: str
    id_card_number: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    filiere_id: Optional[int] = None
    class_id: Optional[int] = None
    status: StudentStatus = StudentStatus.ACTIVE
    documents: Optional[str] = None
