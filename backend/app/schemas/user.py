"""
Schémas Pydantic pour les comptes utilisateurs et l'authentification.

UserRecord est la forme stockée (avec le hash du mot de passe) ;
UserResponse est la seule forme renvoyée par l'API.
"""

from typing import Optional

from pydantic import EmailStr, field_validator

from app.models.enums import UserRole
from app.schemas.base import ApiModel, clean_text, not_null


class UserCreate(ApiModel):
    """Corps de POST /register et POST /users (mot de passe en clair, haché avant stockage)."""
    username: str
    password: str
    role: UserRole = UserRole.STUDENT
    full_name: str
    email: Optional[EmailStr] = None

    @field_validator("username", "full_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Le mot de passe ne peut pas être vide.")
        return v


class UserUpdate(ApiModel):
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None

    @field_validator("username", "full_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: Optional[str]) -> str:
        if not v:
            raise ValueError("Le mot de passe ne peut pas être vide.")
        return v

    @field_validator("role")
    @classmethod
    def required(cls, v):
        return not_null(v)


class UserRecord(ApiModel):
    id: int
    username: str
    password_hash: str
    role: UserRole = UserRole.STUDENT
    full_name: str
    email: Optional[str] = None


class UserResponse(ApiModel):
    id: int
    username: str
    role: UserRole
    full_name: str
    email: Optional[str] = None


class LoginRequest(ApiModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        # même normalisation qu'à la création du compte
        return v.strip()
