"""
Énumérations partagées entre les modèles SQLAlchemy et les schémas Pydantic.
Les valeurs sont les littéraux stockés en base et exposés dans l'API.
"""

import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class StudentStatus(str, enum.Enum):
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    GRADUATED = "Graduated"
    EXCLUDED = "Excluded"


class AttendanceStatus(str, enum.Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class ValidationStatus(str, enum.Enum):
    PENDING = "Pending"
    VALIDATED = "Validated"
    REJECTED = "Rejected"


def db_enum(enum_cls: type[enum.Enum], name: str) -> Enum:
    """Type de colonne contraint aux valeurs (et non aux noms) de l'énumération."""
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])
