"""
Contrat de persistance commun aux deux implémentations (mémoire et SQL).

Chaque entité dispose d'un Repository qui renvoie des enregistrements Pydantic ;
le routeur ne connaît que ce contrat et ignore le moteur de stockage.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from pydantic import BaseModel

from app.models import (
    Attendance,
    Filiere,
    Internship,
    InternshipAttendance,
    PeriodeDeStage,
    Room,
    SchoolClass,
    Service,
    Student,
    Subject,
    Teacher,
    Timetable,
    User,
)
from app.schemas.attendance import AttendanceResponse, InternshipAttendanceResponse
from app.schemas.filiere import FiliereResponse
from app.schemas.school_class import ClassResponse
from app.schemas.internship import InternshipResponse, PeriodeDeStageResponse, ServiceResponse
from app.schemas.student import StudentResponse
from app.schemas.timetable import RoomResponse, SubjectResponse, TeacherResponse, TimetableResponse
from app.schemas.user import UserRecord

# Nom d'attribut sur Storage → (modèle SQLAlchemy, schéma de l'enregistrement stocké)
ENTITIES = {
    "users": (User, UserRecord),
    "filieres": (Filiere, FiliereResponse),
    "classes": (SchoolClass, ClassResponse),
    "students": (Student, StudentResponse),
    "services": (Service, ServiceResponse),
    "periodes": (PeriodeDeStage, PeriodeDeStageResponse),
    "internships": (Internship, InternshipResponse),
    "attendances": (Attendance, AttendanceResponse),
    "internship_attendances": (InternshipAttendance, InternshipAttendanceResponse),
    "teachers": (Teacher, TeacherResponse),
    "subjects": (Subject, SubjectResponse),
    "rooms": (Room, RoomResponse),
    "timetables": (Timetable, TimetableResponse),
}


class Repository(Protocol):
    """CRUD d'une entité. Une absence est un résultat normal (None / False), jamais une erreur."""

    def list(self, field: Optional[str] = None, value: Any = None) -> list[BaseModel]:
        ...

    def get(self, record_id: int) -> Optional[BaseModel]:
        ...

    def create(self, values: dict) -> BaseModel:
        ...

    def update(self, record_id: int, changes: dict) -> Optional[BaseModel]:
        ...

    def delete(self, record_id: int) -> bool:
        ...


class SessionStore(Protocol):
    """Sessions serveur : jeton opaque → utilisateur, expiration fixe à l'émission."""

    def create(self, user_id: int) -> str:
        ...

    def get_user_id(self, token: str) -> Optional[int]:
        ...

    def delete(self, token: str) -> None:
        ...

    def purge_expired(self) -> int:
        ...


@dataclass
class Storage:
    """Regroupe les dépôts de toutes les entités et le magasin de sessions."""
    users: Repository
    filieres: Repository
    classes: Repository
    students: Repository
    services: Repository
    periodes: Repository
    internships: Repository
    attendances: Repository
    internship_attendances: Repository
    teachers: Repository
    subjects: Repository
    rooms: Repository
    timetables: Repository
    sessions: SessionStore


def utcnow() -> datetime:
    """Horodatage UTC naïf, comparable aux colonnes DateTime sans fuseau."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
