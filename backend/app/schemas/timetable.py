"""
Schémas Pydantic pour les enseignants, matières, salles et créneaux d'emploi du temps.
"""

import re
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.base import ApiModel, clean_text, not_null

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_time(v: Optional[str]) -> str:
    if v is None or not TIME_PATTERN.match(v):
        raise ValueError("Heure invalide. Format attendu : HH:MM.")
    return v


class TeacherCreate(ApiModel):
    user_id: int
    full_name: str
    subject: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class TeacherUpdate(ApiModel):
    user_id: Optional[int] = None
    full_name: Optional[str] = None
    subject: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)

    @field_validator("user_id")
    @classmethod
    def required(cls, v):
        return not_null(v)


class TeacherResponse(ApiModel):
    id: int
    user_id: int
    full_name: str
    subject: Optional[str] = None


class NamedCreate(ApiModel):
    """Matières et salles n'ont qu'un nom."""
    name: str

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return clean_text(v)


class NamedUpdate(ApiModel):
    name: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return clean_text(v)


class SubjectResponse(ApiModel):
    id: int
    name: str


class RoomResponse(ApiModel):
    id: int
    name: str


class TimetableCreate(ApiModel):
    class_id: int
    subject_id: int
    teacher_id: int
    room_id: int
    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: str) -> str:
        return _check_time(v)


class TimetableUpdate(ApiModel):
    class_id: Optional[int] = None
    subject_id: Optional[int] = None
    teacher_id: Optional[int] = None
    room_id: Optional[int] = None
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: Optional[str]) -> str:
        return _check_time(v)

    @field_validator("class_id", "subject_id", "teacher_id", "room_id", "day_of_week")
    @classmethod
    def required(cls, v):
        return not_null(v)


class TimetableResponse(ApiModel):
    id: int
    class_id: int
    subject_id: int
    teacher_id: int
    room_id: int
    day_of_week: int
    start_time: str
    end_time: str
