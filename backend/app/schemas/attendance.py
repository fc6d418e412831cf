"""
Schémas Pydantic pour les présences en classe et en stage.

Note : on importe datetime en tant que module (dt) pour éviter le conflit de nommage
entre le champ `date` et le type `datetime.date` dans Pydantic v2.
"""

import datetime as dt
from typing import Optional

from pydantic import field_validator

from app.models.enums import AttendanceStatus
from app.schemas.base import ApiModel, not_null


class AttendanceCreate(ApiModel):
    student_id: int
    date: dt.date
    status: AttendanceStatus = AttendanceStatus.ABSENT
    remarks: Optional[str] = None


class AttendanceUpdate(ApiModel):
    student_id: Optional[int] = None
    date: Optional[dt.date] = None
    status: Optional[AttendanceStatus] = None
    remarks: Optional[str] = None

    @field_validator("student_id", "date", "status")
    @classmethod
    def required(cls, v):
        return not_null(v)


class AttendanceResponse(ApiModel):
    id: int
    student_id: int
    date: dt.date
    status: AttendanceStatus = AttendanceStatus.ABSENT
    remarks: Optional[str] = None


class InternshipAttendanceCreate(ApiModel):
    internship_id: int
    student_id: int
    date: dt.date
    status: AttendanceStatus = AttendanceStatus.ABSENT
    remarks: Optional[str] = None


class InternshipAttendanceUpdate(ApiModel):
    internship_id: Optional[int] = None
    student_id: Optional[int] = None
    date: Optional[dt.date] = None
    status: Optional[AttendanceStatus] = None
    remarks: Optional[str] = None

    @field_validator("internship_id", "student_id", "date", "status")
    @classmethod
    def required(cls, v):
        return not_null(v)


class InternshipAttendanceResponse(ApiModel):
    id: int
    internship_id: int
    student_id: int
    date: dt.date
    status: AttendanceStatus = AttendanceStatus.ABSENT
    remarks: Optional[str] = None
