"""
Routers pour les présences en classe et en stage.
Saisie ouverte aux enseignants ; suppression réservée aux administrateurs.
"""

import datetime as dt

from app.dependencies import Access
from app.routers.crud import Filter, Resource, build_crud_router
from app.schemas.attendance import (
    AttendanceCreate,
    AttendanceResponse,
    AttendanceUpdate,
    InternshipAttendanceCreate,
    InternshipAttendanceResponse,
    InternshipAttendanceUpdate,
)

router = build_crud_router(Resource(
    path="attendance",
    label="Présence",
    repository="attendances",
    create_schema=AttendanceCreate,
    update_schema=AttendanceUpdate,
    response_schema=AttendanceResponse,
    tag="Présences",
    filters=[
        Filter("studentId", "student_id"),
        Filter("date", "date", dt.date),
    ],
    write=Access.TEACHER,
))

internship_router = build_crud_router(Resource(
    path="internship-attendance",
    label="Présence en stage",
    repository="internship_attendances",
    create_schema=InternshipAttendanceCreate,
    update_schema=InternshipAttendanceUpdate,
    response_schema=InternshipAttendanceResponse,
    tag="Présences",
    filters=[
        Filter("internshipId", "internship_id"),
        Filter("studentId", "student_id"),
        Filter("date", "date", dt.date),
    ],
    write=Access.TEACHER,
))
