"""
Routers pour l'emploi du temps : matières, salles, enseignants et créneaux.
"""

from app.routers.crud import Filter, Resource, build_crud_router
from app.schemas.timetable import (
    NamedCreate,
    NamedUpdate,
    RoomResponse,
    SubjectResponse,
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
    TimetableCreate,
    TimetableResponse,
    TimetableUpdate,
)

subjects_router = build_crud_router(Resource(
    path="subjects",
    label="Matière",
    repository="subjects",
    create_schema=NamedCreate,
    update_schema=NamedUpdate,
    response_schema=SubjectResponse,
    tag="Emploi du temps",
))

rooms_router = build_crud_router(Resource(
    path="rooms",
    label="Salle",
    repository="rooms",
    create_schema=NamedCreate,
    update_schema=NamedUpdate,
    response_schema=RoomResponse,
    tag="Emploi du temps",
))

# La création d'un compte "teacher" ne crée pas de fiche : elle se fait ici, à part
teachers_router = build_crud_router(Resource(
    path="teachers",
    label="Enseignant",
    repository="teachers",
    create_schema=TeacherCreate,
    update_schema=TeacherUpdate,
    response_schema=TeacherResponse,
    tag="Enseignants",
))

router = build_crud_router(Resource(
    path="timetables",
    label="Créneau",
    repository="timetables",
    create_schema=TimetableCreate,
    update_schema=TimetableUpdate,
    response_schema=TimetableResponse,
    tag="Emploi du temps",
    filters=[
        Filter("classId", "class_id"),
        Filter("teacherId", "teacher_id"),
        Filter("dayOfWeek", "day_of_week"),
    ],
))
