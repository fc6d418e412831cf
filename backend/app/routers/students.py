"""
Router pour les élèves.
GET /api/students?classId= ou ?filiereId= (un seul filtre appliqué, classId prioritaire).
"""

from app.routers.crud import Filter, Resource, build_crud_router
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate

router = build_crud_router(Resource(
    path="students",
    label="Élève",
    repository="students",
    create_schema=StudentCreate,
    update_schema=StudentUpdate,
    response_schema=StudentResponse,
    tag="Élèves",
    filters=[
        Filter("classId", "class_id"),
        Filter("filiereId", "filiere_id"),
    ],
))
