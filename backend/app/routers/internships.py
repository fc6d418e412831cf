"""
Router pour les affectations de stage.
Création et modification ouvertes aux enseignants ; suppression réservée aux administrateurs.
"""

from app.dependencies import Access
from app.routers.crud import Filter, Resource, build_crud_router
from app.schemas.internship import InternshipCreate, InternshipResponse, InternshipUpdate

router = build_crud_router(Resource(
    path="internships",
    label="Stage",
    repository="internships",
    create_schema=InternshipCreate,
    update_schema=InternshipUpdate,
    response_schema=InternshipResponse,
    tag="Stages",
    filters=[
        Filter("studentId", "student_id"),
        Filter("serviceId", "service_id"),
        Filter("periodeId", "periode_de_stage_id"),
    ],
    write=Access.TEACHER,
))
