"""
Router pour les classes. Filtrable par filière (?filiereId=).
"""

from app.routers.crud import Filter, Resource, build_crud_router
from app.schemas.school_class import ClassCreate, ClassResponse, ClassUpdate

router = build_crud_router(Resource(
    path="classes",
    label="Classe",
    repository="classes",
    create_schema=ClassCreate,
    update_schema=ClassUpdate,
    response_schema=ClassResponse,
    tag="Classes",
    filters=[Filter("filiereId", "filiere_id")],
))
