"""
Router pour les filières (parcours de formation).
"""

from app.routers.crud import Resource, build_crud_router
from app.schemas.filiere import FiliereCreate, FiliereResponse, FiliereUpdate

router = build_crud_router(Resource(
    path="filieres",
    label="Filière",
    repository="filieres",
    create_schema=FiliereCreate,
    update_schema=FiliereUpdate,
    response_schema=FiliereResponse,
    tag="Filières",
))
