"""
Router pour les services (lieux de stage).
"""

from app.routers.crud import Resource, build_crud_router
from app.schemas.internship import ServiceCreate, ServiceResponse, ServiceUpdate

router = build_crud_router(Resource(
    path="services",
    label="Service",
    repository="services",
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
    response_schema=ServiceResponse,
    tag="Stages",
))
