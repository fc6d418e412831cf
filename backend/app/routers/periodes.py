"""
Router pour les périodes de stage.
"""

from app.routers.crud import Resource, build_crud_router
from app.schemas.internship import PeriodeDeStageCreate, PeriodeDeStageResponse, PeriodeDeStageUpdate

router = build_crud_router(Resource(
    path="periode-de-stages",
    label="Période de stage",
    repository="periodes",
    create_schema=PeriodeDeStageCreate,
    update_schema=PeriodeDeStageUpdate,
    response_schema=PeriodeDeStageResponse,
    tag="Stages",
))
