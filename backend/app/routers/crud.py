"""
Fabrique de routeurs CRUD contrôlés par rôle.

Chaque entité déclare une Resource (schémas, filtres, seuils d'accès) ;
build_crud_router monte les cinq routes uniformes :
GET /api/<coll>[?filtre=valeur], GET/PUT/DELETE /api/<coll>/{id}, POST /api/<coll>.
"""

import datetime as dt
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.dependencies import Access, get_storage, require_access
from app.storage.base import Repository, Storage

logger = logging.getLogger(__name__)


@dataclass
class Filter:
    """Paramètre de requête traduit en un filtre d'égalité sur une colonne."""
    param: str
    field: str
    type: type = int


@dataclass
class Resource:
    path: str                       # segment d'URL, ex. "periode-de-stages"
    label: str                      # libellé des messages, ex. "Période de stage"
    repository: str                 # attribut correspondant sur Storage
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    tag: str
    filters: List[Filter] = field(default_factory=list)
    write: Access = Access.ADMIN
    delete: Access = Access.ADMIN


_OPENAPI_TYPES = {int: "integer", dt.date: "string", str: "string"}


@contextmanager
def storage_errors(message: str):
    """Convertit toute erreur de stockage en 500 avec un message statique, sans retry."""
    try:
        yield
    except HTTPException:
        raise
    except Exception:
        logger.exception(message)
        raise HTTPException(status_code=500, detail=message)


def select_filter(filters: List[Filter], request: Request) -> Tuple[Optional[str], Any]:
    """
    Retourne le premier filtre présent dans la requête (dans l'ordre déclaré).
    Les combinaisons ne sont pas supportées : les filtres suivants sont ignorés.
    """
    for f in filters:
        raw = request.query_params.get(f.param)
        if raw is None or raw == "":
            continue
        try:
            return f.field, TypeAdapter(f.type).validate_python(raw)
        except ValidationError:
            raise HTTPException(status_code=400, detail=f"Paramètre '{f.param}' invalide : {raw!r}.")
    return None, None


def build_crud_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.tag])

    create_schema = resource.create_schema
    update_schema = resource.update_schema
    response_schema = resource.response_schema
    not_found = f"{resource.label} introuvable."

    def repository(storage: Storage) -> Repository:
        return getattr(storage, resource.repository)

    filter_params = [
        {"name": f.param, "in": "query", "required": False,
         "schema": {"type": _OPENAPI_TYPES.get(f.type, "string")}}
        for f in resource.filters
    ]

    @router.get(
        "",
        response_model=List[response_schema],
        summary=f"Lister : {resource.label}",
        openapi_extra={"parameters": filter_params} if filter_params else None,
    )
    def list_items(
        request: Request,
        storage: Storage = Depends(get_storage),
        _user=Depends(require_access(Access.AUTHENTICATED)),
    ):
        """Liste complète, ou filtrée par un seul paramètre (le premier reconnu)."""
        field_name, value = select_filter(resource.filters, request)
        with storage_errors(f"Impossible de lister : {resource.path}."):
            return repository(storage).list(field_name, value)

    @router.get("/{item_id}", response_model=response_schema, summary=f"Détail : {resource.label}")
    def get_item(
        item_id: int,
        storage: Storage = Depends(get_storage),
        _user=Depends(require_access(Access.AUTHENTICATED)),
    ):
        with storage_errors(f"Impossible de lire : {resource.path}."):
            item = repository(storage).get(item_id)
        if item is None:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.post("", response_model=response_schema, status_code=201, summary=f"Créer : {resource.label}")
    def create_item(
        data: create_schema,
        storage: Storage = Depends(get_storage),
        _user=Depends(require_access(resource.write)),
    ):
        with storage_errors(f"Impossible de créer : {resource.path}."):
            return repository(storage).create(data.model_dump())

    @router.put("/{item_id}", response_model=response_schema, summary=f"Modifier : {resource.label}")
    def update_item(
        item_id: int,
        data: update_schema,
        storage: Storage = Depends(get_storage),
        _user=Depends(require_access(resource.write)),
    ):
        """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
        with storage_errors(f"Impossible de modifier : {resource.path}."):
            item = repository(storage).update(item_id, data.model_dump(exclude_unset=True))
        if item is None:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.delete("/{item_id}", status_code=204, summary=f"Supprimer : {resource.label}")
    def delete_item(
        item_id: int,
        storage: Storage = Depends(get_storage),
        _user=Depends(require_access(resource.delete)),
    ):
        """Suppression définitive, sans cascade vers les enregistrements qui y font référence."""
        with storage_errors(f"Impossible de supprimer : {resource.path}."):
            deleted = repository(storage).delete(item_id)
        if not deleted:
            raise HTTPException(status_code=404, detail=not_found)

    return router
