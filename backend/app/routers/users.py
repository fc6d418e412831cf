"""
Router pour la gestion des comptes utilisateurs (administrateurs uniquement).
Le hash du mot de passe n'est jamais renvoyé.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import Access, get_storage, require_access
from app.routers.crud import storage_errors
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services import auth_service
from app.storage.base import Storage

router = APIRouter(
    prefix="/api/users",
    tags=["Utilisateurs"],
    dependencies=[Depends(require_access(Access.ADMIN))],
)


@router.get("", response_model=List[UserResponse], summary="Lister les comptes")
def list_users(storage: Storage = Depends(get_storage)):
    with storage_errors("Impossible de lister : users."):
        return storage.users.list()


@router.get("/{user_id}", response_model=UserResponse, summary="Détail d'un compte")
def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    with storage_errors("Impossible de lire : users."):
        user = storage.users.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user


@router.post("", response_model=UserResponse, status_code=201, summary="Créer un compte")
def create_user(data: UserCreate, storage: Storage = Depends(get_storage)):
    """Crée un compte de tout rôle. Ne crée pas de fiche enseignant."""
    with storage_errors("Impossible de créer : users."):
        try:
            return auth_service.create_user(storage, data)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))


@router.put("/{user_id}", response_model=UserResponse, summary="Modifier un compte")
def update_user(user_id: int, data: UserUpdate, storage: Storage = Depends(get_storage)):
    with storage_errors("Impossible de modifier : users."):
        try:
            user = auth_service.update_user(storage, user_id, data)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user


@router.delete("/{user_id}", status_code=204, summary="Supprimer un compte")
def delete_user(user_id: int, storage: Storage = Depends(get_storage)):
    with storage_errors("Impossible de supprimer : users."):
        deleted = storage.users.delete(user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
