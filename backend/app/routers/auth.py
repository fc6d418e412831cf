"""
Router d'authentification : inscription, connexion, déconnexion, utilisateur courant.
La session est un jeton opaque côté serveur, transporté dans un cookie HttpOnly.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.config import settings
from app.dependencies import get_current_user, get_storage
from app.models.enums import UserRole
from app.schemas.user import LoginRequest, UserCreate, UserRecord, UserResponse
from app.services import auth_service
from app.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentification"])


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


@router.post("/register", response_model=UserResponse, status_code=201, summary="Créer un compte")
def register(
    data: UserCreate,
    response: Response,
    storage: Storage = Depends(get_storage),
    current: Optional[UserRecord] = Depends(get_current_user),
):
    """
    Crée un compte utilisateur.

    - Un administrateur connecté peut créer tout rôle et conserve sa propre session.
    - Sinon seul le rôle "student" est accepté ; un visiteur anonyme est
      connecté sous le nouveau compte.
    """
    is_admin = current is not None and current.role == UserRole.ADMIN
    if not is_admin and data.role != UserRole.STUDENT:
        raise HTTPException(status_code=403, detail="Seul un administrateur peut attribuer ce rôle.")

    try:
        user = auth_service.create_user(storage, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if current is None:
        _set_session_cookie(response, auth_service.open_session(storage, user))
    return user


@router.post("/login", response_model=UserResponse, summary="Se connecter")
def login(data: LoginRequest, response: Response, storage: Storage = Depends(get_storage)):
    """Ouvre une session de SESSION_TTL_HOURS heures (expiration fixe, non glissante)."""
    user = auth_service.authenticate(storage, data.username, data.password)
    if user is None:
        logger.info("Échec de connexion pour %r", data.username)
        raise HTTPException(status_code=401, detail=auth_service.INVALID_CREDENTIALS)

    _set_session_cookie(response, auth_service.open_session(storage, user))
    return user


@router.post("/logout", summary="Se déconnecter")
def logout(request: Request, response: Response, storage: Storage = Depends(get_storage)):
    """Invalide immédiatement la session courante (sans effet s'il n'y en a pas)."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        auth_service.close_session(storage, token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Déconnexion réussie."}


@router.get("/user", response_model=Optional[UserResponse], summary="Utilisateur courant")
def whoami(current: Optional[UserRecord] = Depends(get_current_user)):
    """
    Retourne l'utilisateur connecté, ou null si aucune session valide.
    L'absence de session n'est pas une erreur : le frontend distingue ainsi
    "chargement en cours" de "non connecté".
    """
    return current
