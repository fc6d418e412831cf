"""
Câblage des dépendances FastAPI : stockage, utilisateur courant, contrôle des rôles.

Le stockage est construit une seule fois au démarrage (lifespan) puis rangé dans
app.state ; les routes le reçoivent via get_storage, que les tests surchargent.
"""

import enum
import logging
from datetime import timedelta
from typing import Optional

from fastapi import Depends, HTTPException, Request

from app.config import Settings, settings
from app.database import create_tables, make_session_factory
from app.models.enums import UserRole
from app.schemas.user import UserRecord
from app.storage.base import Storage
from app.storage.memory import build_memory_storage
from app.storage.sql import build_sql_storage

logger = logging.getLogger(__name__)


def build_storage(config: Settings) -> Storage:
    """Instancie le stockage choisi par STORAGE_BACKEND ("memory" ou "sql")."""
    ttl = timedelta(hours=config.SESSION_TTL_HOURS)
    if config.STORAGE_BACKEND == "memory":
        logger.info("Stockage en mémoire (données perdues au redémarrage).")
        return build_memory_storage(ttl)
    if config.STORAGE_BACKEND == "sql":
        session_factory = make_session_factory(config.DATABASE_URL, pool_pre_ping=True)
        create_tables(session_factory)
        return build_sql_storage(session_factory, ttl)
    raise ValueError(f"STORAGE_BACKEND inconnu : {config.STORAGE_BACKEND!r}")


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_current_user(request: Request, storage: Storage = Depends(get_storage)) -> Optional[UserRecord]:
    """Retourne l'utilisateur de la session courante, ou None si aucune session valide."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    user_id = storage.sessions.get_user_id(token)
    if user_id is None:
        return None
    return storage.users.get(user_id)


class Access(enum.IntEnum):
    """Seuils d'accès, du plus faible au plus fort."""
    PUBLIC = 0
    AUTHENTICATED = 1
    TEACHER = 2  # enseignant ou administrateur
    ADMIN = 3


ROLE_ACCESS = {
    UserRole.STUDENT: Access.AUTHENTICATED,
    UserRole.TEACHER: Access.TEACHER,
    UserRole.ADMIN: Access.ADMIN,
}

FORBIDDEN_MESSAGES = {
    Access.TEACHER: "Accès réservé aux enseignants.",
    Access.ADMIN: "Accès réservé aux administrateurs.",
}


def require_access(level: Access):
    """
    Fabrique de dépendance : 401 sans session valide, 403 si le rôle est insuffisant.
    Aucun contrôle par enregistrement (un enseignant peut modifier toute présence).
    """
    def dependency(user: Optional[UserRecord] = Depends(get_current_user)) -> Optional[UserRecord]:
        if level == Access.PUBLIC:
            return user
        if user is None:
            raise HTTPException(status_code=401, detail="Authentification requise.")
        if ROLE_ACCESS[user.role] < level:
            raise HTTPException(status_code=403, detail=FORBIDDEN_MESSAGES[level])
        return user

    return dependency
