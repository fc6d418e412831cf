"""
Service d'authentification : hachage des mots de passe, connexion, sessions et comptes.

Politique retenue :
- message unique pour identifiant inconnu ou mot de passe erroné ;
- vérification du hash même pour un identifiant inconnu (hash factice), la
  comparaison de werkzeug étant en temps constant.
"""

import logging
from functools import lru_cache
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from app.schemas.user import UserCreate, UserRecord, UserUpdate
from app.storage.base import Storage

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Nom d'utilisateur ou mot de passe invalide."


def hash_password(password: str) -> str:
    return generate_password_hash(password)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return generate_password_hash("mot-de-passe-factice")


def find_by_username(storage: Storage, username: str) -> Optional[UserRecord]:
    matches = storage.users.list("username", username)
    return matches[0] if matches else None


def authenticate(storage: Storage, username: str, password: str) -> Optional[UserRecord]:
    """Retourne l'utilisateur si les identifiants sont valides, sinon None."""
    user = find_by_username(storage, username)
    if user is None:
        check_password_hash(_dummy_hash(), password)
        return None
    if not check_password_hash(user.password_hash, password):
        return None
    return user


def open_session(storage: Storage, user: UserRecord) -> str:
    token = storage.sessions.create(user.id)
    logger.info("Connexion de %s (id=%d)", user.username, user.id)
    return token


def close_session(storage: Storage, token: str) -> None:
    storage.sessions.delete(token)


def create_user(storage: Storage, data: UserCreate) -> UserRecord:
    """
    Crée un compte avec mot de passe haché.
    Lève une ValueError si le nom d'utilisateur existe déjà.
    Ne crée jamais de fiche enseignant (étape manuelle séparée).
    """
    if find_by_username(storage, data.username) is not None:
        raise ValueError("Ce nom d'utilisateur existe déjà.")
    values = data.model_dump(exclude={"password"})
    values["password_hash"] = hash_password(data.password)
    user = storage.users.create(values)
    logger.info("Compte créé : %s (rôle %s)", user.username, user.role.value)
    return user


def update_user(storage: Storage, user_id: int, data: UserUpdate) -> Optional[UserRecord]:
    """Met à jour les champs fournis ; un nouveau mot de passe est haché avant stockage."""
    changes = data.model_dump(exclude_unset=True, exclude={"password"})
    if "username" in changes:
        other = find_by_username(storage, changes["username"])
        if other is not None and other.id != user_id:
            raise ValueError("Ce nom d'utilisateur existe déjà.")
    if data.password is not None:
        changes["password_hash"] = hash_password(data.password)
    return storage.users.update(user_id, changes)
