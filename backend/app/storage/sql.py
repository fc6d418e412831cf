"""
Stockage relationnel via SQLAlchemy.
Une session BDD par opération ; les filtres sont des égalités sur une colonne.
Les erreurs du moteur (connexion, contrainte) remontent telles quelles au routeur.
"""

import logging
import secrets
from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.models.user import UserSession
from app.storage.base import ENTITIES, Storage, utcnow

logger = logging.getLogger(__name__)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


class SqlRepository:
    def __init__(self, session_factory: sessionmaker, model, record_schema: type[BaseModel]):
        self._session_factory = session_factory
        self._model = model
        self._schema = record_schema
        self._columns = [attr.key for attr in inspect(model).column_attrs]

    def _to_record(self, row) -> BaseModel:
        return self._schema(**{key: getattr(row, key) for key in self._columns})

    def list(self, field: Optional[str] = None, value: Any = None) -> list[BaseModel]:
        stmt = select(self._model).order_by(self._model.id)
        if field is not None:
            stmt = stmt.where(getattr(self._model, field) == value)
        with self._session_factory() as db:
            rows = db.execute(stmt).scalars().all()
            return [self._to_record(r) for r in rows]

    def get(self, record_id: int) -> Optional[BaseModel]:
        with self._session_factory() as db:
            row = db.get(self._model, record_id)
            return self._to_record(row) if row is not None else None

    def create(self, values: dict) -> BaseModel:
        with self._session_factory() as db:
            row = self._model(**values)
            db.add(row)
            _commit(db)
            db.refresh(row)
            return self._to_record(row)

    def update(self, record_id: int, changes: dict) -> Optional[BaseModel]:
        with self._session_factory() as db:
            row = db.get(self._model, record_id)
            if row is None:
                return None
            for field, value in changes.items():
                if field != "id":
                    setattr(row, field, value)
            _commit(db)
            db.refresh(row)
            return self._to_record(row)

    def delete(self, record_id: int) -> bool:
        # Pas de cascade : une FK encore référencée fait échouer le commit
        with self._session_factory() as db:
            row = db.get(self._model, record_id)
            if row is None:
                return False
            db.delete(row)
            _commit(db)
            return True


class SqlSessionStore:
    def __init__(self, session_factory: sessionmaker, ttl: timedelta):
        self._session_factory = session_factory
        self._ttl = ttl

    def create(self, user_id: int) -> str:
        token = secrets.token_urlsafe(32)
        with self._session_factory() as db:
            db.add(UserSession(token=token, user_id=user_id, expires_at=utcnow() + self._ttl))
            _commit(db)
        return token

    def get_user_id(self, token: str) -> Optional[int]:
        with self._session_factory() as db:
            row = db.get(UserSession, token)
            if row is None:
                return None
            if row.expires_at <= utcnow():
                db.delete(row)
                _commit(db)
                return None
            return row.user_id

    def delete(self, token: str) -> None:
        with self._session_factory() as db:
            db.execute(delete(UserSession).where(UserSession.token == token))
            _commit(db)

    def purge_expired(self) -> int:
        with self._session_factory() as db:
            result = db.execute(delete(UserSession).where(UserSession.expires_at <= utcnow()))
            _commit(db)
            return result.rowcount or 0


def build_sql_storage(session_factory: sessionmaker, session_ttl: timedelta) -> Storage:
    repositories = {
        name: SqlRepository(session_factory, model, schema)
        for name, (model, schema) in ENTITIES.items()
    }
    logger.info("Stockage SQL initialisé (%d tables d'entités).", len(repositories))
    return Storage(sessions=SqlSessionStore(session_factory, session_ttl), **repositories)
