"""
Stockage en mémoire (mode démo) : un dictionnaire et un compteur par entité.
Réservé à un processus unique. Les identifiants et les sessions supportent les
accès concurrents du pool de requêtes et du scheduler ; rien n'est transactionnel.
"""

import itertools
import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from pydantic import BaseModel

from app.storage.base import ENTITIES, Storage, utcnow


class MemoryRepository:
    def __init__(self, record_schema: type[BaseModel]):
        self._schema = record_schema
        self._records: Dict[int, BaseModel] = {}
        self._ids = itertools.count(1)

    def list(self, field: Optional[str] = None, value: Any = None) -> list[BaseModel]:
        records = list(self._records.values())
        if field is None:
            return records
        return [r for r in records if getattr(r, field) == value]

    def get(self, record_id: int) -> Optional[BaseModel]:
        return self._records.get(record_id)

    def create(self, values: dict) -> BaseModel:
        # Les identifiants ne sont jamais réutilisés, même après suppression
        record = self._schema(id=next(self._ids), **values)
        self._records[record.id] = record
        return record

    def update(self, record_id: int, changes: dict) -> Optional[BaseModel]:
        existing = self._records.get(record_id)
        if existing is None:
            return None
        changes = {k: v for k, v in changes.items() if k != "id"}
        updated = existing.model_copy(update=changes)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class MemorySessionStore:
    def __init__(self, ttl: timedelta):
        self._ttl = ttl
        self._sessions: Dict[str, tuple[int, datetime]] = {}

    def create(self, user_id: int) -> str:
        token = secrets.token_urlsafe(32)
        self._sessions[token] = (user_id, utcnow() + self._ttl)
        return token

    def get_user_id(self, token: str) -> Optional[int]:
        entry = self._sessions.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if expires_at <= utcnow():
            # la purge planifiée peut avoir retiré le jeton entre-temps
            self._sessions.pop(token, None)
            return None
        return user_id

    def delete(self, token: str) -> None:
        self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        now = utcnow()
        expired = [t for t, (_, expires_at) in list(self._sessions.items()) if expires_at <= now]
        return sum(1 for token in expired if self._sessions.pop(token, None) is not None)


def build_memory_storage(session_ttl: timedelta) -> Storage:
    repositories = {name: MemoryRepository(schema) for name, (_, schema) in ENTITIES.items()}
    return Storage(sessions=MemorySessionStore(session_ttl), **repositories)
