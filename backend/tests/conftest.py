"""
Configuration partagée pour tous les tests.
Override la dépendance get_storage : chaque test reçoit un stockage vierge,
en mémoire ou SQLite (même contrat, même batterie de tests).
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import create_tables
from app.dependencies import get_storage
from app.main import app
from app.models.enums import UserRole
from app.schemas.user import UserCreate
from app.services import auth_service
from app.storage.memory import build_memory_storage
from app.storage.sql import build_sql_storage

PASSWORD = "secret123"
TTL = timedelta(hours=24)


def make_sql_storage(ttl: timedelta = TTL):
    """Stockage SQL sur une base SQLite en mémoire partagée par toutes les connexions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    create_tables(session_factory)
    return build_sql_storage(session_factory, ttl)


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    if request.param == "memory":
        return build_memory_storage(TTL)
    return make_sql_storage()


@pytest.fixture
def client(storage):
    """Client HTTP de test branché sur le stockage du test."""
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_user(storage, username: str, role: UserRole, password: str = PASSWORD):
    return auth_service.create_user(storage, UserCreate(
        username=username,
        password=password,
        role=role,
        full_name=username.capitalize(),
    ))


def login(client, username: str, password: str = PASSWORD):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response


@pytest.fixture
def admin_client(client, storage):
    make_user(storage, "directrice", UserRole.ADMIN)
    login(client, "directrice")
    return client


@pytest.fixture
def teacher_client(client, storage):
    make_user(storage, "formateur", UserRole.TEACHER)
    login(client, "formateur")
    return client


@pytest.fixture
def student_client(client, storage):
    make_user(storage, "etudiant", UserRole.STUDENT)
    login(client, "etudiant")
    return client
