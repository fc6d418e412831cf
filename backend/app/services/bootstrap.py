"""
Initialisation des données au démarrage : compte administrateur et jeu de démonstration.
"""

import logging
from datetime import date

from app.config import Settings
from app.models.enums import UserRole
from app.schemas.user import UserCreate
from app.services import auth_service
from app.storage.base import Storage

logger = logging.getLogger(__name__)


def ensure_admin(storage: Storage, config: Settings) -> None:
    """Crée le compte administrateur configuré s'il n'existe pas encore."""
    if auth_service.find_by_username(storage, config.ADMIN_USERNAME) is not None:
        return
    auth_service.create_user(storage, UserCreate(
        username=config.ADMIN_USERNAME,
        password=config.ADMIN_PASSWORD,
        role=UserRole.ADMIN,
        full_name=config.ADMIN_FULL_NAME,
        email=config.ADMIN_EMAIL,
    ))


def seed_demo_data(storage: Storage) -> None:
    """
    Remplit un stockage vide avec des filières, classes, services, périodes,
    salles et matières de démonstration. Sans effet si des filières existent déjà.
    """
    if storage.filieres.list():
        return

    ip = storage.filieres.create({"name": "Infirmier Polyvalent", "abbreviation": "IP", "num_years": 3})
    sf = storage.filieres.create({"name": "Sage Femme", "abbreviation": "SF", "num_years": 3})

    for filiere, name, abbreviation in [
        (ip, "Infirmier Polyvalent 1ère Année", "IP1"),
        (ip, "Infirmier Polyvalent 2ème Année", "IP2"),
        (ip, "Infirmier Polyvalent 3ème Année", "IP3"),
        (sf, "Sage Femme 1ère Année", "SF1"),
    ]:
        storage.classes.create({"filiere_id": filiere.id, "name": name, "abbreviation": abbreviation})

    for name, location in [
        ("CHP EDDERAK", "Oujda"),
        ("Clinique MOULOUYA", "Nador"),
        ("Hôpital Régional", "Berkane"),
    ]:
        storage.services.create({"name": name, "location": location})

    storage.periodes.create({"name": "Period 1", "start_date": date(2023, 1, 10), "end_date": date(2023, 2, 10)})
    storage.periodes.create({"name": "Period 2", "start_date": date(2023, 3, 1), "end_date": date(2023, 4, 1)})

    for name in ("Room 201", "Room 105", "Room 305"):
        storage.rooms.create({"name": name})
    for name in ("Anatomy", "Pharmacology", "Critical Care"):
        storage.subjects.create({"name": name})

    logger.info("Données de démonstration chargées.")


def bootstrap(storage: Storage, config: Settings) -> None:
    ensure_admin(storage, config)
    if config.SEED_DEMO_DATA and config.STORAGE_BACKEND == "memory":
        seed_demo_data(storage)
