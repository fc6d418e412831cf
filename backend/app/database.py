"""
Configuration de la connexion à la base de données relationnelle.
Le moteur n'est créé que lorsque le stockage "sql" est sélectionné.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

Base = declarative_base()


def make_session_factory(database_url: str, **engine_kwargs) -> sessionmaker:
    """Crée le moteur SQLAlchemy et retourne une fabrique de sessions liée."""
    engine = create_engine(database_url, **engine_kwargs)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(session_factory: sessionmaker) -> None:
    """Crée les tables manquantes (aucune migration gérée ici)."""
    import app.models  # noqa: F401 (enregistre tous les modèles dans Base.metadata)

    Base.metadata.create_all(bind=session_factory.kw["bind"])
