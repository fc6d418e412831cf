"""
Modèle SQLAlchemy pour les filières (parcours de formation infirmière).
"""

from sqlalchemy import Column, Integer, Text

from app.database import Base


class Filiere(Base):
    __tablename__ = "filieres"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    abbreviation = Column(Text, nullable=False)
    num_years = Column(Integer, nullable=False)
