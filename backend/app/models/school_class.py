"""
Modèle SQLAlchemy pour les classes.
Nommé school_class pour éviter le conflit avec le mot-clé Python 'class'.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text

from app.database import Base


class SchoolClass(Base):
    __tablename__ = "classes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    filiere_id = Column(Integer, ForeignKey("filieres.id"), nullable=False)
    name = Column(Text, nullable=False)
    abbreviation = Column(Text, nullable=False)
