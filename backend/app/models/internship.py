"""
Modèles SQLAlchemy pour les stages : lieux (services), périodes et affectations.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Text

from app.database import Base
from app.models.enums import ValidationStatus, db_enum


class Service(Base):
    """Lieu de stage externe (hôpital, clinique...)."""
    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=True)


class PeriodeDeStage(Base):
    """Fenêtre de stage nommée, partagée par plusieurs affectations."""
    __tablename__ = "periode_de_stages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)


class Internship(Base):
    """Affectation d'un élève à un service pour une période de stage."""
    __tablename__ = "internships"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)
    periode_de_stage_id = Column(Integer, ForeignKey("periode_de_stages.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    validation_status = Column(
        db_enum(ValidationStatus, "internship_validation_status"),
        default=ValidationStatus.PENDING,
    )
