"""
Modèle SQLAlchemy pour la table students.
Filière et classe sont optionnelles : un élève peut être inscrit avant affectation.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.database import Base
from app.models.enums import StudentStatus, db_enum


class Student(Base):
    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(Text, nullable=False)
    id_card_number = Column(String(50), unique=True, nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    email = Column(String(255), unique=True, nullable=True)
    filiere_id = Column(Integer, ForeignKey("filieres.id"), nullable=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)
    status = Column(db_enum(StudentStatus, "student_status"), default=StudentStatus.ACTIVE)
    documents = Column(Text, nullable=True)
