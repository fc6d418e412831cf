"""
Modèles SQLAlchemy pour l'emploi du temps : enseignants, matières, salles et créneaux.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.database import Base


class Teacher(Base):
    """Fiche enseignant, liée manuellement à un compte utilisateur."""
    __tablename__ = "teachers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    full_name = Column(Text, nullable=False)
    subject = Column(Text, nullable=True)


class Subject(Base):
    __tablename__ = "subjects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)


class Timetable(Base):
    """Créneau hebdomadaire : day_of_week 0 (dimanche) à 6, heures au format HH:MM."""
    __tablename__ = "timetables"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    day_of_week = Column(Integer, nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
