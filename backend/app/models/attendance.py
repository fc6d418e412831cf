"""
Modèles SQLAlchemy pour les présences : en classe et en stage.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Text

from app.database import Base
from app.models.enums import AttendanceStatus, db_enum


class Attendance(Base):
    __tablename__ = "attendance"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False)
    date = Column(Date, nullable=False)
    status = Column(db_enum(AttendanceStatus, "attendance_status"), default=AttendanceStatus.ABSENT)
    remarks = Column(Text, nullable=True)


class InternshipAttendance(Base):
    __tablename__ = "internship_attendance"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    internship_id = Column(Integer, ForeignKey("internships.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False)
    date = Column(Date, nullable=False)
    status = Column(db_enum(AttendanceStatus, "attendance_status"), default=AttendanceStatus.ABSENT)
    remarks = Column(Text, nullable=True)
