"""
Modèles SQLAlchemy pour les comptes utilisateurs et leurs sessions serveur.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.database import Base
from app.models.enums import UserRole, db_enum


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(db_enum(UserRole, "user_role"), nullable=False, default=UserRole.STUDENT)
    full_name = Column(Text, nullable=False)
    email = Column(String(255), nullable=True)


class UserSession(Base):
    """Session ouverte par /login : jeton opaque, expiration fixe."""
    __tablename__ = "sessions"

    token = Column(String(128), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
