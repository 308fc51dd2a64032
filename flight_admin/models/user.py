"""SQLAlchemy model for application users."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import uuid4

from sqlalchemy import Column, DateTime
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import String

from flight_admin.models.base import Base


class UserRole(str, Enum):
    """Closed set of roles a user account can hold."""

    PASAJERO = "Pasajero"
    PILOTO = "Piloto"
    AZAFATA = "Azafata"
    ADMIN = "Admin"


def _new_id() -> str:
    return str(uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    first_name = Column(String(80), nullable=False)
    last_name = Column(String(80), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(256), nullable=False)
    phone = Column(String(40), nullable=False)
    address = Column(String(255), nullable=False)
    passport = Column(String(255), nullable=True)
    role = Column(
        SqlEnum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.PASAJERO,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


__all__ = ["User", "UserRole"]
