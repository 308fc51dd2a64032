"""SQLAlchemy model for scheduled flights and their crew assignments."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import uuid4

from sqlalchemy import Column, Date, DateTime
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import Float, ForeignKey, Integer, String

from flight_admin.models.base import Base
from flight_admin.models.user import UserRole


class FlightStatus(str, Enum):
    """Operational states a flight moves through."""

    PROGRAMADO = "programado"
    RETRASADO = "retrasado"
    CANCELADO = "cancelado"
    EN_VUELO = "enVuelo"
    ATERRIZADO = "aterrizado"


# Crew slot column -> role the referenced user must hold.
CREW_SLOTS: dict[str, UserRole] = {
    "pilot_id": UserRole.PILOTO,
    "copilot_id": UserRole.PILOTO,
    "attendant1_id": UserRole.AZAFATA,
    "attendant2_id": UserRole.AZAFATA,
    "attendant3_id": UserRole.AZAFATA,
}


def _new_id() -> str:
    return str(uuid4())


def _crew_column() -> Column:
    return Column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )


class Flight(Base):
    __tablename__ = "flights"

    id = Column(String(36), primary_key=True, default=_new_id)
    origin = Column(String(120), nullable=False)
    destination = Column(String(120), nullable=False, index=True)
    departure_date = Column(Date, nullable=False, index=True)
    arrival_date = Column(Date, nullable=False)
    departure_time = Column(String(5), nullable=False)
    cost = Column(Float, nullable=False)
    available_seats = Column(Integer, nullable=False)
    aircraft = Column(String(120), nullable=False)
    airline = Column(String(120), nullable=False)
    status = Column(
        SqlEnum(FlightStatus, name="flight_status"),
        nullable=False,
        default=FlightStatus.PROGRAMADO,
    )
    pilot_id = _crew_column()
    copilot_id = _crew_column()
    attendant1_id = _crew_column()
    attendant2_id = _crew_column()
    attendant3_id = _crew_column()
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


__all__ = ["Flight", "FlightStatus", "CREW_SLOTS"]
