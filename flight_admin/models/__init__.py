"""SQLAlchemy models for the MVC architecture."""

from .base import Base
from .flight import CREW_SLOTS, Flight, FlightStatus  # noqa: F401
from .user import User, UserRole  # noqa: F401

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Flight",
    "FlightStatus",
    "CREW_SLOTS",
]
