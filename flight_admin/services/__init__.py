"""Persistence services for users and flights."""

from .errors import (
    ConflictError,
    InvalidDataError,
    InvalidIdentifierError,
    NotFoundError,
    ServiceError,
)
from .flights import FlightDomainService, FlightRepository
from .users import UserRepository, parse_identifier

__all__ = [
    "ServiceError",
    "InvalidDataError",
    "InvalidIdentifierError",
    "NotFoundError",
    "ConflictError",
    "UserRepository",
    "FlightRepository",
    "FlightDomainService",
    "parse_identifier",
]
