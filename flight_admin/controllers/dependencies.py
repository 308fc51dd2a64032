"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flight_admin.database import get_session
from flight_admin.services.flights import FlightRepository
from flight_admin.services.users import UserRepository

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_flight_repository(session: SessionDep) -> FlightRepository:
    return FlightRepository(session)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
FlightRepositoryDep = Annotated[FlightRepository, Depends(get_flight_repository)]


__all__ = [
    "SessionDep",
    "UserRepositoryDep",
    "FlightRepositoryDep",
    "get_user_repository",
    "get_flight_repository",
]
