"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse, SuccessResponse
from .flights import (
    CREW_FIELDS,
    REQUIRED_FLIGHT_FIELDS,
    FlightCreateRequest,
    FlightMutationResponse,
    FlightResponse,
    FlightUpdateRequest,
)
from .users import (
    UserCreateRequest,
    UserDeleteResponse,
    UserResponse,
    UserUpdateRequest,
    UserUpdateResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "UserUpdateResponse",
    "UserDeleteResponse",
    "FlightCreateRequest",
    "FlightUpdateRequest",
    "FlightResponse",
    "FlightMutationResponse",
    "CREW_FIELDS",
    "REQUIRED_FLIGHT_FIELDS",
    "ErrorResponse",
    "SuccessResponse",
]
