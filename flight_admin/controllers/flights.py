"""Flight controller consumed by the admin flights page."""

from __future__ import annotations

from fastapi import APIRouter, status

from flight_admin.controllers.dependencies import FlightRepositoryDep
from flight_admin.views import (
    ErrorResponse,
    FlightCreateRequest,
    FlightMutationResponse,
    FlightResponse,
    FlightUpdateRequest,
    SuccessResponse,
)

router = APIRouter(
    prefix="/flights",
    tags=["flights"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "/",
    response_model=FlightMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_flight(
    payload: FlightCreateRequest,
    flights: FlightRepositoryDep,
) -> FlightMutationResponse:
    db_flight = await flights.create(payload)
    return FlightMutationResponse(
        message="Vuelo creado exitosamente",
        vuelo=FlightResponse.model_validate(db_flight),
    )


@router.get("/", response_model=list[FlightResponse])
async def list_flights(flights: FlightRepositoryDep) -> list[FlightResponse]:
    return [FlightResponse.model_validate(f) for f in await flights.list_all()]


@router.get(
    "/{flight_id}",
    response_model=FlightResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_flight(flight_id: str, flights: FlightRepositoryDep) -> FlightResponse:
    return FlightResponse.model_validate(await flights.get(flight_id))


@router.api_route(
    "/{flight_id}",
    methods=["PUT", "PATCH"],
    response_model=FlightMutationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_flight(
    flight_id: str,
    payload: FlightUpdateRequest,
    flights: FlightRepositoryDep,
) -> FlightMutationResponse:
    db_flight = await flights.update(flight_id, payload)
    return FlightMutationResponse(
        message="Vuelo actualizado exitosamente",
        vuelo=FlightResponse.model_validate(db_flight),
    )


@router.delete(
    "/{flight_id}",
    response_model=SuccessResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_flight(flight_id: str, flights: FlightRepositoryDep) -> SuccessResponse:
    await flights.delete(flight_id)
    return SuccessResponse(message="Vuelo eliminado exitosamente")
