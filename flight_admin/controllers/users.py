"""User controller implementing CRUD and role-scoped endpoints."""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Query, status

from flight_admin.controllers.dependencies import UserRepositoryDep
from flight_admin.models.user import UserRole
from flight_admin.views import (
    ErrorResponse,
    UserCreateRequest,
    UserDeleteResponse,
    UserResponse,
    UserUpdateRequest,
    UserUpdateResponse,
)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

TextFilter = Annotated[Optional[str], Query(max_length=120)]


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_user(
    payload: UserCreateRequest,
    users: UserRepositoryDep,
) -> UserResponse:
    db_user = await users.create(payload)
    return UserResponse.model_validate(db_user)


@router.get("/", response_model=list[UserResponse])
async def list_users(users: UserRepositoryDep) -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in await users.list_all()]


@router.get("/search", response_model=list[UserResponse])
async def search_users(
    users: UserRepositoryDep,
    nombre: TextFilter = None,
    apellido: TextFilter = None,
    email: TextFilter = None,
    rol: Optional[UserRole] = None,
) -> list[UserResponse]:
    found = await users.search(nombre=nombre, apellido=apellido, email=email, rol=rol)
    return [UserResponse.model_validate(user) for user in found]


@router.get("/pilotos", response_model=list[UserResponse])
async def list_pilots(users: UserRepositoryDep) -> list[UserResponse]:
    pilots = await users.list_by_role(UserRole.PILOTO)
    return [UserResponse.model_validate(user) for user in pilots]


@router.get("/azafatas", response_model=list[UserResponse])
async def list_flight_attendants(users: UserRepositoryDep) -> list[UserResponse]:
    attendants = await users.list_by_role(UserRole.AZAFATA)
    return [UserResponse.model_validate(user) for user in attendants]


@router.get("/role/{rol}", response_model=list[UserResponse])
async def list_users_by_role(
    rol: UserRole,
    users: UserRepositoryDep,
) -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in await users.list_by_role(rol)]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(user_id: str, users: UserRepositoryDep) -> UserResponse:
    return UserResponse.model_validate(await users.get(user_id))


@router.api_route(
    "/{user_id}",
    methods=["PUT", "PATCH"],
    response_model=UserUpdateResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    users: UserRepositoryDep,
) -> UserUpdateResponse:
    db_user = await users.update(user_id, payload)
    return UserUpdateResponse(
        message="Datos de usuario actualizados exitosamente",
        user=UserResponse.model_validate(db_user),
    )


@router.delete(
    "/{user_id}",
    response_model=UserDeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_user(user_id: str, users: UserRepositoryDep) -> UserDeleteResponse:
    email = await users.delete(user_id)
    return UserDeleteResponse(
        message="Usuario eliminado exitosamente",
        userEmail=email,
    )
