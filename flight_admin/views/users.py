"""Pydantic schemas for user interactions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)

from flight_admin.models.user import UserRole

REQUIRED_USER_FIELDS = (
    "nombre",
    "apellido",
    "email",
    "password",
    "telefono",
    "direccion",
)

# Wire name -> ORM attribute. Password is handled separately (hashed).
USER_FIELD_COLUMNS: dict[str, str] = {
    "nombre": "first_name",
    "apellido": "last_name",
    "email": "email",
    "telefono": "phone",
    "direccion": "address",
    "pasaporte": "passport",
    "rol": "role",
}

_NON_NULLABLE_FIELDS = frozenset(
    {"nombre", "apellido", "email", "telefono", "direccion", "rol"}
)


class UserCreateRequest(BaseModel):
    """Request model for admin-side user creation."""

    nombre: str
    apellido: str
    email: EmailStr
    password: str
    telefono: str
    direccion: str
    rol: UserRole = UserRole.PASAJERO

    @model_validator(mode="before")
    @classmethod
    def require_all_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name in REQUIRED_USER_FIELDS:
            value = data.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValueError("Todos los campos son obligatorios")
        return data

    @field_validator("nombre", "apellido", "telefono", "direccion")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class UserUpdateRequest(BaseModel):
    """Sparse patch for a user.

    Only the fields present in the request body are applied; a field sent
    with an empty string is a real value, distinct from leaving it out.
    """

    nombre: Optional[str] = None
    apellido: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    pasaporte: Optional[str] = None
    rol: Optional[UserRole] = None

    @model_validator(mode="after")
    def reject_null_required(self) -> "UserUpdateRequest":
        nulls = sorted(
            name
            for name in self.model_fields_set & _NON_NULLABLE_FIELDS
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Campos que no pueden ser nulos: {', '.join(nulls)}")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Return ORM attribute -> value for every field present in the body."""

        return {
            USER_FIELD_COLUMNS[name]: getattr(self, name)
            for name in self.model_fields_set
            if name in USER_FIELD_COLUMNS
        }


class UserResponse(BaseModel):
    """User representation returned by the API; never carries the password."""

    id: str
    nombre: str = Field(..., validation_alias=AliasChoices("nombre", "first_name"))
    apellido: str = Field(..., validation_alias=AliasChoices("apellido", "last_name"))
    email: str
    telefono: str = Field(..., validation_alias=AliasChoices("telefono", "phone"))
    direccion: str = Field(..., validation_alias=AliasChoices("direccion", "address"))
    pasaporte: Optional[str] = Field(
        None, validation_alias=AliasChoices("pasaporte", "passport")
    )
    rol: UserRole = Field(..., validation_alias=AliasChoices("rol", "role"))
    createdAt: datetime = Field(
        ..., validation_alias=AliasChoices("createdAt", "created_at")
    )
    updatedAt: datetime = Field(
        ..., validation_alias=AliasChoices("updatedAt", "updated_at")
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserUpdateResponse(BaseModel):
    message: str
    user: UserResponse


class UserDeleteResponse(BaseModel):
    message: str
    userEmail: str
