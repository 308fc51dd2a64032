"""Pydantic schemas for flight administration."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from flight_admin.models.flight import FlightStatus

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

CREW_FIELDS = ("piloto", "copiloto", "azafata1", "azafata2", "azafata3")

# Wire name -> ORM attribute.
FLIGHT_FIELD_COLUMNS: dict[str, str] = {
    "origen": "origin",
    "destino": "destination",
    "fechaSalida": "departure_date",
    "fechaLlegada": "arrival_date",
    "hora": "departure_time",
    "costo": "cost",
    "asientosDisponibles": "available_seats",
    "avion": "aircraft",
    "aerolinea": "airline",
    "estado": "status",
    "piloto": "pilot_id",
    "copiloto": "copilot_id",
    "azafata1": "attendant1_id",
    "azafata2": "attendant2_id",
    "azafata3": "attendant3_id",
}

REQUIRED_FLIGHT_FIELDS = tuple(
    name for name in FLIGHT_FIELD_COLUMNS if name not in CREW_FIELDS
)


def _crew_reference(value: Any) -> Any:
    """Map blank crew values to ``None`` and normalise user ids."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("El identificador de tripulante debe ser texto")
    if not value.strip():
        return None
    try:
        return str(UUID(value.strip()))
    except ValueError:
        raise ValueError("ID de usuario inválido.") from None


def _validate_time(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not _TIME_PATTERN.match(value):
        raise ValueError("La hora debe tener el formato HH:MM")
    return value


class FlightCreateRequest(BaseModel):
    """Request model for creating a flight; crew slots are optional."""

    origen: str = Field(..., min_length=1, max_length=120)
    destino: str = Field(..., min_length=1, max_length=120)
    fechaSalida: date
    fechaLlegada: date
    hora: str
    costo: float = Field(..., ge=0)
    asientosDisponibles: int = Field(..., ge=0)
    avion: str = Field(..., min_length=1, max_length=120)
    aerolinea: str = Field(..., min_length=1, max_length=120)
    estado: FlightStatus
    piloto: Optional[str] = None
    copiloto: Optional[str] = None
    azafata1: Optional[str] = None
    azafata2: Optional[str] = None
    azafata3: Optional[str] = None

    @field_validator(*CREW_FIELDS, mode="before")
    @classmethod
    def unassigned_crew(cls, value: Any) -> Any:
        return _crew_reference(value)

    @field_validator("origen", "destino", "avion", "aerolinea", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("hora")
    @classmethod
    def validate_time(cls, value: str) -> str:
        return _validate_time(value)

    def to_columns(self) -> dict[str, Any]:
        return {
            column: getattr(self, name)
            for name, column in FLIGHT_FIELD_COLUMNS.items()
        }


class FlightUpdateRequest(BaseModel):
    """Sparse patch for a flight.

    Presence is tracked through ``model_fields_set``: a field left out of the
    body is untouched, a crew field sent as ``""`` or ``null`` is unassigned.
    """

    origen: Optional[str] = Field(None, min_length=1, max_length=120)
    destino: Optional[str] = Field(None, min_length=1, max_length=120)
    fechaSalida: Optional[date] = None
    fechaLlegada: Optional[date] = None
    hora: Optional[str] = None
    costo: Optional[float] = Field(None, ge=0)
    asientosDisponibles: Optional[int] = Field(None, ge=0)
    avion: Optional[str] = Field(None, min_length=1, max_length=120)
    aerolinea: Optional[str] = Field(None, min_length=1, max_length=120)
    estado: Optional[FlightStatus] = None
    piloto: Optional[str] = None
    copiloto: Optional[str] = None
    azafata1: Optional[str] = None
    azafata2: Optional[str] = None
    azafata3: Optional[str] = None

    @field_validator(*CREW_FIELDS, mode="before")
    @classmethod
    def unassigned_crew(cls, value: Any) -> Any:
        return _crew_reference(value)

    @field_validator("origen", "destino", "avion", "aerolinea", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("hora")
    @classmethod
    def validate_time(cls, value: Optional[str]) -> Optional[str]:
        return _validate_time(value)

    @model_validator(mode="after")
    def reject_null_required(self) -> "FlightUpdateRequest":
        nulls = [
            name
            for name in REQUIRED_FLIGHT_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Campos que no pueden ser nulos: {', '.join(nulls)}")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Return ORM attribute -> value for every field present in the body."""

        return {
            column: getattr(self, name)
            for name, column in FLIGHT_FIELD_COLUMNS.items()
            if name in self.model_fields_set
        }


class FlightResponse(BaseModel):
    """Flight representation returned by the API."""

    id: str
    origen: str = Field(..., validation_alias=AliasChoices("origen", "origin"))
    destino: str = Field(
        ..., validation_alias=AliasChoices("destino", "destination")
    )
    fechaSalida: date = Field(
        ..., validation_alias=AliasChoices("fechaSalida", "departure_date")
    )
    fechaLlegada: date = Field(
        ..., validation_alias=AliasChoices("fechaLlegada", "arrival_date")
    )
    hora: str = Field(..., validation_alias=AliasChoices("hora", "departure_time"))
    costo: float = Field(..., validation_alias=AliasChoices("costo", "cost"))
    asientosDisponibles: int = Field(
        ..., validation_alias=AliasChoices("asientosDisponibles", "available_seats")
    )
    avion: str = Field(..., validation_alias=AliasChoices("avion", "aircraft"))
    aerolinea: str = Field(
        ..., validation_alias=AliasChoices("aerolinea", "airline")
    )
    estado: FlightStatus = Field(
        ..., validation_alias=AliasChoices("estado", "status")
    )
    piloto: Optional[str] = Field(
        None, validation_alias=AliasChoices("piloto", "pilot_id")
    )
    copiloto: Optional[str] = Field(
        None, validation_alias=AliasChoices("copiloto", "copilot_id")
    )
    azafata1: Optional[str] = Field(
        None, validation_alias=AliasChoices("azafata1", "attendant1_id")
    )
    azafata2: Optional[str] = Field(
        None, validation_alias=AliasChoices("azafata2", "attendant2_id")
    )
    azafata3: Optional[str] = Field(
        None, validation_alias=AliasChoices("azafata3", "attendant3_id")
    )
    createdAt: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )
    updatedAt: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("updatedAt", "updated_at")
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FlightMutationResponse(BaseModel):
    """Envelope returned by flight writes, consumed by the admin client."""

    success: bool = True
    message: str
    vuelo: Optional[FlightResponse] = None
