"""Flight persistence operations and crew-assignment rules."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flight_admin.models.flight import CREW_SLOTS, Flight
from flight_admin.models.user import User, UserRole
from flight_admin.services.errors import InvalidDataError, NotFoundError
from flight_admin.services.users import parse_identifier
from flight_admin.telemetry import record_mutation
from flight_admin.views.flights import FlightCreateRequest, FlightUpdateRequest

logger = logging.getLogger(__name__)

_SLOT_LABELS = {
    "pilot_id": "piloto",
    "copilot_id": "copiloto",
    "attendant1_id": "azafata1",
    "attendant2_id": "azafata2",
    "attendant3_id": "azafata3",
}


def _role_label(role: UserRole) -> str:
    if role is UserRole.PILOTO:
        return "un piloto"
    if role is UserRole.AZAFATA:
        return "una azafata"
    if role is UserRole.PASAJERO:
        return "un pasajero"
    if role is UserRole.ADMIN:
        return "un administrador"
    raise ValueError(f"Unhandled role {role!r}")


class FlightDomainService:
    """Consistency rules applied to a fully merged flight."""

    @staticmethod
    def is_schedule_valid(values: dict[str, Any]) -> bool:
        """Arrival date must not precede departure date."""
        return values["arrival_date"] >= values["departure_date"]


class FlightRepository:
    """Read/write access to the ``flights`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, raw_id: str) -> Flight:
        flight_id = parse_identifier(raw_id, "ID de vuelo inválido.")
        result = await self.session.execute(
            select(Flight).where(Flight.id == flight_id)
        )
        flight = result.scalar_one_or_none()
        if flight is None:
            raise NotFoundError("Vuelo no encontrado.")
        return flight

    async def list_all(self) -> list[Flight]:
        result = await self.session.execute(
            select(Flight).order_by(Flight.created_at)
        )
        return list(result.scalars().all())

    async def create(self, payload: FlightCreateRequest) -> Flight:
        values = payload.to_columns()
        await self._validate(values)

        flight = Flight(**values)
        self.session.add(flight)
        await self.session.commit()
        await self.session.refresh(flight)

        logger.info(
            "Created flight %s %s -> %s on %s",
            flight.id,
            flight.origin,
            flight.destination,
            flight.departure_date,
        )
        record_mutation("flight", "create")
        return flight

    async def update(self, raw_id: str, payload: FlightUpdateRequest) -> Flight:
        flight = await self.get(raw_id)
        changes = payload.to_changes()

        merged = {
            column: getattr(flight, column)
            for column in ("departure_date", "arrival_date", *CREW_SLOTS)
        }
        merged.update(changes)
        # Crew slots resent with their stored value are not re-checked.
        reassigned = {
            column
            for column, value in changes.items()
            if column in CREW_SLOTS and value != getattr(flight, column)
        }
        await self._validate(merged, only=reassigned)

        for column, value in changes.items():
            setattr(flight, column, value)

        await self.session.commit()
        await self.session.refresh(flight)

        logger.info("Updated flight %s (fields: %s)", flight.id, sorted(changes))
        record_mutation("flight", "update")
        return flight

    async def delete(self, raw_id: str) -> None:
        flight = await self.get(raw_id)
        await self.session.delete(flight)
        await self.session.commit()

        logger.info("Deleted flight %s", flight.id)
        record_mutation("flight", "delete")

    async def _validate(
        self,
        values: dict[str, Any],
        only: set[str] | None = None,
    ) -> None:
        """Check schedule order and crew roles; ``only`` limits crew checks."""

        errors: list[str] = []
        if not FlightDomainService.is_schedule_valid(values):
            errors.append(
                "La fecha de llegada no puede ser anterior a la fecha de salida."
            )

        slots = [
            slot
            for slot in CREW_SLOTS
            if values.get(slot) is not None and (only is None or slot in only)
        ]
        for slot in slots:
            message = await self._check_crew_member(slot, values[slot])
            if message:
                errors.append(message)

        if errors:
            raise InvalidDataError(errors)

    async def _check_crew_member(self, slot: str, user_id: str) -> str | None:
        label = _SLOT_LABELS[slot]
        required_role = CREW_SLOTS[slot]
        result = await self.session.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None:
            return f"{label}: usuario no encontrado."
        if user.role is not required_role:
            return (
                f"{label}: se esperaba {_role_label(required_role)} "
                f"pero el usuario es {_role_label(user.role)}."
            )
        return None
