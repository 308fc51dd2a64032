"""Form draft for the create/edit flight modal and the patch built from it."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from flight_admin.views.flights import (
    CREW_FIELDS,
    REQUIRED_FLIGHT_FIELDS,
    FlightResponse,
)

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = {"costo": float, "asientosDisponibles": int}


def _to_number(converter: Callable[[str], Any], text: str) -> Any:
    try:
        return converter(text)
    except ValueError:
        logger.debug("Keeping non-numeric input %r as text", text)
        return text


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class FlightPatch:
    """Explicit sparse update.

    A key is present exactly when the field should change. Crew fields mapped
    to ``None`` are unassigned; crew fields absent from ``changes`` are left
    as they are on the server.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    def __contains__(self, name: object) -> bool:
        return name in self.changes

    @property
    def unassigned(self) -> frozenset[str]:
        return frozenset(
            name
            for name in CREW_FIELDS
            if name in self.changes and self.changes[name] is None
        )

    def to_payload(self) -> dict[str, Any]:
        return dict(self.changes)


@dataclass
class FlightDraft:
    """Editable mirror of a flight; every field starts as an empty string."""

    origen: Any = ""
    destino: Any = ""
    fechaSalida: Any = ""
    fechaLlegada: Any = ""
    hora: Any = ""
    costo: Any = ""
    asientosDisponibles: Any = ""
    avion: Any = ""
    aerolinea: Any = ""
    estado: Any = ""
    piloto: Any = ""
    copiloto: Any = ""
    azafata1: Any = ""
    azafata2: Any = ""
    azafata3: Any = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_flight(cls, flight: FlightResponse) -> "FlightDraft":
        values: dict[str, Any] = {}
        for name in cls.field_names():
            value = getattr(flight, name, None)
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, Enum):
                value = value.value
            values[name] = "" if value is None else value
        return cls(**values)

    def set(self, name: str, value: Any) -> None:
        """Assign a form input, converting numeric inputs like a number field.

        Text that does not parse as a number is stored as typed.
        """

        if name not in self.field_names():
            raise KeyError(name)
        converter = _NUMERIC_FIELDS.get(name)
        if converter is not None and isinstance(value, str) and value.strip():
            value = _to_number(converter, value)
        setattr(self, name, value)

    def missing_required(self) -> list[str]:
        return [name for name in REQUIRED_FLIGHT_FIELDS if _is_blank(getattr(self, name))]

    def to_create_payload(self) -> dict[str, Any]:
        return {
            name: (None if name in CREW_FIELDS and _is_blank(value) else value)
            for name, value in asdict(self).items()
        }

    def to_patch(self) -> FlightPatch:
        """Non-empty fields, plus every crew field (blank means unassign)."""

        changes: dict[str, Any] = {}
        for name, value in asdict(self).items():
            if name in CREW_FIELDS:
                changes[name] = None if _is_blank(value) else value
            elif not _is_blank(value):
                changes[name] = value
        return FlightPatch(changes)
