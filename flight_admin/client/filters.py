"""Derived views over the admin flight list."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Iterable, TypeVar

T = TypeVar("T")


def _field(flight: Any, name: str) -> Any:
    if isinstance(flight, Mapping):
        return flight.get(name)
    return getattr(flight, name, None)


def _date_text(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return "" if value is None else str(value)


def filter_flights(
    flights: Iterable[T],
    destino: str = "",
    fecha: str = "",
) -> list[T]:
    """Return the flights matching both filters, in source order.

    ``destino`` matches as a case-insensitive substring of the destination;
    ``fecha`` must equal the departure date (``YYYY-MM-DD``) exactly. An empty
    filter matches everything. Records may be API models or plain mappings;
    the input is never mutated.
    """

    needle = destino.casefold() if destino else ""
    selected: list[T] = []
    for flight in flights:
        if needle and needle not in (_field(flight, "destino") or "").casefold():
            continue
        if fecha and _date_text(_field(flight, "fechaSalida")) != fecha:
            continue
        selected.append(flight)
    return selected
