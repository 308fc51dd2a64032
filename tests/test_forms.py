"""Tests for the flight form draft and the sparse patch built from it."""

from __future__ import annotations

from datetime import date

import pytest

from flight_admin.client.forms import FlightDraft, FlightPatch
from flight_admin.models.flight import FlightStatus
from flight_admin.views.flights import FlightResponse


def _complete_draft(**overrides) -> FlightDraft:
    values = {
        "origen": "Ciudad de Mexico",
        "destino": "Cancun",
        "fechaSalida": "2025-06-20",
        "fechaLlegada": "2025-06-20",
        "hora": "08:30",
        "costo": 1899.0,
        "asientosDisponibles": 18,
        "avion": "Boeing 737",
        "aerolinea": "Aeromexico",
        "estado": "programado",
    }
    values.update(overrides)
    return FlightDraft(**values)


def test_new_draft_is_blank_and_reports_missing_fields():
    draft = FlightDraft()

    assert all(getattr(draft, name) == "" for name in FlightDraft.field_names())
    assert "destino" in draft.missing_required()
    assert "piloto" not in draft.missing_required()


def test_complete_draft_has_nothing_missing():
    assert _complete_draft().missing_required() == []
    assert _complete_draft(avion="  ").missing_required() == ["avion"]


def test_set_converts_numeric_inputs():
    draft = FlightDraft()

    draft.set("costo", "1500.50")
    draft.set("asientosDisponibles", "12")
    draft.set("destino", "Merida")

    assert draft.costo == 1500.5
    assert draft.asientosDisponibles == 12
    assert draft.destino == "Merida"


def test_set_keeps_unparseable_numbers_as_typed():
    draft = FlightDraft()

    draft.set("asientosDisponibles", "doce")

    assert draft.asientosDisponibles == "doce"


def test_set_rejects_unknown_field():
    with pytest.raises(KeyError):
        FlightDraft().set("capitan", "x")


def test_create_payload_sends_blank_crew_as_null():
    payload = _complete_draft(piloto="p-1").to_create_payload()

    assert payload["piloto"] == "p-1"
    assert payload["copiloto"] is None
    assert payload["azafata3"] is None
    assert payload["destino"] == "Cancun"


def test_patch_skips_blank_fields_but_always_carries_crew():
    draft = FlightDraft(estado="retrasado", azafata1="a-1")

    patch = draft.to_patch()

    assert dict(patch.changes) == {
        "estado": "retrasado",
        "piloto": None,
        "copiloto": None,
        "azafata1": "a-1",
        "azafata2": None,
        "azafata3": None,
    }
    assert "destino" not in patch
    assert patch.unassigned == {"piloto", "copiloto", "azafata2", "azafata3"}


def test_patch_is_read_only():
    patch = FlightPatch({"estado": "cancelado"})

    with pytest.raises(TypeError):
        patch.changes["estado"] = "programado"
    assert patch.to_payload() == {"estado": "cancelado"}
    assert patch.unassigned == frozenset()


def test_draft_from_flight_flattens_values():
    flight = FlightResponse(
        id="f-1",
        origen="Ciudad de Mexico",
        destino="Cancun",
        fechaSalida=date(2025, 6, 20),
        fechaLlegada=date(2025, 6, 21),
        hora="08:30",
        costo=1899,
        asientosDisponibles=18,
        avion="Boeing 737",
        aerolinea="Aeromexico",
        estado=FlightStatus.EN_VUELO,
        piloto="p-1",
    )

    draft = FlightDraft.from_flight(flight)

    assert draft.fechaSalida == "2025-06-20"
    assert draft.fechaLlegada == "2025-06-21"
    assert draft.estado == "enVuelo"
    assert draft.piloto == "p-1"
    assert draft.copiloto == ""
    assert draft.missing_required() == []
