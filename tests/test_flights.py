"""End-to-end tests for the /flights endpoints."""

from __future__ import annotations

from uuid import uuid4

from conftest import flight_payload


def test_create_flight_returns_envelope(client):
    response = client.post("/flights/", json=flight_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Vuelo creado exitosamente"
    vuelo = body["vuelo"]
    assert vuelo["destino"] == "Cancun"
    assert vuelo["fechaSalida"] == "2025-06-20"
    assert vuelo["estado"] == "programado"
    assert vuelo["piloto"] is None


def test_create_flight_treats_blank_crew_as_unassigned(client):
    response = client.post(
        "/flights/", json=flight_payload(piloto="", azafata1="", azafata3=None)
    )

    assert response.status_code == 201
    vuelo = response.json()["vuelo"]
    assert vuelo["piloto"] is None
    assert vuelo["azafata1"] is None


def test_create_flight_requires_fields(client):
    payload = flight_payload()
    del payload["aerolinea"]
    del payload["hora"]

    response = client.post("/flights/", json=payload)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert any(message.startswith("aerolinea") for message in detail)
    assert any(message.startswith("hora") for message in detail)


def test_create_flight_rejects_unknown_status(client):
    response = client.post("/flights/", json=flight_payload(estado="perdido"))

    assert response.status_code == 400


def test_create_flight_rejects_malformed_time(client):
    response = client.post("/flights/", json=flight_payload(hora="8am"))

    assert response.status_code == 400
    assert response.json()["detail"] == ["hora: La hora debe tener el formato HH:MM"]


def test_create_flight_rejects_arrival_before_departure(client):
    response = client.post(
        "/flights/",
        json=flight_payload(fechaSalida="2025-06-22", fechaLlegada="2025-06-21"),
    )

    assert response.status_code == 400
    assert client.get("/flights/").json() == []


def test_create_flight_with_full_crew(client, create_user):
    pilot = create_user(rol="Piloto")
    copilot = create_user(rol="Piloto")
    attendants = [create_user(rol="Azafata") for _ in range(3)]

    response = client.post(
        "/flights/",
        json=flight_payload(
            piloto=pilot["id"],
            copiloto=copilot["id"],
            azafata1=attendants[0]["id"],
            azafata2=attendants[1]["id"],
            azafata3=attendants[2]["id"],
        ),
    )

    assert response.status_code == 201
    vuelo = response.json()["vuelo"]
    assert vuelo["piloto"] == pilot["id"]
    assert vuelo["azafata3"] == attendants[2]["id"]


def test_create_flight_rejects_crew_with_wrong_role(client, create_user):
    passenger = create_user(rol="Pasajero")

    response = client.post("/flights/", json=flight_payload(piloto=passenger["id"]))

    assert response.status_code == 400
    assert response.json()["detail"] == [
        "piloto: se esperaba un piloto pero el usuario es un pasajero."
    ]


def test_create_flight_rejects_unknown_crew_member(client):
    response = client.post("/flights/", json=flight_payload(azafata1=str(uuid4())))

    assert response.status_code == 400
    assert response.json()["detail"] == ["azafata1: usuario no encontrado."]


def test_list_and_get_flights(client, create_flight):
    first = create_flight(destino="Cancun")
    second = create_flight(destino="Monterrey")

    listed = client.get("/flights/").json()
    fetched = client.get(f"/flights/{second['id']}").json()

    assert [f["id"] for f in listed] == [first["id"], second["id"]]
    assert fetched["destino"] == "Monterrey"


def test_get_flight_with_malformed_id_is_bad_request(client):
    response = client.get("/flights/abc")

    assert response.status_code == 400
    assert response.json()["detail"] == "ID de vuelo inválido."


def test_get_unknown_flight_is_not_found(client):
    assert client.get(f"/flights/{uuid4()}").status_code == 404


def test_sparse_update_changes_only_status(client, create_flight):
    flight = create_flight(estado="programado")

    response = client.patch(f"/flights/{flight['id']}", json={"estado": "retrasado"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    updated = body["vuelo"]
    assert updated["estado"] == "retrasado"
    for name in ("origen", "destino", "fechaSalida", "fechaLlegada", "hora",
                 "costo", "asientosDisponibles", "avion", "aerolinea"):
        assert updated[name] == flight[name]


def test_blank_crew_field_unassigns_but_omission_keeps(client, create_user, create_flight):
    first = create_user(rol="Azafata")
    second = create_user(rol="Azafata")
    flight = create_flight(azafata1=first["id"], azafata2=second["id"])

    response = client.put(f"/flights/{flight['id']}", json={"azafata2": ""})

    assert response.status_code == 200
    updated = response.json()["vuelo"]
    assert updated["azafata2"] is None
    assert updated["azafata1"] == first["id"]


def test_update_reassigns_crew_after_role_check(client, create_user, create_flight):
    pilot = create_user(rol="Piloto")
    attendant = create_user(rol="Azafata")
    flight = create_flight()

    ok = client.patch(f"/flights/{flight['id']}", json={"copiloto": pilot["id"]})
    wrong = client.patch(f"/flights/{flight['id']}", json={"piloto": attendant["id"]})

    assert ok.status_code == 200
    assert ok.json()["vuelo"]["copiloto"] == pilot["id"]
    assert wrong.status_code == 400
    assert client.get(f"/flights/{flight['id']}").json()["piloto"] is None


def test_update_rejects_null_required_field(client, create_flight):
    flight = create_flight()

    response = client.patch(f"/flights/{flight['id']}", json={"destino": None})

    assert response.status_code == 400


def test_update_checks_dates_against_stored_values(client, create_flight):
    flight = create_flight(fechaSalida="2025-06-20", fechaLlegada="2025-06-21")

    response = client.patch(
        f"/flights/{flight['id']}", json={"fechaLlegada": "2025-06-19"}
    )

    assert response.status_code == 400
    assert client.get(f"/flights/{flight['id']}").json()["fechaLlegada"] == "2025-06-21"


def test_update_unknown_flight_is_not_found(client):
    response = client.patch(f"/flights/{uuid4()}", json={"estado": "cancelado"})

    assert response.status_code == 404


def test_delete_flight(client, create_flight):
    flight = create_flight()

    response = client.delete(f"/flights/{flight['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Vuelo eliminado exitosamente",
    }
    assert client.get(f"/flights/{flight['id']}").status_code == 404


def test_delete_unknown_flight_is_not_found(client, create_flight):
    create_flight()

    response = client.delete(f"/flights/{uuid4()}")

    assert response.status_code == 404
    assert len(client.get("/flights/").json()) == 1


def test_deleting_crew_user_unassigns_them(client, create_user, create_flight):
    pilot = create_user(rol="Piloto")
    attendant = create_user(rol="Azafata")
    flight = create_flight(piloto=pilot["id"], azafata1=attendant["id"])

    assert client.delete(f"/users/{pilot['id']}").status_code == 200

    stored = client.get(f"/flights/{flight['id']}").json()
    assert stored["piloto"] is None
    assert stored["azafata1"] == attendant["id"]


def test_resending_stored_crew_skips_role_check(client, create_user, create_flight):
    pilot = create_user(rol="Piloto")
    flight = create_flight(piloto=pilot["id"])
    client.patch(f"/users/{pilot['id']}", json={"rol": "Pasajero"})

    unchanged = client.patch(
        f"/flights/{flight['id']}",
        json={"estado": "retrasado", "piloto": pilot["id"]},
    )
    reassigned = client.patch(
        f"/flights/{flight['id']}", json={"copiloto": pilot["id"]}
    )

    assert unchanged.status_code == 200
    assert unchanged.json()["vuelo"]["estado"] == "retrasado"
    assert reassigned.status_code == 400
