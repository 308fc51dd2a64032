"""Shared fixtures: the real app backed by a throwaway SQLite database."""

from __future__ import annotations

import asyncio
import os
import sys
import tempfile
from itertools import count
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

_WORK_DIR = Path(tempfile.mkdtemp(prefix="flight-admin-tests-"))
os.environ["DB_DSN"] = f"sqlite+aiosqlite:///{_WORK_DIR / 'test.db'}"
os.environ["DB_SERVERLESS"] = "true"
os.environ["LOG_FILE"] = str(_WORK_DIR / "app.log")
os.environ["LOG_COLORIZE"] = "false"

from flight_admin.database import drop_models  # noqa: E402
from flight_admin.main import app  # noqa: E402

_emails = count(1)


@pytest.fixture
def client():
    """Test client with freshly created tables, dropped again afterwards."""

    with TestClient(app) as test_client:
        yield test_client
    asyncio.run(drop_models())


def user_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "nombre": "Ana",
        "apellido": "Lopez",
        "email": f"user{next(_emails)}@example.com",
        "password": "Secreta123",
        "telefono": "5551234567",
        "direccion": "Av. Reforma 100",
        "rol": "Pasajero",
    }
    payload.update(overrides)
    return payload


def flight_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "origen": "Ciudad de Mexico",
        "destino": "Cancun",
        "fechaSalida": "2025-06-20",
        "fechaLlegada": "2025-06-20",
        "hora": "08:30",
        "costo": 1899,
        "asientosDisponibles": 18,
        "avion": "Boeing 737",
        "aerolinea": "Aeromexico",
        "estado": "programado",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_user(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post("/users/", json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_flight(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post("/flights/", json=flight_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["vuelo"]

    return _create
