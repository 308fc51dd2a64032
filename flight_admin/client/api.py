"""HTTP bindings used by the admin flights page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from flight_admin.client.forms import FlightPatch
from flight_admin.views.flights import FlightResponse
from flight_admin.views.users import UserResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one server round trip; never raised, always returned."""

    success: bool
    message: str = ""
    data: Any = None


def _error_message(response: httpx.Response, body: Any) -> str:
    if isinstance(body, dict):
        detail = body.get("detail", body.get("message"))
        if isinstance(detail, list):
            return "; ".join(str(item) for item in detail)
        if detail:
            return str(detail)
    return f"Error {response.status_code} del servidor"


class AdminFlightsApi:
    """Thin wrapper over ``httpx.Client`` for the flight and crew endpoints."""

    def __init__(self, http: httpx.Client):
        self.http = http

    def list_flights(self) -> ApiResult:
        return self._parse_list(self._send("GET", "/flights/"), FlightResponse)

    def list_pilots(self) -> ApiResult:
        return self._parse_list(self._send("GET", "/users/pilotos"), UserResponse)

    def list_attendants(self) -> ApiResult:
        return self._parse_list(self._send("GET", "/users/azafatas"), UserResponse)

    def create_flight(self, payload: dict[str, Any]) -> ApiResult:
        result = self._send("POST", "/flights/", json=payload)
        return self._with_flight(result)

    def update_flight(self, flight_id: str, patch: FlightPatch) -> ApiResult:
        result = self._send("PATCH", f"/flights/{flight_id}", json=patch.to_payload())
        return self._with_flight(result)

    def delete_flight(self, flight_id: str) -> ApiResult:
        return self._send("DELETE", f"/flights/{flight_id}")

    def _send(self, method: str, url: str, **kwargs: Any) -> ApiResult:
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return ApiResult(False, "No se pudo conectar con el servidor.")

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            logger.info("%s %s -> %s", method, url, response.status_code)
            return ApiResult(False, _error_message(response, body), body)

        message = body.get("message", "") if isinstance(body, dict) else ""
        return ApiResult(True, message, body)

    @staticmethod
    def _parse_list(result: ApiResult, model: type) -> ApiResult:
        if not result.success:
            return result
        try:
            items = [model.model_validate(item) for item in result.data or []]
        except ValidationError as exc:
            logger.warning("Unexpected %s payload: %s", model.__name__, exc)
            return ApiResult(False, "Respuesta inesperada del servidor.")
        return ApiResult(True, result.message, items)

    @staticmethod
    def _with_flight(result: ApiResult) -> ApiResult:
        if not result.success:
            return result
        raw = result.data.get("vuelo") if isinstance(result.data, dict) else None
        if raw is None:
            return ApiResult(True, result.message, None)
        try:
            flight = FlightResponse.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Unexpected flight payload: %s", exc)
            return ApiResult(False, "Respuesta inesperada del servidor.")
        return ApiResult(True, result.message, flight)
