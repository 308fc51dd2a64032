"""Action handlers for the admin flights page.

The controller owns an :class:`AdminFlightsState` and is the only thing that
mutates it. Every server interaction goes through :class:`AdminFlightsApi`,
which reports failures as values; the controller turns them into banners.
Updates and deletes are gated by a blocking ``confirm`` callback supplied by
the hosting UI (a dialog, a terminal prompt, or a stub in tests).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from flight_admin.client.api import AdminFlightsApi, ApiResult
from flight_admin.client.forms import FlightDraft
from flight_admin.client.state import AdminFlightsState, Banner
from flight_admin.models.user import UserRole
from flight_admin.views.flights import FlightResponse
from flight_admin.views.users import UserResponse

logger = logging.getLogger(__name__)

CONFIRM_UPDATE = "¿Estás seguro de que deseas actualizar este vuelo?"
CONFIRM_DELETE = "¿Estás seguro de que deseas eliminar este vuelo?"

# Crew form field -> role its options are drawn from.
CREW_FIELD_ROLES: dict[str, UserRole] = {
    "piloto": UserRole.PILOTO,
    "copiloto": UserRole.PILOTO,
    "azafata1": UserRole.AZAFATA,
    "azafata2": UserRole.AZAFATA,
    "azafata3": UserRole.AZAFATA,
}


class AdminFlightsController:
    def __init__(
        self,
        api: AdminFlightsApi,
        confirm: Callable[[str], bool],
        state: Optional[AdminFlightsState] = None,
    ):
        self.api = api
        self.confirm = confirm
        self.state = state or AdminFlightsState()

    # Loading

    def load(self) -> None:
        """Fetch flights and the pilot/attendant option lists."""

        self.state.loading = True
        try:
            self.refresh_flights()
            for result, attribute in (
                (self.api.list_pilots(), "pilots"),
                (self.api.list_attendants(), "attendants"),
            ):
                if result.success:
                    setattr(self.state, attribute, result.data)
                else:
                    self._show_error(result.message)
        finally:
            self.state.loading = False

    def refresh_flights(self) -> bool:
        result = self.api.list_flights()
        if not result.success:
            self._show_error(result.message)
            return False
        self.state.flights = result.data
        return True

    def crew_options(self, field_name: str) -> list[tuple[str, str]]:
        """``(id, "nombre apellido")`` choices for one crew select."""

        role = CREW_FIELD_ROLES[field_name]
        if role is UserRole.PILOTO:
            people: list[UserResponse] = self.state.pilots
        elif role is UserRole.AZAFATA:
            people = self.state.attendants
        elif role in (UserRole.PASAJERO, UserRole.ADMIN):
            people = []
        else:
            raise ValueError(f"Unhandled role {role!r}")
        return [(person.id, f"{person.nombre} {person.apellido}") for person in people]

    # Filters

    def set_filters(
        self,
        destino: Optional[str] = None,
        fecha: Optional[str] = None,
    ) -> list[FlightResponse]:
        if destino is not None:
            self.state.filter_destino = destino
        if fecha is not None:
            self.state.filter_fecha = fecha
        return self.state.filtered_flights

    # Form lifecycle

    def open_create(self) -> None:
        self.reset_form()
        self.state.show_modal = True

    def edit(self, flight: FlightResponse) -> None:
        self.state.editing_id = flight.id
        self.state.draft = FlightDraft.from_flight(flight)
        self.state.show_modal = True

    def update_field(self, name: str, value: Any) -> None:
        self.state.draft.set(name, value)

    def reset_form(self) -> None:
        self.state.draft = FlightDraft()
        self.state.editing_id = None
        self.state.show_modal = False

    def dismiss_banner(self) -> None:
        self.state.banner = None

    # Actions

    def submit(self) -> Optional[ApiResult]:
        """Create or update from the draft; ``None`` when the user cancels."""

        self.state.banner = None
        if self.state.is_editing:
            if not self.confirm(CONFIRM_UPDATE):
                return None
            patch = self.state.draft.to_patch()
            logger.debug(
                "Updating flight %s with %s (unassigned: %s)",
                self.state.editing_id,
                sorted(patch.changes),
                sorted(patch.unassigned),
            )
            result = self.api.update_flight(self.state.editing_id, patch)
        else:
            missing = self.state.draft.missing_required()
            if missing:
                result = ApiResult(
                    False, f"Campos obligatorios: {', '.join(missing)}"
                )
                self._show_error(result.message)
                return result
            result = self.api.create_flight(self.state.draft.to_create_payload())

        if result.success:
            self.state.banner = Banner("success", result.message)
            self.reset_form()
            self.refresh_flights()
        else:
            self._show_error(result.message)
        return result

    def delete(self, flight_id: str) -> Optional[ApiResult]:
        """Delete a flight after confirmation; ``None`` when the user cancels."""

        if not self.confirm(CONFIRM_DELETE):
            return None

        self.state.banner = None
        result = self.api.delete_flight(flight_id)
        if result.success:
            self.state.banner = Banner("success", result.message)
            if self.state.editing_id == flight_id:
                self.reset_form()
            self.refresh_flights()
        else:
            self._show_error(result.message)
        return result

    def _show_error(self, message: str) -> None:
        self.state.banner = Banner("error", message or "Ocurrió un error inesperado.")


__all__ = [
    "AdminFlightsController",
    "CONFIRM_UPDATE",
    "CONFIRM_DELETE",
    "CREW_FIELD_ROLES",
]
