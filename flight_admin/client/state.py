"""View state for the admin flights page, independent of any UI toolkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from flight_admin.client.filters import filter_flights
from flight_admin.client.forms import FlightDraft
from flight_admin.views.flights import FlightResponse
from flight_admin.views.users import UserResponse


@dataclass(frozen=True)
class Banner:
    """Dismissible notification shown above the flight table."""

    kind: Literal["success", "error"]
    text: str


@dataclass
class AdminFlightsState:
    flights: list[FlightResponse] = field(default_factory=list)
    pilots: list[UserResponse] = field(default_factory=list)
    attendants: list[UserResponse] = field(default_factory=list)
    draft: FlightDraft = field(default_factory=FlightDraft)
    editing_id: Optional[str] = None
    show_modal: bool = False
    banner: Optional[Banner] = None
    filter_destino: str = ""
    filter_fecha: str = ""
    loading: bool = False

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def filtered_flights(self) -> list[FlightResponse]:
        # Derived on every read so it always tracks flights and both filters.
        return filter_flights(self.flights, self.filter_destino, self.filter_fecha)
