"""Admin client for the flights page: state, derivations and actions."""

from .api import AdminFlightsApi, ApiResult
from .controller import AdminFlightsController
from .filters import filter_flights
from .forms import FlightDraft, FlightPatch
from .state import AdminFlightsState, Banner

__all__ = [
    "AdminFlightsApi",
    "AdminFlightsController",
    "AdminFlightsState",
    "ApiResult",
    "Banner",
    "FlightDraft",
    "FlightPatch",
    "filter_flights",
]
