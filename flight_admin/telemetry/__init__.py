"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    MUTATION_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    record_mutation,
)

__all__ = [
    "ERROR_COUNTER",
    "MUTATION_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "record_mutation",
]
