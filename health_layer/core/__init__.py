"""Core health types."""

from health_layer.core.errors import InvalidStatusError
from health_layer.core.health import Health, HealthBuilder
from health_layer.core.payload import HealthPayload, from_payload, to_payload
from health_layer.core.status import Status

__all__ = [
    "InvalidStatusError",
    "Health",
    "HealthBuilder",
    "HealthPayload",
    "from_payload",
    "to_payload",
    "Status",
]
