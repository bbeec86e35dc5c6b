"""Immutable health check results and their builder."""

from health_layer.config import HealthConfig
from health_layer.core import (
    Health,
    HealthBuilder,
    HealthPayload,
    InvalidStatusError,
    Status,
    from_payload,
    to_payload,
)

__all__ = [
    # Health
    "Health",
    "HealthBuilder",
    "Status",
    # Errors
    "InvalidStatusError",
    # Config
    "HealthConfig",
    # Payload
    "HealthPayload",
    "to_payload",
    "from_payload",
]
