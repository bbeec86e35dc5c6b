"""Pydantic wire model for health results."""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel

from health_layer.config import HealthConfig
from health_layer.core.health import Health
from health_layer.core.status import Status

logger = logging.getLogger(__name__)


class HealthPayload(BaseModel):
    """JSON shape of a Health. Empty description and details are left out."""

    status: str
    description: Optional[str] = None
    details: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def to_payload(health: Health, config: Optional[HealthConfig] = None) -> HealthPayload:
    """
    Render a Health into its wire payload.

    Args:
        health: The health to render
        config: Rendering options, defaults to HealthConfig()

    Returns:
        HealthPayload with status code, optional description and details
    """
    config = config or HealthConfig()
    description = health.status.description if config.include_description else ""
    details: Optional[dict[str, Any]] = None
    if health.details:
        if config.show_details:
            details = dict(health.details)
        else:
            logger.debug("Hiding %d health details from payload", len(health.details))
    return HealthPayload(
        status=health.status.code,
        description=description or None,
        details=details,
    )


def from_payload(payload: Union[HealthPayload, dict[str, Any]]) -> Health:
    """
    Rebuild a Health from a payload or its dict form.

    Raises:
        pydantic.ValidationError: If the dict does not match HealthPayload
    """
    if not isinstance(payload, HealthPayload):
        payload = HealthPayload.model_validate(payload)
    status = Status(payload.status, payload.description or "")
    return Health.Builder(status, payload.details or {}).build()
