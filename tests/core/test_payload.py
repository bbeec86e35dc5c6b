"""Tests for the health wire payload."""

import pytest
from pydantic import ValidationError

from health_layer.config import HealthConfig
from health_layer.core.health import Health
from health_layer.core.payload import HealthPayload, from_payload, to_payload
from health_layer.core.status import Status


def test_payload_with_details():
    health = Health.up().with_detail("a", "b").build()
    assert to_payload(health).to_dict() == {"status": "UP", "details": {"a": "b"}}


def test_payload_omits_empty_details():
    assert to_payload(Health.down().build()).to_dict() == {"status": "DOWN"}


def test_payload_description():
    health = Health.from_status(Status("DEGRADED", "replica lagging")).build()
    payload = to_payload(health)
    assert payload.description == "replica lagging"

    hidden = to_payload(health, HealthConfig(include_description=False))
    assert hidden.to_dict() == {"status": "DEGRADED"}


def test_payload_hides_details():
    health = Health.up().with_detail("a", "b").build()
    payload = to_payload(health, HealthConfig(show_details=False))
    assert payload.details is None
    assert payload.to_dict() == {"status": "UP"}


def test_payload_keeps_detail_order():
    health = Health.up().with_detail("z", 1).with_detail("a", 2).build()
    assert list(to_payload(health).details) == ["z", "a"]


def test_from_payload():
    health = Health.down().with_detail("a", "b").build()
    assert from_payload(to_payload(health)) == health


def test_from_payload_dict():
    health = from_payload({"status": "OUT_OF_SERVICE", "details": {"reason": "maintenance"}})
    assert health.status == Status.OUT_OF_SERVICE
    assert health.details["reason"] == "maintenance"


def test_from_payload_rejects_missing_status():
    with pytest.raises(ValidationError):
        from_payload({"details": {}})


def test_payload_model():
    payload = HealthPayload(status="UP")
    assert payload.description is None
    assert payload.details is None


def test_payload_from_health_built_with_code():
    health = Health(status="DOWN", details={"a": "b"})  # type: ignore
    assert to_payload(health).to_dict() == {"status": "DOWN", "details": {"a": "b"}}
