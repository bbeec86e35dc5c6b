"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def bang() -> RuntimeError:
    return RuntimeError("bang")
