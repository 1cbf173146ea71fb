"""Fixtures for router tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from alexa_bridge.hub import AccessoryRegistrar
from alexa_bridge.main import app
from alexa_bridge.services.device_states import DeviceStateService
from alexa_bridge.services.discovery import DiscoveryPipeline, DiscoveryRunner
from alexa_bridge.services.routines import RoutineService


@pytest.fixture
def client(mock_alexa_api: MagicMock, registrar: AccessoryRegistrar) -> TestClient:
    """Test client with services wired to a mock Alexa API.

    The lifespan is not run, so no real Alexa call happens.
    """
    app.state.registrar = registrar
    app.state.runner = DiscoveryRunner(DiscoveryPipeline(mock_alexa_api, registrar))
    app.state.state_service = DeviceStateService(mock_alexa_api)
    app.state.routine_service = RoutineService(mock_alexa_api)
    return TestClient(app)
