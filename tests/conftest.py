"""Pytest configuration and shared fixtures for Alexa bridge tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from alexa_bridge.core.models import SmartHomeDevice
from alexa_bridge.core.result import Ok
from alexa_bridge.hub import AccessoryRegistrar
from alexa_bridge.models import Config

LIGHT_ID = "4f9a3c2e-6b1d-4e8a-9c7f-2a5b8d1e3f60"
PLUG_ID = "a1b2c3d4-e5f6-4789-8abc-def012345678"


def make_device_payload(
    device_id: str = LIGHT_ID,
    display_name: str = "test light",
    category_type: str = "APPLIANCE",
    **provider_data: Any,
) -> dict[str, Any]:
    """Build a raw device record as returned by the Alexa API."""
    return {
        "id": device_id,
        "displayName": display_name,
        "description": "test",
        "supportedOperations": ["turnOff", "turnOn", "setBrightness"],
        "providerData": {
            "enabled": True,
            "categoryType": category_type,
            "deviceType": "LIGHT",
            **provider_data,
        },
    }


def make_device(**kwargs: Any) -> SmartHomeDevice:
    """Build a decoded device."""
    return SmartHomeDevice.model_validate(make_device_payload(**kwargs))


@pytest.fixture
def mock_config() -> Config:
    """Fixture providing mock configuration.

    Returns:
        Config instance with test values
    """
    return Config(
        amazon_domain="amazon.de",
        alexa_cookie="session-id=abc; csrf=12345",
        alexa_timeout=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def light_payload() -> dict[str, Any]:
    """Raw record of an appliance named 'test light'."""
    return make_device_payload()


@pytest.fixture
def group_payload() -> dict[str, Any]:
    """Raw record of a group named 'test light'."""
    return make_device_payload(device_id=PLUG_ID, category_type="GROUP")


@pytest.fixture
def mock_alexa_api(light_payload: dict[str, Any]) -> MagicMock:
    """Mock Alexa API returning one light."""
    api = MagicMock()
    api.get_devices = AsyncMock(return_value=Ok([light_payload]))
    api.get_device_states = AsyncMock(return_value=Ok({"deviceStates": [], "errors": []}))
    api.get_routines = AsyncMock(return_value=Ok([]))
    return api


@pytest.fixture
def registrar() -> AccessoryRegistrar:
    """Empty accessory registrar."""
    return AccessoryRegistrar()


@pytest.fixture
def payload_factory():
    """Factory for raw device records."""
    return make_device_payload


@pytest.fixture
def device_factory():
    """Factory for decoded devices."""
    return make_device
