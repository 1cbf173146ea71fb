"""Tests for the device endpoints."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from alexa_bridge.core.errors import HttpError
from alexa_bridge.core.result import Err, Ok

LIGHT_ID = "4f9a3c2e-6b1d-4e8a-9c7f-2a5b8d1e3f60"
POWER_ON = '{"namespace":"Alexa.PowerController","name":"powerState","value":"ON"}'

class TestDevices:
    """Tests for device endpoints."""

    def test_refresh_and_list(self, client: TestClient) -> None:
        """Test a refresh registers the discovered light."""
        refresh = client.post("/devices/refresh")
        assert refresh.json() == {"status": "ok", "accessories": 1, "errors": [], "removed": []}

        response = client.get("/devices")
        assert response.status_code == 200
        assert response.json() == [
            {
                "uuid": LIGHT_ID,
                "display_name": "test light",
                "device_type": "LIGHT",
                "enabled": True,
                "supported_operations": ["turnOff", "turnOn", "setBrightness"],
            }
        ]

    def test_list_empty_when_shut_down(self, client: TestClient, mock_alexa_api: MagicMock) -> None:
        """Test no accessories are exposed after a terminal error."""
        client.post("/devices/refresh")
        mock_alexa_api.get_devices = AsyncMock(return_value=Ok({"unexpected": True}))

        refresh = client.post("/devices/refresh")
        assert refresh.json()["status"] == "shutdown"
        assert client.get("/devices").json() == []

    def test_state_unknown_accessory(self, client: TestClient) -> None:
        """Test state of an unregistered device is 404."""
        response = client.get(f"/devices/{LIGHT_ID}/state")
        assert response.status_code == 404

    def test_state(self, client: TestClient, mock_alexa_api: MagicMock) -> None:
        """Test capability states of a registered accessory."""
        client.post("/devices/refresh")
        mock_alexa_api.get_device_states = AsyncMock(return_value=Ok({
            "deviceStates": [{"entity": {"entityId": LIGHT_ID}, "capabilityStates": [POWER_ON]}],
            "errors": [],
        }))

        response = client.get(f"/devices/{LIGHT_ID}/state")

        assert response.status_code == 200
        assert response.json() == {
            "uuid": LIGHT_ID,
            "capability_states": [
                {"namespace": "Alexa.PowerController", "name": "powerState", "value": "ON"}
            ],
        }

    def test_state_alexa_error(self, client: TestClient, mock_alexa_api: MagicMock) -> None:
        """Test Alexa failures map to 502."""
        client.post("/devices/refresh")
        mock_alexa_api.get_device_states = AsyncMock(return_value=Err(HttpError("boom")))

        response = client.get(f"/devices/{LIGHT_ID}/state")

        assert response.status_code == 502
        assert response.json() == {"detail": "boom"}

    def test_refresh_reports_duplicate_ids(self, client: TestClient, mock_alexa_api: MagicMock, payload_factory) -> None:
        """Test a repeated device id is listed once and reported as an error."""
        mock_alexa_api.get_devices = AsyncMock(return_value=Ok([payload_factory(), payload_factory()]))

        refresh = client.post("/devices/refresh")

        assert refresh.json() == {
            "status": "ok",
            "accessories": 1,
            "errors": [f"id: '{LIGHT_ID}' is a duplicate Smart Home device id"],
            "removed": [],
        }
        assert len(client.get("/devices").json()) == 1
